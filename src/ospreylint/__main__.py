"""Allow `python -m ospreylint`."""

from ospreylint.presentation.cli import main

raise SystemExit(main())
