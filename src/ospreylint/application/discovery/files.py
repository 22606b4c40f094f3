"""Source file discovery from paths given on the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ospreylint.domain.exceptions.source import SourceReadError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

OSPREY_EXTENSIONS = (".osp",)

DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".venv",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        "__pycache__",
    },
)


def discover_sources(
    paths: Iterable[Path],
    extensions: Iterable[str] = OSPREY_EXTENSIONS,
    exclude: frozenset[str] = DEFAULT_EXCLUDES,
) -> tuple[Path, ...]:
    """Expand paths into the list of source files to lint.

    Files are taken as given, whatever their extension. Directories are
    scanned recursively, in sorted order, for files with one of the
    extensions; excluded directory names are skipped. Each file appears
    once, at its first occurrence.

    Args:
        paths: Files and directories
        extensions: Suffixes of source files inside directories
        exclude: Directory names to skip

    Returns:
        Files in discovery order

    Raises:
        SourceReadError: A path does not exist
        ValueError: extensions is empty
    """
    suffixes = tuple(extensions)
    if not suffixes:
        raise ValueError("extensions must not be empty")

    found: list[Path] = []
    seen: set[Path] = set()

    def add(path: Path) -> None:
        key = path.resolve()
        if key not in seen:
            seen.add(key)
            found.append(path)

    for path in paths:
        if path.is_file():
            add(path)
        elif path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if not candidate.is_file() or candidate.suffix not in suffixes:
                    continue
                relative = candidate.relative_to(path)
                # Skip excluded directories at any depth
                if any(part in exclude for part in relative.parts[:-1]):
                    continue
                add(candidate)
        else:
            raise SourceReadError(path, "no such file or directory")

    return tuple(found)
