"""Domain ports: contracts implemented outside the domain."""

from ospreylint.domain.ports.reporter import ReporterProtocol
from ospreylint.domain.ports.rule import RuleCheck

__all__ = [
    "RuleCheck",
    "ReporterProtocol",
]
