"""Lint findings about a VariantConfig."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """One lint finding.

    ``variant`` and ``compound_index`` point at the variant or compound rule
    (by position in ``compound_variants``) the finding is about.
    """

    rule: str
    severity: Severity
    message: str
    variant: str | None = None
    compound_index: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def location(self) -> str:
        """``compound=N`` or ``variant=name``; empty when neither is set."""
        if self.compound_index is not None:
            return f"compound={self.compound_index}"
        if self.variant:
            return f"variant={self.variant}"
        return ""

    def __str__(self) -> str:
        where = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value}{where}: {self.message}"
