"""Domain models used across the project."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class PlaceValidationResult:
    """Outcome of checking a batch of places against the India classifier."""

    valid: bool
    invalid_places: List[str] = field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render the camelCase payload returned to API callers."""
        payload: Dict[str, Any] = {"valid": self.valid, "invalidPlaces": list(self.invalid_places)}
        if self.message is not None:
            payload["message"] = self.message
        return payload


@dataclass(slots=True)
class ImportResults:
    """Per-upload counters for a spreadsheet import."""

    success: int = 0
    failed: int = 0
    errors: List[str] = field(default_factory=list)

    def record_failure(self, row_number: int, reason: str) -> None:
        self.failed += 1
        self.errors.append(f"Row {row_number}: {reason}")

    def summary(self) -> str:
        return f"Import completed: {self.success} successful, {self.failed} failed"

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "failed": self.failed, "errors": list(self.errors)}


class RowValidationError(ValueError):
    """A spreadsheet row cannot be turned into a document."""

__all__ = ["PlaceValidationResult", "ImportResults", "RowValidationError"]
