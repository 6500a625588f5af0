"""Result models for load/save operations."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel


class PersistenceFailure(BaseModel):
    """A load or save that was caught at the unit boundary."""

    service: str
    path: Path
    operation: Literal["load", "save"]
    kind: Literal["storage", "codec"]
    error_type: str
    message: str

    @classmethod
    def from_exception(
        cls,
        service: str,
        path: Path,
        operation: Literal["load", "save"],
        exc: Exception,
    ) -> "PersistenceFailure":
        """Build a failure record, classifying OSError as a storage failure."""
        return cls(
            service=service,
            path=path,
            operation=operation,
            kind="storage" if isinstance(exc, OSError) else "codec",
            error_type=type(exc).__name__,
            message=str(exc),
        )
