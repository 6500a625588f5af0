"""
Config tree interface and a pydantic-backed implementation.

A tree is owned by the caller. The registry only holds a reference to it and
hands it to the codec, which reads it on save and mutates it in place on load.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from servicecfg.exceptions import CodecError


class ConfigTree(ABC):
    """Abstract mutable container of typed settings."""

    @abstractmethod
    def to_data(self) -> dict[str, Any]:
        """
        Snapshot the tree as plain JSON-compatible data.

        Returns:
            Nested dict of setting values
        """
        pass

    @abstractmethod
    def apply_data(self, data: Mapping[str, Any]) -> None:
        """
        Apply setting values to the tree in place.

        Values are applied one by one; a failure part way leaves the settings
        applied so far in place.

        Args:
            data: Nested mapping of setting values

        Raises:
            CodecError: If some values were rejected
        """
        pass


class ModelTree(ConfigTree):
    """Exposes a caller-owned pydantic model instance as a config tree."""

    def __init__(self, model: BaseModel) -> None:
        self.model = model

    def to_data(self) -> dict[str, Any]:
        return self.model.model_dump(mode="json")

    def apply_data(self, data: Mapping[str, Any]) -> None:
        rejected: list[str] = []
        self._apply(self.model, data, "", rejected)
        if rejected:
            raise CodecError("tree.rejected_keys", keys=", ".join(rejected))

    def _apply(self, model: BaseModel, data: Mapping[str, Any], prefix: str, rejected: list[str]) -> None:
        fields = type(model).model_fields
        for key, value in data.items():
            if key not in fields:
                # Unknown settings are dropped, e.g. ones removed in a newer version
                continue

            dotted = f"{prefix}{key}"
            current = getattr(model, key)
            if isinstance(current, BaseModel) and isinstance(value, Mapping):
                self._apply(current, value, f"{dotted}.", rejected)
                continue

            try:
                # Runs field validators and constraints, assigns in place on success
                model.__pydantic_validator__.validate_assignment(model, key, value)
            except PydanticValidationError:
                rejected.append(dotted)

    def __repr__(self) -> str:
        return f"ModelTree({type(self.model).__name__})"
