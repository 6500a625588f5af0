"""Tests for applying settings to pydantic-backed trees."""

from pathlib import Path
from typing import Literal

import pytest
from pydantic import BaseModel, Field, field_validator

from servicecfg.exceptions import CodecError
from servicecfg.tree import ModelTree


class Colors(BaseModel):
    primary: str = "#ffffff"
    accent: str = "#ff0000"


class Theme(BaseModel):
    name: str = "default"
    font_size: int = Field(default=12, ge=6, le=72)
    mode: Literal["light", "dark"] = "dark"
    colors: Colors = Field(default_factory=Colors)
    tags: list[str] = Field(default_factory=list)
    background: Path | None = None


def test_to_data_dumps_json_values() -> None:
    theme = Theme(background=Path("img") / "bg.png")

    data = ModelTree(theme).to_data()

    assert data["font_size"] == 12
    assert data["colors"] == {"primary": "#ffffff", "accent": "#ff0000"}
    assert isinstance(data["background"], str)


def test_apply_data_mutates_model_in_place() -> None:
    theme = Theme()
    colors = theme.colors
    tree = ModelTree(theme)

    tree.apply_data({"name": "solar", "mode": "light", "colors": {"accent": "#00ff00"}, "tags": ["a", "b"]})

    assert tree.model is theme
    assert theme.name == "solar"
    assert theme.mode == "light"
    assert theme.tags == ["a", "b"]
    # Nested models are updated, not replaced
    assert theme.colors is colors
    assert colors.accent == "#00ff00"
    assert colors.primary == "#ffffff"


def test_apply_data_ignores_unknown_keys() -> None:
    theme = Theme()

    ModelTree(theme).apply_data({"removed_setting": True, "name": "x"})

    assert theme.name == "x"
    assert not hasattr(theme, "removed_setting")


def test_apply_data_keeps_valid_values_when_some_are_rejected() -> None:
    theme = Theme()

    with pytest.raises(CodecError) as exc_info:
        ModelTree(theme).apply_data(
            {"name": "partial", "font_size": 2, "mode": "neon", "colors": {"primary": 5, "accent": "#123456"}}
        )

    message = str(exc_info.value)
    assert "font_size" in message
    assert "mode" in message
    assert "colors.primary" in message
    assert theme.name == "partial"
    assert theme.font_size == 12
    assert theme.mode == "dark"
    assert theme.colors.primary == "#ffffff"
    assert theme.colors.accent == "#123456"


def test_apply_data_rejects_non_mapping_for_nested_model() -> None:
    theme = Theme()

    with pytest.raises(CodecError):
        ModelTree(theme).apply_data({"colors": "red"})

    assert theme.colors.primary == "#ffffff"


def test_round_trip_through_data_into_fresh_model() -> None:
    original = Theme(name="n", font_size=20, mode="light", tags=["x"], background=Path("bg.png"))
    fresh = Theme()

    ModelTree(fresh).apply_data(ModelTree(original).to_data())

    assert fresh == original


class Account(BaseModel):
    handle: str = "GUEST"

    @field_validator("handle")
    @classmethod
    def upper_handle(cls, v: str) -> str:
        if not v.isalnum():
            raise ValueError("handle must be alphanumeric")
        return v.upper()


def test_apply_data_runs_model_field_validators() -> None:
    account = Account()

    ModelTree(account).apply_data({"handle": "lower"})

    assert account.handle == "LOWER"


def test_apply_data_rejects_value_failing_field_validator() -> None:
    account = Account()

    with pytest.raises(CodecError):
        ModelTree(account).apply_data({"handle": "not valid!"})

    assert account.handle == "GUEST"
