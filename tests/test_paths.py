from pathlib import Path

import pytest

from servicecfg.exceptions import InvalidServiceNameError
from servicecfg.paths import resolve_service_path, split_service_name, validate_service_name


@pytest.mark.parametrize(
    "name",
    ["theme", "core.theme", "core.gui.theme", "a.b.c.d.e", "core.features.auto-save_v2"],
)
def test_path_has_one_component_per_segment(name: str) -> None:
    segments = name.split(".")
    path = resolve_service_path(name)

    assert not path.is_absolute()
    assert len(path.parts) == len(segments)
    assert path.parts[-1] == f"{segments[-1]}.json5"
    assert list(path.parts[:-1]) == segments[:-1]


def test_first_segment_is_a_plain_directory() -> None:
    assert resolve_service_path("core.gui.theme") == Path("core") / "gui" / "theme.json5"


def test_single_segment_maps_to_file_in_root() -> None:
    assert resolve_service_path("main") == Path("main.json5")


def test_resolution_is_deterministic() -> None:
    assert resolve_service_path("core.internal.session") == resolve_service_path("core.internal.session")


def test_split_keeps_empty_segments() -> None:
    assert split_service_name("a..b") == ["a", "", "b"]


@pytest.mark.parametrize("name", ["", ".", "a..b", ".a", "a.", "a. .b", "a/b.c", "a.b\\c", "core.nul\x00name"])
def test_invalid_names_are_rejected(name: str) -> None:
    with pytest.raises(InvalidServiceNameError):
        validate_service_name(name)
    with pytest.raises(InvalidServiceNameError):
        resolve_service_path(name)


def test_invalid_name_error_message() -> None:
    with pytest.raises(InvalidServiceNameError) as exc_info:
        validate_service_name("core..theme")

    assert exc_info.value.status_code == 400
    assert "core..theme" in str(exc_info.value)
