"""Service name to file path mapping.

A service named ``core.gui.theme`` is stored at ``core/gui/theme.json5``
relative to the registry root. Every segment, the first one included, becomes
a path component.
"""

from pathlib import Path

from servicecfg.exceptions import InvalidServiceNameError

SERVICE_SEPARATOR = "."
SERVICE_FILE_SUFFIX = ".json5"

# Characters the filesystem cannot take inside one path component
_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def split_service_name(name: str) -> list[str]:
    """Split a service name into its dot-separated segments."""
    return name.split(SERVICE_SEPARATOR)


def validate_service_name(name: str) -> list[str]:
    """
    Check that a service name maps to a path below the root.

    Args:
        name: Dot-separated service name

    Returns:
        The name's segments

    Raises:
        InvalidServiceNameError: If the name is empty or has a segment that is
            empty, blank, or contains a path separator or NUL
    """
    if not name:
        raise InvalidServiceNameError("service.name.empty", name=name)

    segments = split_service_name(name)
    for segment in segments:
        if not segment:
            raise InvalidServiceNameError("service.name.empty_segment", name=name)
        if not segment.strip() or any(ch in segment for ch in _FORBIDDEN_CHARS):
            raise InvalidServiceNameError("service.name.bad_segment", name=name, segment=segment)
    return segments


def resolve_service_path(name: str) -> Path:
    """
    Map a service name to its file path relative to the registry root.

    Args:
        name: Dot-separated service name

    Returns:
        Relative path whose last component is ``<last segment>.json5``
    """
    *parents, stem = validate_service_name(name)
    return Path(*parents, f"{stem}{SERVICE_FILE_SUFFIX}")
