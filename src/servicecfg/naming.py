"""Naming conventions for the built-in service groups."""


def _core_service(name: str) -> str:
    return f"core.{name}"


def internal_service(name: str) -> str:
    """Name of an internal service, e.g. ``core.internal.session``."""
    return _core_service(f"internal.{name}")


def gui_service(name: str) -> str:
    """Name of a GUI service, e.g. ``core.gui.theme``."""
    return _core_service(f"gui.{name}")


def features_service(name: str) -> str:
    """Name of a feature service, e.g. ``core.features.autosave``."""
    return _core_service(f"features.{name}")
