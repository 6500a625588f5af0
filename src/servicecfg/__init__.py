"""Per-service configuration persistence."""

from servicecfg.codec import Codec, Json5Codec
from servicecfg.exceptions import (
    CodecError,
    DuplicateServiceError,
    InvalidServiceNameError,
    ServiceCfgError,
    ServiceNotFoundError,
)
from servicecfg.models.persistence import PersistenceFailure
from servicecfg.naming import features_service, gui_service, internal_service
from servicecfg.paths import resolve_service_path
from servicecfg.registry import ServiceRegistry, get_registry, reset_registry
from servicecfg.tree import ConfigTree, ModelTree
from servicecfg.unit import PersistenceUnit

__all__ = [
    "ServiceRegistry",
    "get_registry",
    "reset_registry",
    "PersistenceUnit",
    "PersistenceFailure",
    "ConfigTree",
    "ModelTree",
    "Codec",
    "Json5Codec",
    "resolve_service_path",
    "internal_service",
    "gui_service",
    "features_service",
    "ServiceCfgError",
    "DuplicateServiceError",
    "ServiceNotFoundError",
    "InvalidServiceNameError",
    "CodecError",
]
