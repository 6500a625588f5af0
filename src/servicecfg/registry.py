"""Service registry.

Maps service names to persistence units and drives their load/save lifecycle.
Root directory and codec are fixed when the registry is created.

The registry does no locking. Callers sharing one across threads must
serialize register/load/save themselves.
"""

import threading
from pathlib import Path

from servicecfg.codec import Codec, Json5Codec
from servicecfg.exceptions import DuplicateServiceError, ServiceNotFoundError
from servicecfg.logger import get_logger
from servicecfg.models.persistence import PersistenceFailure
from servicecfg.paths import resolve_service_path
from servicecfg.tree import ConfigTree
from servicecfg.unit import PersistenceUnit

logger = get_logger(__name__)


class ServiceRegistry:
    """
    Registry of persistable config services.

    Registry errors (duplicate or unknown names) are raised. Storage and codec
    errors are caught per service, logged, and returned.
    """

    def __init__(self, root_dir: Path, codec: Codec | None = None) -> None:
        """
        Initialize the registry.

        Args:
            root_dir: Directory under which all service files are stored
            codec: Codec for all services (defaults to Json5Codec)
        """
        self._root_dir = Path(root_dir)
        self._codec = codec if codec is not None else Json5Codec()
        self._units: dict[str, PersistenceUnit] = {}
        self._failures: dict[str, PersistenceFailure] = {}

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    @property
    def codec(self) -> Codec:
        return self._codec

    def register(self, name: str, tree: ConfigTree, load_now: bool = True) -> PersistenceUnit:
        """
        Register a service.

        Args:
            name: Dot-separated service name, e.g. "core.gui.theme"
            tree: Caller-owned config tree bound to the service
            load_now: Load the service's file into the tree right away

        Returns:
            The created unit

        Raises:
            InvalidServiceNameError: If the name cannot be mapped to a path
            DuplicateServiceError: If the name is already registered
        """
        path = resolve_service_path(name)
        if name in self._units:
            raise DuplicateServiceError(name)

        unit = PersistenceUnit(name, path, tree)
        self._units[name] = unit
        logger.info(f"Registered config service: {name} -> {path}", service=name)

        if load_now:
            self._record(name, unit.load(self._root_dir, self._codec))
        return unit

    def load_all(self) -> list[PersistenceFailure]:
        """
        Load every registered service.

        Returns:
            Failures, one per service that could not be loaded
        """
        return self._run_all("load")

    def save_all(self) -> list[PersistenceFailure]:
        """
        Save every registered service.

        Returns:
            Failures, one per service that could not be saved
        """
        return self._run_all("save")

    def load(self, name: str) -> PersistenceFailure | None:
        """
        Load one service.

        Raises:
            ServiceNotFoundError: If the name is not registered
        """
        unit = self.get_unit(name)
        return self._record(name, unit.load(self._root_dir, self._codec))

    def save(self, name: str) -> PersistenceFailure | None:
        """
        Save one service.

        Raises:
            ServiceNotFoundError: If the name is not registered
        """
        unit = self.get_unit(name)
        return self._record(name, unit.save(self._root_dir, self._codec))

    def get_unit(self, name: str) -> PersistenceUnit:
        unit = self._units.get(name)
        if unit is None:
            raise ServiceNotFoundError(name)
        return unit

    def path_for(self, name: str) -> Path:
        """Absolute file path of a registered service."""
        return self.get_unit(name).absolute_path(self._root_dir)

    def names(self) -> list[str]:
        return list(self._units)

    def last_failures(self) -> dict[str, PersistenceFailure]:
        """Most recent failure per service, cleared once the service succeeds again."""
        return dict(self._failures)

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __len__(self) -> int:
        return len(self._units)

    def _run_all(self, operation: str) -> list[PersistenceFailure]:
        failures: list[PersistenceFailure] = []
        for name, unit in list(self._units.items()):
            if operation == "load":
                failure = unit.load(self._root_dir, self._codec)
            else:
                failure = unit.save(self._root_dir, self._codec)
            self._record(name, failure)
            if failure is not None:
                failures.append(failure)

        if failures:
            logger.warning(f"{operation} finished with {len(failures)} failed of {len(self._units)} services")
        return failures

    def _record(self, name: str, failure: PersistenceFailure | None) -> PersistenceFailure | None:
        if failure is None:
            self._failures.pop(name, None)
        else:
            self._failures[name] = failure
        return failure


# Global instance (initialized lazily)
_registry: ServiceRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> ServiceRegistry:
    """Get the global registry instance, built from the current settings."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                from servicecfg.config import get_settings

                settings = get_settings()
                codec = Json5Codec(
                    indent=settings.codec.indent,
                    quote_keys=settings.codec.quote_keys,
                    trailing_commas=settings.codec.trailing_commas,
                )
                _registry = ServiceRegistry(settings.storage.root_dir, codec)
    return _registry


def reset_registry() -> None:
    """Drop the global registry instance (for testing)."""
    global _registry
    with _registry_lock:
        _registry = None
