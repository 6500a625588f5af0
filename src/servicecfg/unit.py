"""Binding between one service's config tree and its file."""

from pathlib import Path

from servicecfg.codec import Codec
from servicecfg.logger import get_logger
from servicecfg.models.persistence import PersistenceFailure
from servicecfg.tree import ConfigTree

logger = get_logger(__name__)


class PersistenceUnit:
    """
    One registered service.

    Load and save never raise: storage and codec failures are logged and
    returned as a PersistenceFailure so that one broken file cannot block
    other services.
    """

    def __init__(self, name: str, path: Path, tree: ConfigTree) -> None:
        """
        Args:
            name: Service name
            path: File path relative to the registry root
            tree: Caller-owned config tree
        """
        self.name = name
        self.path = path
        self.tree = tree

    def absolute_path(self, root: Path) -> Path:
        return root / self.path

    def save(self, root: Path, codec: Codec) -> PersistenceFailure | None:
        """
        Write the tree to its file, creating parent directories as needed.

        Args:
            root: Registry root directory
            codec: Codec used to encode the tree

        Returns:
            None on success, otherwise the failure
        """
        target = self.absolute_path(root)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding="utf-8") as f:
                codec.serialize(self.tree, f)
        except Exception as e:
            logger.error(f"Failed saving config service {self.name} to {target}: {e}", service=self.name)
            return PersistenceFailure.from_exception(self.name, target, "save", e)

        logger.info(f"Saved config service {self.name} to {target}", service=self.name)
        return None

    def load(self, root: Path, codec: Codec) -> PersistenceFailure | None:
        """
        Read the file into the tree. A missing file leaves the tree untouched.

        Args:
            root: Registry root directory
            codec: Codec used to decode the file

        Returns:
            None on success or when there is no file, otherwise the failure
        """
        target = self.absolute_path(root)
        try:
            with open(target, encoding="utf-8") as f:
                codec.deserialize(self.tree, f)
        except FileNotFoundError:
            logger.debug(f"No file for config service {self.name} at {target}, keeping defaults", service=self.name)
            return None
        except Exception as e:
            logger.error(f"Failed loading config service {self.name} from {target}: {e}", service=self.name)
            return PersistenceFailure.from_exception(self.name, target, "load", e)

        logger.info(f"Loaded config service {self.name} from {target}", service=self.name)
        return None

    def __repr__(self) -> str:
        return f"PersistenceUnit(name={self.name!r}, path={str(self.path)!r})"
