import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from database.base import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class FileManager(KeyValueStore):
    """Keeps each key in its own UTF-8 file under ``base_dir``."""

    def __init__(self, base_dir: Optional[Path] = None):
        if base_dir is None:
            base_dir = Path.home() / ".myclipboard"
        self.base_dir = Path(base_dir)
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create {self.base_dir}: {e}") from e

    def path_for(self, key: str) -> Path:
        return self.base_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError:
            logger.warning(f"{path} is not valid UTF-8, ignoring it")
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            data = value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise StorageError(f"Cannot encode value for {path}: {e}") from e

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{key}-", suffix=".tmp", dir=self.base_dir)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.replace(tmp_name, path)
        except BaseException as e:
            try:
                os.remove(tmp_name)
            except OSError:
                pass
            if isinstance(e, OSError):
                raise StorageError(f"Failed to write {path}: {e}") from e
            raise
        logger.debug(f"Saved {len(value)} chars to {path}")
