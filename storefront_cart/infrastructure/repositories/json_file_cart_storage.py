"""
JSON file cart storage

Concrete implementation of CartStorage keeping every key in one JSON document
on disk. Writes go to a temporary file that replaces the document atomically.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.infrastructure.utilities.exceptions import CartPersistenceError


class JsonFileCartStorage(CartStorage):
    """File backed key/value storage"""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        # Missing, empty or corrupted files read as an empty store
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8").strip()
        except OSError as e:
            self._logger.warning("⚠️ STORAGE UNREADABLE: %s (%s)", self._path, e)
            return {}
        if text == "":
            return {}
        try:
            data = json.loads(text)
        except ValueError as e:
            self._logger.warning("⚠️ STORAGE CORRUPTED: %s (%s)", self._path, e)
            return {}
        if not isinstance(data, dict):
            self._logger.warning("⚠️ STORAGE CORRUPTED: %s is not an object", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self._path)
            except OSError:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            self._logger.error("💥 STORAGE WRITE FAILED: %s key=%s (%s)", self._path, key, e)
            raise CartPersistenceError(
                f"Could not write {self._path}: {e}", key=key
            ) from e

        self._logger.debug("💾 STORED: key=%s, %d bytes", key, len(value))
