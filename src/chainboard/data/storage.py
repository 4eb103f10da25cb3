import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from .errors import PersistenceError


class KeyValueStorage(ABC):
    """String key/value persistence for user preferences"""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        ...


class MemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.store: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self.store.get(key)

    def write(self, key: str, value: str) -> None:
        self.store[key] = value


class JsonFileStorage(KeyValueStorage):
    """All keys live in one JSON object on disk; every write rewrites the file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"{self.path} does not hold a JSON object")
        return data

    def read(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.path}: {e}") from e
