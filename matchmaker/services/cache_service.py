"""Cache Service - Key-value persistence with expiry.

Every record the matchmaker keeps (profiles, match pool, match history)
lives behind this interface, so the backing store can be swapped without
touching the plugin.

Interface Contract:
- get(key) -> dict | None (None when missing or expired)
- set(key, value, ttl=None) stores a JSON-serializable value
- delete(key) removes the key if present
- All methods raise CacheServiceError on storage failure
"""

from __future__ import annotations

import hashlib
import json
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Any, Callable

from config import CACHE_BACKEND, DATA_DIR

logger = logging.getLogger(__name__)

# 文件缓存目录
CACHE_DIR = DATA_DIR / "cache"


class CacheServiceError(Exception):
    """Raised when the cache backend fails."""
    pass


class CacheManager(ABC):
    """Abstract key-value cache with optional time-to-live."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock

    def now(self) -> float:
        return self._clock()

    @abstractmethod
    def _read(self, key: str) -> dict[str, Any] | None:
        """Return the raw ``{"value", "expires"}`` envelope."""

    @abstractmethod
    def _write(self, key: str, envelope: dict[str, Any]) -> None:
        """Persist the raw envelope."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key."""

    def get(self, key: str) -> Any | None:
        envelope = self._read(key)
        if envelope is None:
            return None
        expires = envelope.get("expires")
        if expires is not None and expires <= self.now():
            logger.debug("Cache entry expired: %s", key)
            self.delete(key)
            return None
        return envelope.get("value")

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store a value; ``ttl`` is in seconds, None keeps it forever."""
        expires = self.now() + ttl if ttl is not None else None
        self._write(key, {"value": value, "expires": expires})


class MemoryCacheManager(CacheManager):
    """In-process cache - 线程安全"""

    def __init__(self, clock: Callable[[], float] = time.time):
        super().__init__(clock)
        self._data: dict[str, dict[str, Any]] = {}
        self._lock = Lock()

    def _read(self, key: str) -> dict[str, Any] | None:
        with self._lock:
            envelope = self._data.get(key)
        # Hand out copies so callers cannot mutate stored state
        return json.loads(json.dumps(envelope)) if envelope is not None else None

    def _write(self, key: str, envelope: dict[str, Any]) -> None:
        try:
            serialized = json.dumps(envelope)
        except (TypeError, ValueError) as e:
            raise CacheServiceError(f"Value for {key!r} is not JSON serializable: {e}") from e
        with self._lock:
            self._data[key] = json.loads(serialized)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)


class FileCacheManager(CacheManager):
    """One JSON file per key under ``cache_dir``."""

    def __init__(self, cache_dir: Path = CACHE_DIR, clock: Callable[[], float] = time.time):
        super().__init__(clock)
        self.cache_dir = Path(cache_dir)
        self._lock = Lock()
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # Keys contain "/" so they are hashed into flat file names
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{digest}.json"

    def _read(self, key: str) -> dict[str, Any] | None:
        path = self._path(key)
        with self._lock:
            if not path.exists():
                return None
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise CacheServiceError(f"Failed to read cache entry {key!r}: {e}") from e
        return data.get("envelope")

    def _write(self, key: str, envelope: dict[str, Any]) -> None:
        path = self._path(key)
        try:
            payload = json.dumps({"key": key, "envelope": envelope}, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise CacheServiceError(f"Value for {key!r} is not JSON serializable: {e}") from e
        with self._lock:
            try:
                tmp_path = path.with_suffix(".tmp")
                with open(tmp_path, "w", encoding="utf-8") as f:
                    f.write(payload)
                tmp_path.replace(path)
            except OSError as e:
                raise CacheServiceError(f"Failed to write cache entry {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        with self._lock:
            self._path(key).unlink(missing_ok=True)


def create_cache_manager(backend: str = CACHE_BACKEND) -> CacheManager:
    """Build the cache backend named in configuration."""
    if backend == "file":
        logger.info("Using file cache at %s", CACHE_DIR)
        return FileCacheManager()
    if backend != "memory":
        logger.warning("Unknown CACHE_BACKEND %r, falling back to memory", backend)
    return MemoryCacheManager()
