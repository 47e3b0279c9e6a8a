import json
import logging
import os
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)

# Key under which the chosen UI language is remembered between sessions.
LANGUAGE_KEY = "language"


class PreferenceStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryPreferenceStore:
    """Dict-backed store, one per instance. Handy for tests and headless runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonPreferenceStore:
    """Persist preferences as a flat JSON object in ``path``.

    This is the desktop stand-in for browser local storage: values survive
    app restarts and are shared by every session pointing at the same file.
    """

    def __init__(self, path: str) -> None:
        self.path = str(path)

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable preference file %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed preference file %s", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        """Return the stored value for ``key`` or ``None`` when unset."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, rewriting the whole file."""
        if not isinstance(value, str):
            raise TypeError(f"preference {key!r} must be a string, got {type(value).__name__}")
        data = self._load()
        data[key] = value
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        logger.debug("Saved preference %s=%s to %s", key, value, self.path)
