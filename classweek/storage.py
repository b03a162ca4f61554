"""
Persistent storage for the user's courses and the Ramadan mode toggle.

Everything lives in one JSON object file, by default:

    ~/.classweek/classweek.json

    {
      "courses": [{"name": ..., "lecturer": ..., "classes": [{"day", "time", "room"}]}],
      "ramadan_mode": false
    }

Design rationale:
- the file is read and rewritten as a whole on every change
- missing or corrupted files never crash the application, they read as empty
- a corrupted file is moved to <name>.bak before the next write replaces it
- the course list and the toggle are separate keys of the same store

Callers must not keep course positions across a delete: deleting shifts
every later course down by one.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from classweek.model import Course
from classweek.parse import parse_schedule_string

logger = logging.getLogger(__name__)

DATA_ENV_VAR = "CLASSWEEK_DATA"
COURSES_KEY = "courses"
RAMADAN_KEY = "ramadan_mode"


def default_data_path() -> Path:
    """
    Return the data file location.

    CLASSWEEK_DATA wins over the default in the user's home directory.
    Using a function instead of a constant lets tests override the env var.
    """
    override = os.environ.get(DATA_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".classweek" / "classweek.json"


# ---------------------------------------------------------------------------
# Key-value stores
# ---------------------------------------------------------------------------


class JsonFileStore:
    """
    Key-value store backed by a single JSON object file.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_data_path()

    def _load(self) -> Optional[Dict[str, Any]]:
        """
        Return the file contents, {} if there is no file yet, None if it is unreadable.
        """
        # First run: file does not exist yet
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Ignoring unreadable data file %s: %s", self.path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring data file %s: top level is not an object", self.path)
            return None
        return data

    def _read_all(self) -> Dict[str, Any]:
        data = self._load()
        return data if data is not None else {}

    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + ".bak")

    def get(self, key: str, default: Any = None) -> Any:
        return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        if data is None:
            # keep the unreadable file for manual recovery instead of overwriting it
            backup = self.backup_path()
            self.path.replace(backup)
            logger.warning("Moved unreadable data file to %s", backup)
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


class MemoryStore:
    """
    In-memory store with the JsonFileStore interface. Values are JSON round-tripped
    so callers never share mutable state with the store.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return json.loads(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)


# ---------------------------------------------------------------------------
# Course repository + Ramadan flag
# ---------------------------------------------------------------------------


class CourseRepository:
    """
    Ordered list of courses, persisted under one key and replaced wholesale.
    """

    def __init__(self, store, key: str = COURSES_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> List[Course]:
        raw = self.store.get(self.key, [])
        if not isinstance(raw, list):
            return []

        courses: List[Course] = []
        for item in raw:
            try:
                courses.append(Course.from_dict(item))
            except (AttributeError, KeyError, TypeError) as exc:
                logger.warning("Skipping malformed course record %r: %s", item, exc)
        return courses

    def replace_all(self, courses: Iterable[Course]) -> None:
        self.store.set(self.key, [c.to_dict() for c in courses])


class RamadanModeFlag:
    """
    Process-wide Ramadan mode toggle. Defaults to off.
    """

    def __init__(self, store, key: str = RAMADAN_KEY) -> None:
        self.store = store
        self.key = key

    def is_active(self) -> bool:
        return self.store.get(self.key, False) is True

    def set_active(self, active: bool) -> None:
        self.store.set(self.key, bool(active))


# ---------------------------------------------------------------------------
# Course operations
# ---------------------------------------------------------------------------


def save_course(repository: CourseRepository, name: str, lecturer: str, timings: str) -> Course:
    """
    Parse the schedule text, append the new course and persist the list.
    """
    course = Course(
        name=name,
        lecturer=lecturer,
        classes=tuple(parse_schedule_string(timings)),
    )
    courses = repository.load()
    courses.append(course)
    repository.replace_all(courses)
    return course


def delete_course(repository: CourseRepository, index: int) -> Optional[Course]:
    """
    Remove the course at zero-based `index`.

    Returns the removed course, or None (store untouched) if the index is out of range.
    """
    courses = repository.load()
    if not 0 <= index < len(courses):
        return None
    removed = courses.pop(index)
    repository.replace_all(courses)
    return removed
