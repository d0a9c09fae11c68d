#!/usr/bin/env python3
"""
Session cache document for Claude Code projects.

Reads .claude/cache/session.json (relative to the project root) and turns the
untyped JSON tree into a SessionCache with independently optional fields.
Anything with an unexpected type is treated as absent rather than an error.

Cross-platform: works on Linux, macOS, Windows.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

CACHE_DIR = Path(".claude") / "cache"
CACHE_FILE = CACHE_DIR / "session.json"


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _is_text(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        # lone surrogates decode from JSON escapes but cannot be printed
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _string(section: Dict[str, Any], key: str) -> Optional[str]:
    value = section.get(key)
    return value if _is_text(value) else None


def _count(section: Dict[str, Any], key: str) -> Optional[int]:
    value = section.get(key)
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def _strings(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if _is_text(item)]


@dataclass
class SessionCache:
    project_name: Optional[str] = None
    project_version: Optional[str] = None
    session_count: Optional[int] = None
    last_timestamp: Optional[str] = None
    phase_name: Optional[str] = None
    phase_status: Optional[str] = None
    pending_tasks: List[str] = field(default_factory=list)
    blockers: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "SessionCache":
        """Build from a decoded JSON document, ignoring unknown or mistyped fields."""
        if not isinstance(data, dict):
            return cls()

        project = _section(data, "project")
        session = _section(data, "session")
        phase = _section(data, "current_phase")

        return cls(
            project_name=_string(project, "name"),
            project_version=_string(project, "version"),
            session_count=_count(session, "count"),
            last_timestamp=_string(session, "last_timestamp"),
            phase_name=_string(phase, "name"),
            phase_status=_string(phase, "status"),
            pending_tasks=_strings(data, "pending_tasks"),
            blockers=_strings(data, "blockers"),
        )

    def has_project(self) -> bool:
        return self.project_name is not None or self.project_version is not None

    def has_session(self) -> bool:
        return self.session_count is not None or self.last_timestamp is not None

    def has_phase(self) -> bool:
        return self.phase_name is not None or self.phase_status is not None


def load_cache(path: Path = CACHE_FILE) -> str:
    """Read the raw cache text. Raises OSError/UnicodeDecodeError on failure."""
    return path.read_text(encoding='utf-8')


def parse_cache(text: str) -> Optional[SessionCache]:
    """
    Parse cache text into a SessionCache.

    Returns None when the text cannot be decoded as JSON, an empty file
    or runaway nesting included.
    A valid document never fails: missing and mistyped fields come back as
    absent values on the returned object.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        # ValueError also covers integer literals past the digit limit
        return None
    return SessionCache.from_dict(data)
