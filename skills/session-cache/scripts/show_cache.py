#!/usr/bin/env python3
"""
Show cached session context from .claude/cache/session.json
Usage: show_cache.py

Prints project info, session counters, the current phase, pending tasks and
blockers recorded by a previous session. Read-only and best effort: every
problem is reported as a line of output and the exit code is always 0.

Works on Windows, macOS, and Linux.
"""

import sys
from pathlib import Path

# Allow running as a plain script from any directory
sys.path.insert(0, str(Path(__file__).parent))

from session_cache import CACHE_FILE, SessionCache, load_cache, parse_cache

MAX_PENDING_TASKS = 5


def show_project(cache: SessionCache):
    if not cache.has_project():
        return
    print("📂 Project:")
    if cache.project_name is not None:
        print(f"   Name: {cache.project_name}")
    if cache.project_version is not None:
        print(f"   Version: {cache.project_version}")
    print()


def show_session(cache: SessionCache):
    if not cache.has_session():
        return
    print("🔢 Session:")
    if cache.session_count is not None:
        print(f"   Count: {cache.session_count}")
    if cache.last_timestamp is not None:
        print(f"   Last session: {cache.last_timestamp}")
    print()


def show_phase(cache: SessionCache):
    if not cache.has_phase():
        return
    print("📍 Current Phase:")
    if cache.phase_name is not None:
        print(f"   Name: {cache.phase_name}")
    if cache.phase_status is not None:
        print(f"   Status: {cache.phase_status}")
    print()


def show_pending_tasks(cache: SessionCache):
    tasks = cache.pending_tasks
    if not tasks:
        return
    print(f"⏳ Pending Tasks ({len(tasks)}):")
    for i, task in enumerate(tasks[:MAX_PENDING_TASKS], 1):
        print(f"   {i}. {task}")
    if len(tasks) > MAX_PENDING_TASKS:
        print(f"   ... and {len(tasks) - MAX_PENDING_TASKS} more")
    print()


def show_blockers(cache: SessionCache):
    blockers = cache.blockers
    if not blockers:
        return
    print(f"🚧 Blockers ({len(blockers)}):")
    for blocker in blockers:
        print(f"   • {blocker}")
    print()


def run(cache_file: Path = CACHE_FILE):
    """Print the cached session context, or a message explaining why there is none."""
    if not cache_file.exists():
        print(f"ℹ️  No session cache found at {cache_file.as_posix()}")
        print(f"💡 Save session state to {cache_file.as_posix()} to enable resume")
        return

    try:
        text = load_cache(cache_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Error reading session cache: {e}")
        return

    cache = parse_cache(text)
    if cache is None:
        print("⚠️  Could not parse session cache (invalid JSON)")
        return

    show_project(cache)
    show_session(cache)
    show_phase(cache)
    show_pending_tasks(cache)
    show_blockers(cache)

    print("✅ Session context loaded")


def main() -> int:
    try:
        run()
    except Exception as e:
        print(f"❌ Error reading session cache: {e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
