#!/usr/bin/env python3
"""Run the tauview test suite with Qt in offscreen mode.

Usage:
  python scripts/run_tests_offscreen.py [--timeout SECONDS] [--verbose] [--] [pytest args...]

Examples:
  python scripts/run_tests_offscreen.py tests/test_backend.py
  python scripts/run_tests_offscreen.py -- -k cursor
"""

from __future__ import annotations

import argparse
import os
import shlex
import subprocess
import sys


def main() -> int:
    p = argparse.ArgumentParser(description="Run pytest with QT_QPA_PLATFORM=offscreen")
    p.add_argument("--timeout", type=int, default=300, help="Seconds allowed for the whole run")
    p.add_argument("--verbose", action="store_true", help="Full pytest output instead of -q")
    p.add_argument("pytest_args", nargs=argparse.REMAINDER, help="Extra pytest args")
    args = p.parse_args()

    env = os.environ.copy()
    # The engine and backend need a QApplication; no window system is required.
    env.setdefault("QT_QPA_PLATFORM", "offscreen")
    # Keep test output readable unless the caller asked for more.
    env.setdefault("TAUVIEW_LOG_LEVEL", "warning")

    cmd = [sys.executable, "-m", "pytest"]
    if not args.verbose:
        cmd += ["-q"]
    cmd.append(f"--timeout={min(60, args.timeout)}")
    cmd += [a for a in args.pytest_args if a != "--"]

    print("Running:", " ".join(shlex.quote(c) for c in cmd))
    try:
        completed = subprocess.run(cmd, env=env, check=False, timeout=args.timeout)
    except subprocess.TimeoutExpired:
        print(f"pytest run timed out after {args.timeout} seconds", file=sys.stderr)
        return 124
    return completed.returncode


if __name__ == "__main__":
    raise SystemExit(main())
