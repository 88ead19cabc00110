#!/usr/bin/env python3
# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=avronames", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps (all by default) and report results."""
    selected = set(argv if argv is not None else sys.argv[1:])
    steps = [(name, cmd) for name, cmd in STEPS if not selected or name.lower() in selected]
    if not steps:
        print(chalk.red(f"Unknown step(s): {', '.join(sorted(selected))}"), file=sys.stderr)
        return 2

    results = [_run_step(name, cmd) for name, cmd in steps]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_SEPARATOR = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    """Run one CI step and return its name, success flag, and duration."""
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue(name))
    print(chalk.blue(_SEPARATOR))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return name, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_SEPARATOR))
    for name, passed, elapsed in results:
        if passed:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> str:
    return str(Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
