#!/usr/bin/env python3
# =============================================================================
# numdiff -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# PURPOSE
# -------
# Runs the CI gate in two sequential stages:
#   Stage 1: pytest (all tests + coverage report for the numdiff package)
#   Stage 2: CLI smoke run over the bundled tables in tests/data/
#
# Exit codes:
#   0 -- All stages passed.
#   1 -- Stage 1 (pytest) failed.
#   2 -- Stage 2 (CLI smoke) failed.
#
# Usage:
#   python scripts/run_ci_checks.py
#
# Requires the test extra: pip install -e .[test]
# =============================================================================

from __future__ import annotations

import subprocess
import sys
import pathlib

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
_REPO_ROOT = pathlib.Path(__file__).parent.parent
_DATA_DIR  = _REPO_ROOT / "tests" / "data"
_PYTHON    = sys.executable

# The bundled tables differ on two lines, so the CLI must exit 1.
_SMOKE_EXPECTED_RC = 1


def _separator(char: str = "=", width: int = 72) -> str:
    return char * width


def _run(cmd: list[str], label: str) -> int:
    """
    Run a subprocess command, stream stdout/stderr live, return exit code.
    """
    print(_separator())
    print(f"CI STAGE: {label}")
    print(f"CMD:      {' '.join(cmd)}")
    print(_separator("-"))
    sys.stdout.flush()

    proc = subprocess.run(
        cmd,
        cwd=str(_REPO_ROOT),
    )
    return proc.returncode


def _fail(stage: str, rc: int) -> None:
    print(_separator())
    print(f"CI RESULT: FAIL  [stage={stage}  exit_code={rc}]")
    print(f"Merge BLOCKED: {stage} stage did not pass.")
    print(_separator())
    sys.stdout.flush()


def main() -> int:
    print(_separator())
    print("numdiff CI GATE -- starting")
    print(_separator())
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 1: pytest with coverage (pytest-cov).
    # ------------------------------------------------------------------
    pytest_rc = _run(
        [_PYTHON, "-m", "pytest", "--cov=numdiff", "--cov-report=term-missing"],
        "pytest (tests + coverage)",
    )
    if pytest_rc != 0:
        _fail("pytest", pytest_rc)
        return 1

    print(_separator("-"))
    print("CI STAGE pytest: PASS")
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 2: CLI smoke run.
    # Side-by-side, digit highlighting and the summary path in one call.
    # ------------------------------------------------------------------
    smoke_rc = _run(
        [
            _PYTHON, "-m", "numdiff.cli.run_diff",
            "-y", "-d", "-s",
            str(_DATA_DIR / "reference.dat"),
            str(_DATA_DIR / "candidate.dat"),
        ],
        "CLI smoke (bundled tables)",
    )
    if smoke_rc != _SMOKE_EXPECTED_RC:
        _fail("cli-smoke", smoke_rc)
        return 2

    print(_separator("-"))
    print("CI STAGE cli-smoke: PASS")

    # ------------------------------------------------------------------
    # All stages passed.
    # ------------------------------------------------------------------
    print(_separator())
    print("CI RESULT: PASS  [stages=pytest,cli-smoke]")
    print("Merge permitted.")
    print(_separator())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
