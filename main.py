"""Command-line entry point for running the suite against a named run profile.

Usage:
    python main.py desktop-chromium
    python main.py all -- -k purchase
    python main.py --list
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

import pytest

from shopflow.config import (
    RUN_PROFILES,
    get_artifacts_dir,
    get_profile,
    get_report_dir,
    get_retry_count,
    get_worker_count,
)
from shopflow.logging_config import get_logger

E2E_TESTS_DIR = Path(__file__).resolve().parent / "tests" / "e2e"


def build_pytest_args(profile: str, extra: Optional[List[str]] = None) -> List[str]:
    """Translate a run profile name into pytest arguments.

    Args:
        profile: Run profile name, or ``all`` for the whole matrix
        extra: Additional arguments passed through to pytest

    Returns:
        Argument list for ``pytest.main``
    """
    if profile != "all":
        get_profile(profile)

    artifacts_dir = get_artifacts_dir()
    report_dir = get_report_dir()
    workers = get_worker_count()

    args = [
        str(E2E_TESTS_DIR),
        "--profile",
        profile,
        "--reruns",
        str(get_retry_count()),
        f"--junitxml={artifacts_dir / 'junit.xml'}",
        "--json-report",
        f"--json-report-file={artifacts_dir / 'results.json'}",
        f"--html={report_dir / 'index.html'}",
        "--self-contained-html",
    ]
    if workers > 1:
        args.extend(["-n", str(workers)])
    if extra:
        args.extend(extra)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the purchase-flow suite for a run profile")
    parser.add_argument("profile", nargs="?", help="Run profile name, or 'all'")
    parser.add_argument("--list", action="store_true", help="List run profiles and exit")
    parser.add_argument("pytest_args", nargs=argparse.REMAINDER, help="Arguments passed to pytest")
    args = parser.parse_args(argv)

    if args.list:
        for profile in RUN_PROFILES:
            target = profile.device or "custom"
            print(f"{profile.name:<18} {profile.browser:<9} {target}")
        return 0

    if not args.profile:
        parser.error("a run profile is required (use --list to see them)")

    extra = [a for a in args.pytest_args if a != "--"]
    try:
        pytest_args = build_pytest_args(args.profile, extra)
    except KeyError as e:
        parser.error(e.args[0])

    get_logger().info(f"Running profile {args.profile}: pytest {' '.join(pytest_args)}")
    return int(pytest.main(pytest_args))


if __name__ == "__main__":
    sys.exit(main())
