"""Pytest configuration for the wrapcalc test suite."""

import sys
from pathlib import Path

# Add src directory to path so the suite runs from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wrapcalc.kinds import KINDS  # noqa: E402


def pytest_addoption(parser):
    """Add --kind option."""
    parser.addoption(
        "--kind",
        action="append",
        default=[],
        help="Run per-kind tests only for the specified kinds (can be used multiple times)",
    )


def pytest_generate_tests(metafunc):
    """Parametrize any test taking a `kind` argument over the integer kinds."""
    if "kind" not in metafunc.fixturenames:
        return
    selected = metafunc.config.getoption("kind")
    names = [n for n in KINDS if not selected or n in selected]
    metafunc.parametrize("kind", [KINDS[n] for n in names], ids=names)
