from __future__ import annotations
import sys


def detect_test_env() -> bool:
    """
    Tell whether we are imported by a test runner, so that importing the package does not install a root log handler
    behind the runner's back.
    """
    return any(runner in sys.modules for runner in ("pytest", "_pytest", "nose2"))


is_testing = detect_test_env()
