"""Pytest configuration to ensure the gym_crm package is importable.
This keeps test imports like `from gym_crm...` working without an install.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root (which contains the `gym_crm/` directory) to sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Import shared fixtures so they're available to all tests
from tests.fixtures.conftest import *  # noqa: F401,F403,E402
