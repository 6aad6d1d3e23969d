"""
Root conftest.py — test-suite wide configuration.

Puts the repository root on sys.path so clsx_core and clsx_cli import from a
plain checkout without an editable install.
"""

import sys
from pathlib import Path

# Repo root is one level above this file (tests/conftest.py → repo root)
REPO_ROOT = Path(__file__).parent.parent

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
