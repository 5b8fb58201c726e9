"""Pytest bootstrap so ``import recentfiles`` resolves to this checkout.

Test directories have no ``__init__.py``, so test module basenames must be
unique across ``tests/``.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)
