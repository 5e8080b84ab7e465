"""Pytest configuration for path setup.

The package lives under ``eventlogger/src`` and the utilities under
``scripts``.  When pytest runs without the project installed, neither is
importable, so this file puts both the project root and
``eventlogger/src`` on ``sys.path`` before test collection.
"""

from __future__ import annotations

import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]

for path in (ROOT / "eventlogger" / "src", ROOT):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)
