"""Test package for the channel organizer.

The repository root is appended to ``sys.path`` so ``dmr_organizer`` and
``utils`` import without an installed distribution.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
