"""Pytest configuration for the search-trees project."""

import sys
from pathlib import Path

# ``benchmarks`` is not an installed package; tests import it from the repo root.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
