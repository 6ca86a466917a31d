"""Pytest configuration for the bsbind test suite."""

import sys
from pathlib import Path

# Add the project root to path for bsbind imports
sys.path.insert(0, str(Path(__file__).parent.parent))
