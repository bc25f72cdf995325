"""
Pytest configuration file - Root conftest.py
Ensures the flat project modules are importable when running pytest from the repo root.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
