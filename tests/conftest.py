"""
Pytest configuration.

Puts tests/ on sys.path so the shared board fixtures in boards.py import
as a plain module.
"""

import sys
from pathlib import Path

_tests_path = str(Path(__file__).resolve().parent)
if _tests_path not in sys.path:
    sys.path.insert(0, _tests_path)
