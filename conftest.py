"""
Root conftest - shared pytest configuration.
Ensures the telemetry package is importable when running pytest from the
repository root without an editable install.
"""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
