import os
from pathlib import Path

# Make the src/ layout importable when the package is not installed.
_SRC = Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in os.sys.path:
    os.sys.path.insert(0, str(_SRC))
