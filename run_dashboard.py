#!/usr/bin/env python3
"""Direct launcher for the expense recap dashboard.

This script launches Streamlit with the expense_recap directory as the app root.
"""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
app_dir = project_root / "expense_recap"

if __name__ == "__main__":
    # Keep .env lookups relative to the project root
    os.chdir(project_root)
    sys.path.insert(0, str(project_root))
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(app_dir / "Home.py"),
        *sys.argv[1:],
    ])
