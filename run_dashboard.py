#!/usr/bin/env python3
"""Start the ExpenseInsight Streamlit app.

Extra command-line arguments are handed to ``streamlit run``, e.g.
``python run_dashboard.py --server.port 8600``.
"""

import subprocess
import sys
from pathlib import Path

APP_DIR = Path(__file__).parent.resolve() / "expense_dashboard"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    command = [sys.executable, "-m", "streamlit", "run", "Home.py", *args]
    # Streamlit finds pages/ relative to the entry script's directory.
    return subprocess.run(command, cwd=APP_DIR).returncode


if __name__ == "__main__":
    sys.exit(main())
