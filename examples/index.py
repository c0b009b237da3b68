"""Run every example suite: python examples/index.py [-v] [pattern ...]"""

import sys
from pathlib import Path

from suitecase import RunAllOptions, RunAllOrchestrator

if __name__ == "__main__":
    args = sys.argv[1:]
    options = RunAllOptions(
        verbose="-v" in args,
        whitelist=[arg for arg in args if arg != "-v"],
        root_dir=Path(__file__).parent,
    )
    RunAllOrchestrator([Path(__file__).parent], options).run()
