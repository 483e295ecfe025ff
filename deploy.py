"""
Contract Deployment Wrapper
Runs scripts/deploy_contract.py and exits with its return code
"""

import subprocess
import sys
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent / "scripts" / "deploy_contract.py"


def main() -> int:
    result = subprocess.run([sys.executable, str(SCRIPT)])
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
