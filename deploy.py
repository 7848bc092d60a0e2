"""
Contract Deployment Wrapper
Runs scripts/deploy_contracts.py as a module from the repository root,
forwarding command line options
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent

if __name__ == "__main__":
    print("=" * 70)
    print("Marketplace Contract Deployment")
    print("=" * 70)
    print()

    # Run deployment script; -m puts the repository root on sys.path
    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_contracts", *sys.argv[1:]],
        cwd=ROOT
    )

    sys.exit(result.returncode)
