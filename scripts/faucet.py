"""
Faucet Script
Sends 1 ETH to the address given on the command line
Run from the repository root: python -m scripts.faucet
"""

import sys

from deployment.cli import faucet_main

if __name__ == "__main__":
    sys.exit(faucet_main())
