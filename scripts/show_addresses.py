"""
Address Listing Script
Prints the addresses recorded by a deployment run
Run from the repository root: python -m scripts.show_addresses
"""

import sys

from deployment.cli import show_addresses_main

if __name__ == "__main__":
    sys.exit(show_addresses_main())
