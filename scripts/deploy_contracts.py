"""
Contract Deployment Script
Deploys the marketplace contracts and writes addresses/contractAddresses.json
Run from the repository root: python -m scripts.deploy_contracts
"""

import sys

from deployment.cli import deploy_main

if __name__ == "__main__":
    sys.exit(deploy_main())
