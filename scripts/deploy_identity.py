"""
IDentity Deployment Script
Deploys the IDentity contract and writes addresses/IDentity_address.json
Run from the repository root: python -m scripts.deploy_identity
"""

import sys

from deployment.cli import deploy_identity_main

if __name__ == "__main__":
    sys.exit(deploy_identity_main())
