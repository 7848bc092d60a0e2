"""
Artifact Loader
Reads compiled Hardhat artifacts (abi + bytecode)
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from loguru import logger

from deployment.exceptions import ArtifactNotFoundError, InvalidArtifactError


@dataclass
class ContractArtifact:
    """Compiled contract ready to deploy."""

    name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    path: Path


def find_artifact(contract_name: str, artifacts_dir: Union[Path, str] = "artifacts") -> Path:
    """
    Locate the artifact file for a contract

    Hardhat writes artifacts/contracts/<Source>.sol/<Name>.json next to a
    <Name>.dbg.json debug file, which is ignored.

    Args:
        contract_name: Contract name as written in Solidity
        artifacts_dir: Hardhat artifacts root

    Returns:
        Path to the artifact JSON

    Raises:
        ArtifactNotFoundError: If no artifact exists
        InvalidArtifactError: If several sources define the same name
    """
    root = Path(artifacts_dir)
    search_root = root / "contracts" if (root / "contracts").is_dir() else root

    matches = sorted(search_root.rglob(f"{contract_name}.json"))
    if not matches:
        raise ArtifactNotFoundError(
            f"Contract artifact not found for {contract_name} under {search_root}. "
            "Run 'npx hardhat compile' first"
        )
    if len(matches) > 1:
        raise InvalidArtifactError(
            f"Ambiguous artifact for {contract_name}: "
            + ", ".join(str(p) for p in matches)
        )
    return matches[0]


def load_artifact(contract_name: str, artifacts_dir: Union[Path, str] = "artifacts") -> ContractArtifact:
    """
    Load a compiled contract

    Args:
        contract_name: Contract name
        artifacts_dir: Hardhat artifacts root

    Returns:
        ContractArtifact
    """
    path = find_artifact(contract_name, artifacts_dir)

    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArtifactError(f"Artifact {path} is not valid JSON: {e}") from e

    abi = data.get('abi')
    bytecode = data.get('bytecode')

    if not isinstance(abi, list):
        raise InvalidArtifactError(f"Artifact {path} has no abi")
    # Interfaces and abstract contracts compile to empty bytecode
    if not bytecode or bytecode == '0x':
        raise InvalidArtifactError(f"Artifact {path} has no deployable bytecode")

    logger.debug(f"Loaded artifact for {contract_name} from {path}")
    return ContractArtifact(name=contract_name, abi=abi, bytecode=bytecode, path=path)
