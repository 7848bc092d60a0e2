"""
Address Map
Persists and reads the contract name -> address JSON produced by a run
"""

import os
import re
import json
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from loguru import logger

from .exceptions import AddressMapNotFoundError, DeploymentError, InvalidAddressError

DEFAULT_SECTION = 'addresses'
DEFAULT_ADDRESSES_DIR = 'addresses'
DEFAULT_ADDRESS_FILE = 'contractAddresses.json'

ADDRESS_PATTERN = re.compile(r'^0x[0-9a-fA-F]{40}$')


def is_hex_address(value) -> bool:
    """True for a 0x-prefixed 20-byte hex string (any casing)"""
    return isinstance(value, str) and bool(ADDRESS_PATTERN.match(value))


def get_addresses_dir(output_dir: Optional[Union[Path, str]] = None) -> Path:
    """
    Directory address maps are written to

    Args:
        output_dir: Explicit directory (defaults to $ADDRESSES_DIR, then ./addresses)
    """
    if output_dir is None:
        output_dir = os.getenv('ADDRESSES_DIR', DEFAULT_ADDRESSES_DIR)
    return Path(output_dir)


def get_default_address_file() -> Path:
    """Reader input: $ADDRESS_FILE, else addresses/contractAddresses.json"""
    env_path = os.getenv('ADDRESS_FILE')
    if env_path:
        return Path(env_path)
    return get_addresses_dir() / DEFAULT_ADDRESS_FILE


def write_address_map(
    addresses: Mapping[str, str],
    path: Union[Path, str],
    section: Optional[str] = None
) -> Path:
    """
    Write the address map, replacing any previous file

    Args:
        addresses: Contract name -> address
        path: Output JSON file
        section: Optional top-level key wrapping the mapping

    Returns:
        Path written

    Raises:
        InvalidAddressError: If a value is not a hex address
        OSError: If the file cannot be written
    """
    for name, address in addresses.items():
        if not is_hex_address(address):
            raise InvalidAddressError(f"{name} has invalid address {address!r}")

    document = {section: dict(addresses)} if section else dict(addresses)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Previous map stays in place until the new one is complete
    tmp_path = path.with_name(path.name + '.tmp')
    try:
        with open(tmp_path, 'w') as f:
            json.dump(document, f, indent=2)
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise

    return path


def save_address_map(
    addresses: Mapping[str, str],
    path: Union[Path, str],
    section: Optional[str] = None
) -> bool:
    """
    Write the address map, logging instead of raising on I/O errors

    Returns:
        True if the file was written
    """
    try:
        written = write_address_map(addresses, path, section)
    except OSError as e:
        logger.error(f"Error in writing addresses file {path}: {e}")
        return False

    logger.success(f"Addresses file correctly generated: {written}")
    return True


def read_address_map(path: Union[Path, str], section: str = DEFAULT_SECTION) -> Dict[str, str]:
    """
    Load an address map

    Accepts both the sectioned layout ({"addresses": {...}}) and a flat
    name -> address object.

    Args:
        path: JSON file
        section: Key holding the mapping in sectioned files

    Returns:
        Contract name -> address, in file order

    Raises:
        AddressMapNotFoundError: If the file does not exist
        DeploymentError: If the file is not a name -> address object
    """
    path = Path(path)
    if not path.exists():
        raise AddressMapNotFoundError(f"Address file not found at {path}")

    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DeploymentError(f"Address file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DeploymentError(f"Address file {path} must contain a JSON object")

    if isinstance(data.get(section), dict):
        data = data[section]

    for name, address in data.items():
        if not isinstance(address, str):
            raise DeploymentError(f"Entry {name!r} in {path} is not an address string")

    return data


def format_address_lines(addresses: Mapping[str, str]) -> List[str]:
    """One '<Name> address: <address>' line per entry, values untouched"""
    return [f"{name} address: {address}" for name, address in addresses.items()]
