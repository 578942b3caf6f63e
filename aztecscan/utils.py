import json
from pathlib import Path
from typing import Optional

import yaml

from aztecscan.types import DeployerMetadata


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def load_deployer_metadata(filepath: Optional[Path]) -> Optional[DeployerMetadata]:
    """
    Loads deployer metadata from a YAML (or JSON) file in the camelCase shape
    accepted by the explorer API. Returns None when no file is given.
    """
    if filepath is None:
        return None

    data = _load_yaml(filepath)
    if not isinstance(data, dict):
        raise ValueError(f"Malformed deployer metadata file {filepath}.")

    # some files nest the metadata under its payload key
    data = data.get("deployerMetadata", data)
    return DeployerMetadata.from_dict(data)
