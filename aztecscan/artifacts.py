import json
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Union

from aztecscan.types import ArtifactObject
from aztecscan.utils import _load_json

DEPLOYMENT_ARTIFACT_JSON_FORMAT = {"indent": 2}

REQUIRED_DEPLOYMENT_ARTIFACT_KEYS = [
    "address",
    "deployer",
    "constructorArgs",
    "salt",
    "publicKeys",
    "version",
    "classId",
    "contractArtifact",
]


class DeploymentArtifact(NamedTuple):
    """Record of a single contract deployment, including the deployed contract artifact."""

    address: str
    deployer: str
    constructor_args: List[Any]
    salt: str
    # either the concatenated string or the four master public keys
    public_keys: Union[str, Dict[str, str]]
    version: int
    class_id: str
    contract_artifact: ArtifactObject


def read_deployment_artifact(filepath: Path) -> DeploymentArtifact:
    if not filepath.exists():
        raise FileNotFoundError(f"Deployment artifact not found at {filepath}")

    data = _load_json(filepath)
    missing = [key for key in REQUIRED_DEPLOYMENT_ARTIFACT_KEYS if key not in data]
    if missing:
        raise ValueError(
            f"Deployment artifact at {filepath} is missing field(s): {', '.join(missing)}"
        )

    return DeploymentArtifact(
        address=data["address"],
        deployer=data["deployer"],
        constructor_args=data["constructorArgs"],
        salt=data["salt"],
        public_keys=data["publicKeys"],
        version=int(data["version"]),
        class_id=data["classId"],
        contract_artifact=data["contractArtifact"],
    )


def write_deployment_artifact(artifact: DeploymentArtifact, filepath: Path) -> Path:
    data = {
        "address": artifact.address,
        "deployer": artifact.deployer,
        "constructorArgs": list(artifact.constructor_args),
        "salt": artifact.salt,
        "publicKeys": artifact.public_keys,
        "version": artifact.version,
        "classId": artifact.class_id,
        "contractArtifact": artifact.contract_artifact,
    }

    filepath.parent.mkdir(parents=True, exist_ok=True)
    if filepath.exists():
        print(f"Overwriting existing deployment artifact at {filepath}.")

    with open(filepath, "w") as file:
        json.dump(data, file, **DEPLOYMENT_ARTIFACT_JSON_FORMAT)

    return filepath
