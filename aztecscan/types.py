"""
Payload and response shapes of the AztecScan explorer API.

Field names are snake_case in Python; ``to_json_dict`` produces the
camelCase shape the explorer API validates against.
"""

import typing
from typing import Any, Dict, List, NamedTuple, Optional

ArtifactObject = Dict[str, Any]


#
# Artifact verification
#


class VerifyArtifactPayload(NamedTuple):
    """Body of POST /l2/contract-classes/:classId/versions/:version"""

    stringified_artifact_json: str

    def to_json_dict(self) -> Dict[str, Any]:
        return {"stringifiedArtifactJson": self.stringified_artifact_json}


#
# Instance verification
#


class VerifiedDeploymentArguments(NamedTuple):
    """
    The inner ``verifiedDeploymentArguments`` object.
    The explorer requires publicKeysString to be 514 chars, deployer and salt 66 chars.
    """

    salt: str
    deployer: str
    public_keys_string: str
    constructor_args: List[str]
    # only needed if the artifact has not been verified yet
    stringified_artifact_json: Optional[str] = None

    def to_json_dict(self) -> Dict[str, Any]:
        data = {
            "salt": self.salt,
            "deployer": self.deployer,
            "publicKeysString": self.public_keys_string,
            "constructorArgs": list(self.constructor_args),
        }
        if self.stringified_artifact_json is not None:
            data["stringifiedArtifactJson"] = self.stringified_artifact_json
        return data


class RelatedL1ContractAddress(NamedTuple):
    address: str
    note: str

    def to_json_dict(self) -> Dict[str, Any]:
        return {"address": self.address, "note": self.note}


class AztecScanNotes(NamedTuple):
    """Notes shown in the explorer UI for a contract instance (devnet/testnet only)."""

    name: str
    origin: str
    comment: str
    related_l1_contract_addresses: Optional[List[Optional[RelatedL1ContractAddress]]] = None

    def to_json_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "origin": self.origin, "comment": self.comment}
        if self.related_l1_contract_addresses is not None:
            data["relatedL1ContractAddresses"] = [
                entry.to_json_dict() if entry is not None else None
                for entry in self.related_l1_contract_addresses
            ]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AztecScanNotes":
        related = data.get("relatedL1ContractAddresses")
        if related is not None:
            related = [
                RelatedL1ContractAddress(address=entry["address"], note=entry["note"])
                if entry is not None
                else None
                for entry in related
            ]
        return cls(
            name=data["name"],
            origin=data["origin"],
            comment=data["comment"],
            related_l1_contract_addresses=related,
        )


class DeployerMetadata(NamedTuple):
    """Optional descriptive metadata attached to a verified instance."""

    contract_identifier: str
    details: str
    creator_name: str
    creator_contact: str
    app_url: str
    repo_url: str
    contract_type: Optional[str] = None
    aztec_scan_notes: Optional[AztecScanNotes] = None

    def to_json_dict(self) -> Dict[str, Any]:
        data = {
            "contractIdentifier": self.contract_identifier,
            "details": self.details,
            "creatorName": self.creator_name,
            "creatorContact": self.creator_contact,
            "appUrl": self.app_url,
            "repoUrl": self.repo_url,
        }
        if self.contract_type is not None:
            data["contractType"] = self.contract_type
        if self.aztec_scan_notes is not None:
            data["aztecScanNotes"] = self.aztec_scan_notes.to_json_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeployerMetadata":
        """Loads metadata from its camelCase JSON/YAML shape."""
        missing = [
            key
            for key in (
                "contractIdentifier",
                "details",
                "creatorName",
                "creatorContact",
                "appUrl",
                "repoUrl",
            )
            if key not in data
        ]
        if missing:
            raise ValueError(f"Deployer metadata missing field(s): {', '.join(missing)}")

        notes = data.get("aztecScanNotes")
        return cls(
            contract_identifier=data["contractIdentifier"],
            details=data["details"],
            creator_name=data["creatorName"],
            creator_contact=data["creatorContact"],
            app_url=data["appUrl"],
            repo_url=data["repoUrl"],
            contract_type=data.get("contractType"),
            aztec_scan_notes=AztecScanNotes.from_dict(notes) if notes else None,
        )


class VerifyInstancePayload(NamedTuple):
    """Body of POST /l2/contract-instances/:address"""

    verified_deployment_arguments: VerifiedDeploymentArguments
    deployer_metadata: Optional[DeployerMetadata] = None

    def to_json_dict(self) -> Dict[str, Any]:
        data = {"verifiedDeploymentArguments": self.verified_deployment_arguments.to_json_dict()}
        if self.deployer_metadata is not None:
            data["deployerMetadata"] = self.deployer_metadata.to_json_dict()
        return data


class VerifyInstanceArgs(NamedTuple):
    """
    Input to the instance payload builder. ``artifact_obj`` may be the raw
    artifact or a module-shaped ``{"default": artifact}`` object.
    """

    public_keys_string: str
    deployer: str
    salt: str
    constructor_args: List[str]
    artifact_obj: Optional[ArtifactObject] = None


#
# Responses
#


class ApiResponse(NamedTuple):
    """Uniform envelope returned for every explorer API call."""

    ok: bool
    status: int
    status_text: str
    data: Any


#
# Deployed instances
#


class ContractInstanceWithAddress(typing.Protocol):
    """
    A deployed contract instance, as returned by a deployment tool.
    Every attribute only needs to render as a hex string through ``str()``.
    """

    salt: Any
    deployer: Any
    public_keys: Any
    address: Any
    current_contract_class_id: Any
