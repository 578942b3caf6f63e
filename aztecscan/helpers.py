"""
Conversions from deployed contract instances to verification arguments.

Deployment tools hand back instance objects whose fields (Fr, AztecAddress,
PublicKeys...) render as hex strings; the explorer API wants plain strings.
"""

from typing import Any, List, Mapping, NamedTuple, Optional, Sequence, Union

from eth_utils import add_0x_prefix, remove_0x_prefix

from aztecscan.artifacts import DeploymentArtifact
from aztecscan.constants import PUBLIC_KEYS_ORDER
from aztecscan.types import ArtifactObject, ContractInstanceWithAddress, VerifyInstanceArgs


class FromContractInstanceResult(NamedTuple):
    # first argument to AztecScanClient.verify_instance
    address: str
    # first argument to AztecScanClient.verify_artifact
    contract_class_id: str
    verify_instance_args: VerifyInstanceArgs


def stringify_constructor_arg(value: Any) -> str:
    """Renders a constructor argument the way the deployment tooling serializes it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def stringify_constructor_args(constructor_args: Optional[Sequence[Any]]) -> List[str]:
    return [stringify_constructor_arg(arg) for arg in constructor_args or []]


def public_keys_to_string(public_keys: Union[str, Mapping[str, Any]]) -> str:
    """
    Returns the concatenated public keys string expected by the explorer.

    Accepts either the already concatenated string or a mapping of the four
    master public keys (as found in deployment artifact files).
    """
    if isinstance(public_keys, str):
        return public_keys

    missing = [key for key in PUBLIC_KEYS_ORDER if key not in public_keys]
    if missing:
        raise ValueError(f"Public keys missing: {', '.join(missing)}")

    keys = [remove_0x_prefix(str(public_keys[key])) for key in PUBLIC_KEYS_ORDER]
    return add_0x_prefix("".join(keys))


def from_contract_instance(
    instance: ContractInstanceWithAddress,
    constructor_args: Optional[Sequence[Any]] = None,
    artifact_obj: Optional[ArtifactObject] = None,
) -> FromContractInstanceResult:
    """
    Extracts the instance address, contract class ID, and instance verification
    arguments from a deployed contract instance.

    Pass the constructor arguments exactly as they were given to the deploy
    call; they are stringified here. Including ``artifact_obj`` lets the
    explorer verify the artifact together with the instance.
    """
    verify_instance_args = VerifyInstanceArgs(
        public_keys_string=str(instance.public_keys),
        deployer=str(instance.deployer),
        salt=str(instance.salt),
        constructor_args=stringify_constructor_args(constructor_args),
        artifact_obj=artifact_obj,
    )
    return FromContractInstanceResult(
        address=str(instance.address),
        contract_class_id=str(instance.current_contract_class_id),
        verify_instance_args=verify_instance_args,
    )


def from_deployment_artifact(deployment_artifact: DeploymentArtifact) -> FromContractInstanceResult:
    """Same as ``from_contract_instance``, for a deployment artifact read from disk."""
    verify_instance_args = VerifyInstanceArgs(
        public_keys_string=public_keys_to_string(deployment_artifact.public_keys),
        deployer=str(deployment_artifact.deployer),
        salt=str(deployment_artifact.salt),
        constructor_args=stringify_constructor_args(deployment_artifact.constructor_args),
        artifact_obj=deployment_artifact.contract_artifact,
    )
    return FromContractInstanceResult(
        address=str(deployment_artifact.address),
        contract_class_id=str(deployment_artifact.class_id),
        verify_instance_args=verify_instance_args,
    )
