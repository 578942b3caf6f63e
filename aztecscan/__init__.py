"""
Python SDK for verifying Aztec contract artifacts and deployments on AztecScan.

Provides a stateful ``AztecScanClient`` for most use cases, plus the
stateless URL, payload, and HTTP helpers it is built from.
"""

from aztecscan.api import (
    ExplorerApiTimeout,
    PayloadValidationError,
    build_verify_instance_body,
    call_explorer_api,
    generate_verify_artifact_payload,
    generate_verify_artifact_url,
    generate_verify_instance_payload,
    generate_verify_instance_url,
)
from aztecscan.artifacts import (
    DeploymentArtifact,
    read_deployment_artifact,
    write_deployment_artifact,
)
from aztecscan.client import AztecScanClient
from aztecscan.config import NETWORKS, AztecScanConfig, create_config
from aztecscan.helpers import (
    FromContractInstanceResult,
    from_contract_instance,
    from_deployment_artifact,
)
from aztecscan.types import (
    ApiResponse,
    AztecScanNotes,
    DeployerMetadata,
    RelatedL1ContractAddress,
    VerifiedDeploymentArguments,
    VerifyArtifactPayload,
    VerifyInstanceArgs,
    VerifyInstancePayload,
)

__version__ = "0.2.0"
