import json
from typing import Optional

from aztecscan.api import (
    build_verify_instance_body,
    call_explorer_api,
    generate_verify_artifact_payload,
    generate_verify_artifact_url,
    generate_verify_instance_url,
)
from aztecscan.config import AztecScanConfig, create_config
from aztecscan.constants import DEFAULT_TIMEOUT
from aztecscan.types import ApiResponse, ArtifactObject, DeployerMetadata, VerifyInstanceArgs


class AztecScanClient:
    """
    Verifies contract artifacts and contract instances against the AztecScan explorer API.

    Configuration is resolved once, at construction, from the explicit
    arguments, then the environment, then the network preset.
    """

    def __init__(
        self,
        explorer_api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        network: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.config: AztecScanConfig = create_config(
            explorer_api_url=explorer_api_url, api_key=api_key, network=network
        )
        self.timeout = timeout

    def verify_artifact(
        self, contract_class_id: str, version: int, artifact_obj: ArtifactObject
    ) -> ApiResponse:
        """
        Verifies a contract artifact (contract class).
        Status 200 means already verified, 201 newly verified.
        """
        url = generate_verify_artifact_url(self.config, contract_class_id, version)
        payload = generate_verify_artifact_payload(artifact_obj)
        return call_explorer_api(
            url=url,
            method="POST",
            body=json.dumps(payload.to_json_dict(), separators=(",", ":")),
            label=f"verifyArtifact({contract_class_id}, v{version})",
            timeout=self.timeout,
        )

    def verify_instance(
        self,
        contract_instance_address: str,
        args: VerifyInstanceArgs,
        deployer_metadata: Optional[DeployerMetadata] = None,
    ) -> ApiResponse:
        """
        Verifies a contract instance deployment.
        Raises PayloadValidationError before any request if a field has the wrong length.
        """
        url = generate_verify_instance_url(self.config, contract_instance_address)
        payload = build_verify_instance_body(args, deployer_metadata)
        return call_explorer_api(
            url=url,
            method="POST",
            body=json.dumps(payload.to_json_dict(), separators=(",", ":")),
            label=f"verifyInstance({contract_instance_address})",
            timeout=self.timeout,
        )
