import json
import threading
from typing import Any, Mapping, Optional

import requests

from aztecscan.config import AztecScanConfig
from aztecscan.constants import (
    DEFAULT_TIMEOUT,
    DEPLOYER_LENGTH,
    LOG_PREFIX,
    PUBLIC_KEYS_STRING_LENGTH,
    SALT_LENGTH,
    SUPPORTED_HTTP_METHODS,
)
from aztecscan.types import (
    ApiResponse,
    ArtifactObject,
    DeployerMetadata,
    VerifiedDeploymentArguments,
    VerifyArtifactPayload,
    VerifyInstanceArgs,
    VerifyInstancePayload,
)


class PayloadValidationError(ValueError):
    """Raised when a payload field would be rejected by the explorer API."""


class ExplorerApiTimeout(TimeoutError):
    """Raised when the explorer API does not answer within the configured timeout."""


#
# URLs
#


def generate_verify_artifact_url(
    config: AztecScanConfig, contract_class_id: str, version: int
) -> str:
    """POST /v1/{apiKey}/l2/contract-classes/{classId}/versions/{version}"""
    return (
        f"{config.explorer_api_url}/v1/{config.api_key}"
        f"/l2/contract-classes/{contract_class_id}/versions/{version}"
    )


def generate_verify_instance_url(config: AztecScanConfig, contract_instance_address: str) -> str:
    """POST /v1/{apiKey}/l2/contract-instances/{address}"""
    return (
        f"{config.explorer_api_url}/v1/{config.api_key}"
        f"/l2/contract-instances/{contract_instance_address}"
    )


#
# Payloads
#


def unwrap_artifact(artifact_obj: ArtifactObject) -> Any:
    """Returns the artifact inside a module-shaped ``{"default": artifact}`` object."""
    default = artifact_obj.get("default")
    if isinstance(default, Mapping):
        return default
    return artifact_obj


def stringify_artifact(artifact_obj: ArtifactObject) -> str:
    return json.dumps(unwrap_artifact(artifact_obj), separators=(",", ":"), ensure_ascii=False)


def generate_verify_artifact_payload(artifact_obj: ArtifactObject) -> VerifyArtifactPayload:
    return VerifyArtifactPayload(stringified_artifact_json=stringify_artifact(artifact_obj))


def _validate_length(field: str, value: str, expected: int) -> None:
    if len(value) != expected:
        raise PayloadValidationError(
            f"Invalid {field} length: expected {expected}, got {len(value)}"
        )


def generate_verify_instance_payload(args: VerifyInstanceArgs) -> VerifiedDeploymentArguments:
    """
    Generates the ``verifiedDeploymentArguments`` for instance verification.

    Field lengths are checked here, before anything is sent, using the
    same limits as the explorer:
      - publicKeysString: 514 chars ("0x" + 4*128 hex chars)
      - deployer: 66 chars ("0x" + 64 hex chars)
      - salt: 66 chars ("0x" + 64 hex chars)
    """
    _validate_length("publicKeysString", args.public_keys_string, PUBLIC_KEYS_STRING_LENGTH)
    _validate_length("deployer", args.deployer, DEPLOYER_LENGTH)
    _validate_length("salt", args.salt, SALT_LENGTH)

    stringified_artifact_json = None
    if args.artifact_obj is not None:
        stringified_artifact_json = stringify_artifact(args.artifact_obj)

    return VerifiedDeploymentArguments(
        salt=args.salt,
        deployer=args.deployer,
        public_keys_string=args.public_keys_string,
        constructor_args=list(args.constructor_args),
        stringified_artifact_json=stringified_artifact_json,
    )


def build_verify_instance_body(
    args: VerifyInstanceArgs, deployer_metadata: Optional[DeployerMetadata] = None
) -> VerifyInstancePayload:
    return VerifyInstancePayload(
        verified_deployment_arguments=generate_verify_instance_payload(args),
        deployer_metadata=deployer_metadata,
    )


#
# HTTP
#


def _parse_response_data(response: requests.Response) -> Any:
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        return response.json()
    return response.text


def _request_within(
    method: str, url: str, data: Optional[bytes], headers: Optional[dict], timeout: float
) -> requests.Response:
    """
    Sends the request on a daemon thread and waits at most ``timeout`` seconds
    for the complete response. requests only bounds each socket operation, so a
    server trickling its body would otherwise never be cut off.
    """
    outcome = {}

    def _send():
        try:
            outcome["response"] = requests.request(
                method, url, data=data, headers=headers, timeout=timeout
            )
        except Exception as e:
            outcome["error"] = e

    worker = threading.Thread(target=_send, name=f"aztecscan {method} {url}", daemon=True)
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        raise requests.exceptions.Timeout(f"No complete response within {timeout}s")
    if "error" in outcome:
        raise outcome["error"]
    return outcome["response"]


def call_explorer_api(
    url: str,
    method: str,
    body: Optional[str] = None,
    label: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ApiResponse:
    """
    Makes a single request to the explorer API.

    Non-2xx responses are returned in the envelope for the caller to inspect;
    only timeouts and transport failures raise.
    """
    method = method.upper()
    if method not in SUPPORTED_HTTP_METHODS:
        raise ValueError(
            f"Unsupported method '{method}'; expected one of {', '.join(SUPPORTED_HTTP_METHODS)}"
        )
    label = label or method

    data = body.encode("utf-8") if body is not None else None
    size_mb = len(data or b"") / 1_000_000
    print(f"{LOG_PREFIX} {label} -> {method} {url} ({size_mb:.2f} MB)")

    headers = {"Content-Type": "application/json"} if body is not None else None
    try:
        response = _request_within(method, url, data, headers, timeout)
    except requests.exceptions.Timeout as e:
        raise ExplorerApiTimeout(f"{label} timed out after {timeout}s ({method} {url})") from e

    response_data = _parse_response_data(response)
    ok = 200 <= response.status_code < 300

    if ok:
        print(f"{LOG_PREFIX} {label} <- {response.status_code} {response.reason}")
    else:
        details = response_data if isinstance(response_data, str) else json.dumps(response_data)
        print(f"{LOG_PREFIX} {label} <- {response.status_code} {response.reason} {details}")

    return ApiResponse(
        ok=ok,
        status=response.status_code,
        status_text=response.reason or "",
        data=response_data,
    )
