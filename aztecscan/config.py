import os
from typing import NamedTuple, Optional

from aztecscan.constants import (
    API_KEY_ENV_KEY,
    AZTEC_NODE_URL_ENV_KEY,
    DEFAULT_AZTEC_NODE_URL,
    DEFAULT_NETWORK,
    EXPLORER_API_URL_ENV_KEY,
    EXPLORER_API_URLS,
    SUPPORTED_NETWORKS,
    TEMPORARY_API_KEY,
)


class AztecScanConfig(NamedTuple):
    """Base URL of the explorer API (no trailing slash) and the API key placed in its path."""

    explorer_api_url: str
    api_key: str


NETWORKS = {
    network: AztecScanConfig(explorer_api_url=url, api_key=TEMPORARY_API_KEY)
    for network, url in EXPLORER_API_URLS.items()
}


def get_network_preset(network: str) -> AztecScanConfig:
    """Returns the well-known configuration for a network name."""
    try:
        return NETWORKS[network]
    except KeyError:
        raise ValueError(
            f"Unknown network '{network}'; expected one of {', '.join(SUPPORTED_NETWORKS)}"
        )


def create_config(
    explorer_api_url: Optional[str] = None,
    api_key: Optional[str] = None,
    network: Optional[str] = None,
) -> AztecScanConfig:
    """
    Resolves the explorer API configuration.

    Each field is taken from, in priority order:
      1. the explicit argument
      2. the environment (EXPLORER_API_URL, API_KEY)
      3. the network preset (devnet unless specified)

    The environment is read on every call so that .env files loaded
    after import are honoured.
    """
    preset = get_network_preset(network or DEFAULT_NETWORK)

    explorer_api_url = (
        explorer_api_url
        or os.environ.get(EXPLORER_API_URL_ENV_KEY)
        or preset.explorer_api_url
    )
    api_key = api_key or os.environ.get(API_KEY_ENV_KEY) or preset.api_key

    return AztecScanConfig(explorer_api_url=explorer_api_url.rstrip("/"), api_key=api_key)


def get_aztec_node_url() -> str:
    return os.environ.get(AZTEC_NODE_URL_ENV_KEY) or DEFAULT_AZTEC_NODE_URL
