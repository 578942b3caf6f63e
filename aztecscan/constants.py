from pathlib import Path

#
# Filesystem
#

DEFAULT_DEPLOYMENT_ARTIFACT_FILEPATH = Path("deployment-artifact.json")

#
# Networks
#

DEVNET = "devnet"
TESTNET = "testnet"
MAINNET = "mainnet"

SUPPORTED_NETWORKS = [DEVNET, TESTNET, MAINNET]

DEFAULT_NETWORK = DEVNET

TEMPORARY_API_KEY = "temporary-api-key"

EXPLORER_API_URLS = {
    DEVNET: "https://api.devnet.aztecscan.xyz",
    TESTNET: "https://api.testnet.aztecscan.xyz",
    MAINNET: "https://api.aztecscan.xyz",
}

DEFAULT_AZTEC_NODE_URL = "https://v4-devnet-2.aztec-labs.com/"

#
# Environment
#

EXPLORER_API_URL_ENV_KEY = "EXPLORER_API_URL"
API_KEY_ENV_KEY = "API_KEY"
AZTEC_NODE_URL_ENV_KEY = "AZTEC_NODE_URL"

#
# HTTP
#

DEFAULT_TIMEOUT = 30  # seconds
SUPPORTED_HTTP_METHODS = ["GET", "POST", "PUT", "DELETE"]
LOG_PREFIX = "[aztec-scan-sdk]"

#
# Verified deployment arguments, as checked by the explorer API
#

PUBLIC_KEYS_STRING_LENGTH = 514  # "0x" + 4 * 128 hex chars
DEPLOYER_LENGTH = 66  # "0x" + 64 hex chars
SALT_LENGTH = 66  # "0x" + 64 hex chars

# Order in which the master public keys are concatenated
PUBLIC_KEYS_ORDER = [
    "masterNullifierPublicKey",
    "masterIncomingViewingPublicKey",
    "masterOutgoingViewingPublicKey",
    "masterTaggingPublicKey",
]
