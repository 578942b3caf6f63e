from pathlib import Path

import click

from aztecscan.constants import (
    DEFAULT_DEPLOYMENT_ARTIFACT_FILEPATH,
    DEFAULT_TIMEOUT,
    SUPPORTED_NETWORKS,
)

network_option = click.option(
    "--network",
    "-n",
    help="AztecScan network preset; overridden by EXPLORER_API_URL / API_KEY",
    type=click.Choice(SUPPORTED_NETWORKS),
    required=False,
)

explorer_api_url_option = click.option(
    "--explorer-api-url",
    help="AztecScan explorer API base URL",
    type=click.STRING,
    required=False,
)

api_key_option = click.option(
    "--api-key",
    help="AztecScan API key",
    type=click.STRING,
    required=False,
)

timeout_option = click.option(
    "--timeout",
    "-t",
    help="Request timeout in seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT,
    show_default=True,
)

deployment_artifact_option = click.option(
    "--deployment-artifact",
    "-f",
    "deployment_artifact_filepath",
    help="Filepath of the deployment artifact written after deploying the contract",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=DEFAULT_DEPLOYMENT_ARTIFACT_FILEPATH,
    show_default=True,
)

metadata_option = click.option(
    "--metadata",
    "-m",
    "metadata_filepath",
    help="YAML file with deployer metadata to attach to the verified instance",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=False,
)
