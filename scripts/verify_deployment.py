#!/usr/bin/python3
import json
from pathlib import Path

import click
from dotenv import load_dotenv

from aztecscan.artifacts import read_deployment_artifact
from aztecscan.client import AztecScanClient
from aztecscan.helpers import from_deployment_artifact
from aztecscan.options import (
    api_key_option,
    deployment_artifact_option,
    explorer_api_url_option,
    metadata_option,
    network_option,
    timeout_option,
)
from aztecscan.utils import load_deployer_metadata


@click.command()
@network_option
@explorer_api_url_option
@api_key_option
@timeout_option
@deployment_artifact_option
@metadata_option
@click.option(
    "--skip-artifact",
    help="Do not attach the contract artifact; use when it is already verified",
    is_flag=True,
    default=False,
)
def cli(
    network,
    explorer_api_url,
    api_key,
    timeout,
    deployment_artifact_filepath: Path,
    metadata_filepath,
    skip_artifact,
):
    """Verify a deployed contract instance on AztecScan."""
    load_dotenv()

    deployment_artifact = read_deployment_artifact(deployment_artifact_filepath)
    deployer_metadata = load_deployer_metadata(metadata_filepath)
    address, _, verify_instance_args = from_deployment_artifact(deployment_artifact)
    if skip_artifact:
        verify_instance_args = verify_instance_args._replace(artifact_obj=None)

    print(f"Verifying deployment for contract instance address: {address}")
    print(f"Constructor args: {json.dumps(verify_instance_args.constructor_args)}")
    if deployer_metadata:
        print(f"Deployer metadata: {json.dumps(deployer_metadata.to_json_dict())}")

    client = AztecScanClient(
        explorer_api_url=explorer_api_url, api_key=api_key, network=network, timeout=timeout
    )
    try:
        result = client.verify_instance(
            contract_instance_address=address,
            args=verify_instance_args,
            deployer_metadata=deployer_metadata,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--deployment-artifact")

    if not result.ok:
        raise click.ClickException(
            f"Verification failed: {result.status} {result.status_text}"
        )
    print("(i) Verification completed successfully!")


if __name__ == "__main__":
    cli()
