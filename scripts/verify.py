#!/usr/bin/python3
import time
from pathlib import Path

import click
from dotenv import load_dotenv

from aztecscan.api import generate_verify_instance_payload
from aztecscan.artifacts import read_deployment_artifact
from aztecscan.client import AztecScanClient
from aztecscan.config import get_aztec_node_url
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
    "--wait",
    "-w",
    help="Seconds to wait for the explorer indexer before verifying",
    type=click.IntRange(min=0),
    default=15,
    show_default=True,
)
def cli(
    network,
    explorer_api_url,
    api_key,
    timeout,
    deployment_artifact_filepath: Path,
    metadata_filepath,
    wait,
):
    """Verify both the contract artifact and the deployed instance on AztecScan."""
    load_dotenv()

    deployment_artifact = read_deployment_artifact(deployment_artifact_filepath)
    deployer_metadata = load_deployer_metadata(metadata_filepath)
    address, contract_class_id, verify_instance_args = from_deployment_artifact(
        deployment_artifact
    )
    try:
        generate_verify_instance_payload(verify_instance_args)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--deployment-artifact")

    client = AztecScanClient(
        explorer_api_url=explorer_api_url, api_key=api_key, network=network, timeout=timeout
    )
    print(
        f"Aztec node: {get_aztec_node_url()}",
        f"Explorer API: {client.config.explorer_api_url}",
        f"Contract address: {address}",
        f"Contract class ID: {contract_class_id}",
        f"Salt: {verify_instance_args.salt}",
        f"Deployer: {verify_instance_args.deployer}",
        f"Public keys string length: {len(verify_instance_args.public_keys_string)}",
        sep="\n",
    )

    if wait:
        print(f"Waiting {wait}s for indexer to catch up...")
        time.sleep(wait)

    print("\n(i) Verifying artifact...")
    artifact_result = client.verify_artifact(
        contract_class_id=contract_class_id,
        version=deployment_artifact.version,
        artifact_obj=deployment_artifact.contract_artifact,
    )

    print("\n(i) Verifying instance...")
    instance_result = client.verify_instance(
        contract_instance_address=address,
        args=verify_instance_args,
        deployer_metadata=deployer_metadata,
    )

    print(
        "\nSummary",
        f"\tContract address:  {address}",
        f"\tContract class ID: {contract_class_id}",
        f"\tArtifact verified: {'YES' if artifact_result.ok else 'NO'}",
        f"\tInstance verified: {'YES' if instance_result.ok else 'NO'}",
        sep="\n",
    )

    if not (artifact_result.ok and instance_result.ok):
        raise click.ClickException("Verification failed.")


if __name__ == "__main__":
    cli()
