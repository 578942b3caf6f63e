#!/usr/bin/python3
from pathlib import Path

import click
from dotenv import load_dotenv

from aztecscan.artifacts import read_deployment_artifact
from aztecscan.client import AztecScanClient
from aztecscan.options import (
    api_key_option,
    deployment_artifact_option,
    explorer_api_url_option,
    network_option,
    timeout_option,
)


@click.command()
@network_option
@explorer_api_url_option
@api_key_option
@timeout_option
@deployment_artifact_option
@click.option(
    "--contract-name",
    "-c",
    help="Contract name used in output",
    type=click.STRING,
    default="Token Contract",
    show_default=True,
)
def cli(
    network,
    explorer_api_url,
    api_key,
    timeout,
    deployment_artifact_filepath: Path,
    contract_name,
):
    """Register (verify) a contract class artifact on AztecScan."""
    load_dotenv()

    deployment_artifact = read_deployment_artifact(deployment_artifact_filepath)
    contract_class_id = str(deployment_artifact.class_id)
    version = deployment_artifact.version

    client = AztecScanClient(
        explorer_api_url=explorer_api_url, api_key=api_key, network=network, timeout=timeout
    )
    print(
        f"Registering {contract_name} with class ID: {contract_class_id}, version: {version}"
    )
    result = client.verify_artifact(
        contract_class_id=contract_class_id,
        version=version,
        artifact_obj=deployment_artifact.contract_artifact,
    )
    if not result.ok:
        raise click.ClickException(
            f"Registration failed: {result.status} {result.status_text}"
        )
    print("(i) Registration completed successfully!")


if __name__ == "__main__":
    cli()
