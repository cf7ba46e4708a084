# -*- coding: utf-8 -*-

# Copyright: (c) 2022, Daniel Schmidt <danischm@cisco.com>

import logging
from typing import NoReturn

import errorhandler

import typer
from typing_extensions import Annotated

import agent_datamodel
from agent_datamodel.cli.validators import validate_dns_prefix
from agent_datamodel.core.constants import EXIT_ERROR, EXIT_SUCCESS
from agent_datamodel.core.errors import DataModelError
from agent_datamodel.core.sku import get_sku_info
from agent_datamodel.utils.logging import configure_logging, VerbosityLevel
from agent_datamodel.utils.strings import get_ordered_escaped_key_vals_string
from agent_datamodel.utils.terminal import terminal
from agent_datamodel.utils.url import (
    get_component_name_from_url,
    get_container_image_name_from_url,
)


app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"agent-datamodel, version {agent_datamodel.__version__}")
        raise typer.Exit()


def parse_key_vals(values: list[str]) -> dict[str, str]:
    config: dict[str, str] = {}
    for value in values:
        key, sep, val = value.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{value}'")
        config[key] = val
    return config


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="AGENT_DATAMODEL_VERBOSITY",
        is_eager=True,
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


DNSPrefix = Annotated[
    str,
    typer.Argument(
        help="Cluster DNS prefix to validate.",
        envvar="AGENT_DATAMODEL_DNS_PREFIX",
        show_default=False,
    ),
]


VMSize = Annotated[
    str,
    typer.Argument(
        help="VM size name, e.g. Standard_DS2_v2.",
        envvar="AGENT_DATAMODEL_VM_SIZE",
        show_default=False,
    ),
]


DownloadURL = Annotated[
    str,
    typer.Argument(
        help="Download file URL, e.g. https://acs-mirror.azureedge.net/cni-plugins/v*/binaries.",
        show_default=False,
    ),
]


ImageURL = Annotated[
    str,
    typer.Argument(
        help="Container image reference, e.g. mcr.microsoft.com/oss/kubernetes/pause:*.",
        show_default=False,
    ),
]


KeyVals = Annotated[
    list[str],
    typer.Argument(
        help="KEY=VALUE pairs to serialize.",
        show_default=False,
    ),
]


@app.callback()
def main(
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """Validation and string helpers for generated cluster configuration."""
    configure_logging(verbosity, error_handler)


@app.command("dns-prefix")
def dns_prefix(prefix: DNSPrefix) -> None:
    """Validate a cluster DNS prefix."""
    try:
        validate_dns_prefix(prefix)
    except DataModelError as e:
        report_error(e)
    else:
        typer.echo(terminal.success(f"DNSPrefix '{prefix}' is valid."))
    exit()


@app.command("sku")
def sku(vm_size: VMSize) -> None:
    """Show SGX support and managed disk tier for a VM size."""
    try:
        info = get_sku_info(vm_size)
    except DataModelError as e:
        report_error(e)
    else:
        typer.echo(terminal.format_sku_info(info))
    exit()


@app.command("component-name")
def component_name(url: DownloadURL) -> None:
    """Print the component name of a download file URL."""
    try:
        typer.echo(get_component_name_from_url(url))
    except DataModelError as e:
        report_error(e)
    exit()


@app.command("image-name")
def image_name(url: ImageURL) -> None:
    """Print the image name of a container image reference."""
    try:
        typer.echo(get_container_image_name_from_url(url))
    except DataModelError as e:
        report_error(e)
    exit()


@app.command("keyvals")
def keyvals(pairs: KeyVals) -> None:
    """Print KEY=VALUE pairs as an ordered, quoted list."""
    config = parse_key_vals(pairs)
    typer.echo(get_ordered_escaped_key_vals_string(config))
    exit()


def report_error(error: DataModelError) -> NoReturn:
    logger.error("%s", error)
    typer.echo(terminal.error(str(error)), err=True)
    # Exits even when --verbosity CRITICAL filters out the log record
    raise typer.Exit(EXIT_ERROR)


def exit() -> None:
    if error_handler.fired:
        raise typer.Exit(EXIT_ERROR)
    else:
        raise typer.Exit(EXIT_SUCCESS)
