"""Command line tool for rendering Talk2M authentication strings."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import replace
from typing import Any, NoReturn

import asyncclick as click
import orjson

from talk2m.authconfig import AuthConfig
from talk2m.const import Talk2MService
from talk2m.exceptions import InvalidConfigError

try:
    from rich import print as _echo
except ImportError:
    # Only lower case tags, post strings may contain brackets
    _MARKUP = re.compile(r"\[/?[a-z ]+]")

    def _echo(message=None, **kwargs) -> None:
        if message is not None:
            message = _MARKUP.sub("", message)
        click.echo(message, **kwargs)


def _json_output() -> bool:
    ctx = click.get_current_context().find_root()
    return bool(ctx.params.get("json"))


def echo(*args, **kwargs) -> None:
    """Print a message."""
    if not _json_output():
        _echo(*args, **kwargs)


def error(msg: str) -> NoReturn:
    """Print an error and exit.

    Errors go to stderr when JSON output is requested.
    """
    if _json_output():
        click.echo(msg, err=True)
    else:
        _echo(f"[bold red]{msg}[/bold red]")
    sys.exit(1)


def _dumps(data: Any) -> str:
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode()


def json_formatter_cb(result: Any, **kwargs) -> None:
    """Format and output the result as JSON, if requested."""
    if not kwargs.get("json") or result is None:
        return
    click.echo(_dumps(result))


@click.group(result_callback=json_formatter_cb)
@click.option(
    "--account",
    envvar="TALK2M_ACCOUNT",
    default=None,
    required=False,
    help="Talk2M account name.",
)
@click.option(
    "--username",
    envvar="TALK2M_USERNAME",
    default=None,
    required=False,
    help="Talk2M account username.",
)
@click.option(
    "--password",
    envvar="TALK2M_PASSWORD",
    default=None,
    required=False,
    help="Talk2M account password.",
)
@click.option(
    "--developer-id",
    envvar="TALK2M_DEVELOPER_ID",
    default=None,
    required=False,
    help="Talk2M developer ID identifying the application.",
)
@click.option(
    "--token",
    envvar="TALK2M_TOKEN",
    default=None,
    required=False,
    help="Talk2M token for DataMailbox access.",
)
@click.option(
    "--device-username",
    envvar="TALK2M_DEVICE_USERNAME",
    default=None,
    required=False,
    help="Username of the Ewon device to access through M2Web.",
)
@click.option(
    "--device-password",
    envvar="TALK2M_DEVICE_PASSWORD",
    default=None,
    required=False,
    help="Password of the Ewon device to access through M2Web.",
)
@click.option(
    "--config",
    "config_file",
    envvar="TALK2M_CONFIG",
    default=None,
    required=False,
    type=click.File("rb"),
    help="JSON file with stored credentials. Options override its values.",
)
@click.option(
    "--json/--no-json",
    envvar="TALK2M_JSON",
    default=False,
    is_flag=True,
    help="Output results as JSON.",
)
@click.option(
    "-d",
    "--debug",
    envvar="TALK2M_DEBUG",
    default=False,
    is_flag=True,
    help="Print debug output",
)
@click.version_option(package_name="python-talk2m")
@click.pass_context
async def cli(
    ctx,
    account,
    username,
    password,
    developer_id,
    token,
    device_username,
    device_password,
    config_file,
    json,
    debug,
):
    """A tool for building Talk2M DMWeb and M2Web authentication strings."""
    # no need to perform any checks if we are just displaying the help
    if "--help" in sys.argv:
        # Context object is required to avoid crashing on sub-groups
        ctx.obj = object()
        return

    logging_config: dict[str, Any] = {
        "level": logging.DEBUG if debug else logging.INFO
    }
    try:
        from rich.logging import RichHandler

        logging_config["handlers"] = [RichHandler(show_time=False)]
        logging_config["format"] = "%(message)s"
    except ImportError:
        pass

    logging.basicConfig(**logging_config)

    values = {
        "account": account,
        "username": username,
        "password": password,
        "developer_id": developer_id,
        "token": token,
        "device_username": device_username,
        "device_password": device_password,
    }
    try:
        if config_file is not None:
            config = AuthConfig.load(config_file.read())
            overrides = {name: value for name, value in values.items() if value}
            config = replace(config, **overrides)
        else:
            if bool(device_username) != bool(device_password):
                raise click.BadOptionUsage(
                    "device_username",
                    "Scoping to a device requires both --device-username "
                    "and --device-password",
                )
            config = AuthConfig.from_values(**values)
    except InvalidConfigError as ex:
        error(str(ex))

    ctx.obj = config


def _render(config: AuthConfig, service: Talk2MService) -> dict[str, str]:
    post_string = config.to_auth_info().to_post_string(service)
    if not _json_output():
        # Raw output, rich would wrap long strings
        click.echo(post_string)
    return {"service": service.value, "post_string": post_string}


@cli.command()
@click.pass_obj
async def dmweb(config: AuthConfig) -> dict[str, str]:
    """Print the authentication string for the DMWeb (DataMailbox) API."""
    return _render(config, Talk2MService.DmWeb)


@cli.command()
@click.pass_obj
async def m2web(config: AuthConfig) -> dict[str, str]:
    """Print the authentication string for the M2Web device proxy API."""
    if not config.has_device_credentials:
        echo("[yellow]No device credentials given, not scoped to a device[/yellow]")
    return _render(config, Talk2MService.M2Web)


@cli.command(name="config")
@click.option(
    "--include-secrets",
    default=False,
    is_flag=True,
    help="Include passwords and the token in the output.",
)
@click.pass_obj
async def show_config(config: AuthConfig, include_secrets: bool) -> dict[str, Any]:
    """Print the credential configuration as JSON."""
    data = config.to_dict_control_secrets(exclude_secrets=not include_secrets)
    if not _json_output():
        click.echo(_dumps(data))
    return data


if __name__ == "__main__":
    cli()
