"""``stunt inspect``: show the contract a double would implement.

Loads ``package.module:ClassName``, reflects its contract and prints one line
per member with the value an unconfigured double answers with. Members that
prevent doubling are reported as an error (exit status 1).

Examples
    $ stunt inspect myapp.gateways:EmailGateway
    $ stunt inspect myapp.gateways:EmailGateway --json
"""

from __future__ import annotations

import importlib
import json
import logging
from typing import Any

import click

from stunt.contracts import Contract, MethodSignature
from stunt.domain.errors import UnsupportedContractError

from .helpers import success, warn

logger = logging.getLogger(__name__)


def load_target(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str,
) -> Any:
    """Click callback that imports ``package.module:Name``.

    Dotted names after the colon are followed as attributes, so nested
    classes (``module:Outer.Inner``) work too.

    Raises:
        click.BadParameter: If the value is malformed or cannot be imported.
    """
    module_name, sep, qualname = value.partition(":")
    if not sep or not module_name or not qualname:
        raise click.BadParameter(f"Expected MODULE:NAME, got {value!r}")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"Cannot import module {module_name!r}: {e}") from e
    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise click.BadParameter(
                f"Module {module_name!r} has no attribute {qualname!r}"
            ) from e
    logger.debug("Loaded %s as %r", value, target)
    return target


def describe_contract(contract: Contract) -> list[dict[str, Any]]:
    """Return a JSON-friendly description of each member of ``contract``."""
    rows: list[dict[str, Any]] = []
    for member in contract.members.values():
        if isinstance(member, MethodSignature):
            rows.append(
                {
                    "name": member.name,
                    "kind": "method",
                    "signature": str(member),
                    "is_async": member.is_async,
                    "default": repr(member.default_return()),
                }
            )
        else:
            rows.append(
                {
                    "name": member.name,
                    "kind": "property",
                    "signature": str(member),
                    "readable": member.readable,
                    "writable": member.writable,
                    "default": repr(member.default_value()),
                }
            )
    return rows


@click.command(name="inspect")
@click.argument("target", metavar="MODULE:CLASS", callback=load_target)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the contract as JSON on stdout.",
)
def inspect_contract(target: Any, as_json: bool) -> None:
    """Show the contract a double of MODULE:CLASS would implement."""
    try:
        contract = Contract.of(target)
    except UnsupportedContractError as e:
        raise click.ClickException(str(e)) from e

    rows = describe_contract(contract)
    if as_json:
        click.echo(json.dumps({"contract": contract.name, "members": rows}, indent=2))
        return

    if not rows:
        warn(f"Contract '{contract.name}' has no public members.")
    width = max((len(row["kind"]) for row in rows), default=0)
    for row in rows:
        click.echo(f"{row['kind']:<{width}}  {row['signature']}  -> {row['default']}")
    success(f"{contract.name} can be doubled.")
