"""Command-line interface for unit-algebra."""

from __future__ import annotations

import json
import math

import click

from ..config import load_settings
from ..core.convert import compatible as units_compatible
from ..core.convert import convert_strict
from ..core.dimensions import IncompatibleUnitsError
from ..observability import configure_logging, log_event
from ..units.catalogue import SYSTEMS, UnitCatalogue, UnknownUnitError, build_catalogue, default_catalogue


class ConversionFailed(click.ClickException):
    exit_code = 2


def _lookup(catalogue: UnitCatalogue, name: str):
    try:
        return catalogue.get(name)
    except UnknownUnitError as exc:
        raise ConversionFailed(str(exc)) from exc


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level; overrides UNITALGEBRA_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Exact unit algebra and conversion."""

    settings = load_settings()
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    try:
        ctx.obj = default_catalogue()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("quantity", type=float)
@click.argument("from_unit")
@click.argument("to_unit")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON object instead of the bare value.")
@click.pass_obj
def convert(catalogue: UnitCatalogue, quantity: float, from_unit: str, to_unit: str, as_json: bool) -> None:
    """Convert QUANTITY from FROM_UNIT into TO_UNIT."""

    source = _lookup(catalogue, from_unit)
    target = _lookup(catalogue, to_unit)
    try:
        result = convert_strict(quantity, source, target)
    except IncompatibleUnitsError as exc:
        raise ConversionFailed(str(exc)) from exc

    log_event("unit conversion", quantity=quantity, source=from_unit, target=to_unit, result=result)
    if as_json:
        payload = {
            "quantity": quantity,
            "from": from_unit,
            "to": to_unit,
            "result": result if math.isfinite(result) else None,
        }
        click.echo(json.dumps(payload))
    else:
        click.echo(repr(result))


@cli.command()
@click.argument("first")
@click.argument("second")
@click.pass_context
def compatible(ctx: click.Context, first: str, second: str) -> None:
    """Report whether FIRST and SECOND share a dimension."""

    catalogue: UnitCatalogue = ctx.obj
    ok = units_compatible(_lookup(catalogue, first), _lookup(catalogue, second))
    click.echo("yes" if ok else "no")
    if not ok:
        ctx.exit(1)


@cli.command("list")
@click.option(
    "--system",
    type=click.Choice(sorted(SYSTEMS)),
    default=None,
    help="Only list the units of one system.",
)
@click.pass_obj
def list_units(catalogue: UnitCatalogue, system: str | None) -> None:
    """List registered unit names with their dimension."""

    if system is not None:
        catalogue = build_catalogue([system])
    for name, unit in catalogue.items():
        click.echo(f"{name}\t{unit.dimension}")


def main() -> None:  # pragma: no cover - console entry point
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
