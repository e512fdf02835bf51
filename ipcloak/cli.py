from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from ipcloak.errors import InvalidAddress, MissingArgument
from ipcloak.export import catalog, save_catalog
from ipcloak.formats import RULES, decorate, parse_address, render
from ipcloak.models import Address
from ipcloak.resolve import resolves_to
from ipcloak.utils.logging import configure_logging, get_logger

app = typer.Typer(
    help="Render an IPv4 address in alternate encodings that permissive parsers still accept.",
    add_completion=False,
)

log = get_logger(__name__)


def _verify(address: Address) -> list[str]:
    """
    Return the names of rules whose form does not resolve back to `address`.
    """
    failed = []
    for rule in RULES:
        form = rule.render(address)
        if not resolves_to(form, address):
            log.warning("Rule %s produced %s which does not resolve to %s", rule.name, form, address)
            failed.append(rule.name)
    return failed


# Everything after IP is decoration, even strings that look like options
@app.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
def run(
        ctx: typer.Context,
        ip: Optional[str] = typer.Argument(
            None,
            help="Dotted-quad IPv4 address, e.g. 127.0.0.1",
            show_default=False,
        ),
        prefix: str = typer.Argument(
            "",
            help="String written before every line.",
            show_default=False,
        ),
        postfix: str = typer.Argument(
            "",
            help="String written after every line.",
            show_default=False,
        ),
        verify: bool = typer.Option(
            False,
            "--verify",
            help="Check that every form resolves back to the address; exit 1 if one does not.",
        ),
        export: Optional[Path] = typer.Option(
            None,
            "--export",
            "-e",
            help="Also write the catalog table to this file (.csv or .json).",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Log debug details to stderr.",
        ),
):
    """
    Print every cloaked form of IP, one per line, wrapped in PREFIX and POSTFIX.

    Options go before IP; everything after it is taken literally.

    Example:

        ipcloak 127.0.0.1
        ipcloak 192.168.100.1 "http://" "/admin"
        ipcloak --verify -e catalog.csv 127.0.0.1 "-->" "<--"
    """
    configure_logging(verbose)

    # Render, verify and export before writing so a failure leaves stdout empty
    try:
        address = parse_address(ip)
    except MissingArgument as e:
        typer.echo(ctx.get_usage(), err=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    except InvalidAddress as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    lines = decorate(render(address), prefix, postfix)

    if verify:
        failed = _verify(address)
        if failed:
            typer.echo(f"Error: {len(failed)} forms do not resolve to {address}: {', '.join(failed)}", err=True)
            raise typer.Exit(code=1)
        log.info("All %d forms resolve to %s", len(RULES), address)

    if export is not None:
        try:
            out_path = save_catalog(catalog(address, prefix, postfix), export)
        except OSError as e:
            typer.echo(f"Error: cannot write catalog to {export}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Wrote catalog to {out_path}", err=True)

    for line in lines:
        typer.echo(line)


def main() -> None:
    """Entry point for console_scripts."""
    try:
        app()
    except KeyboardInterrupt:
        # Graceful Ctrl+C handling
        typer.echo("Interrupted by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
