"""CLI entrypoint for justact."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .ledger.labels import LABEL_STYLES


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="justact")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a TOML config file (defaults to ./justact.toml if present)",
)
@click.option(
    "--label-style",
    type=click.Choice(sorted(LABEL_STYLES)),
    default=None,
    help="How enactment sequence numbers are rendered (alpha: a..z, aa..; char: single character)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log ledger activity to stderr")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, label_style: str | None, verbose: bool) -> None:
    """justact - append-only ledger for statements, agreements and enacted actions.

    Participants say things, some statements become agreements at a time,
    and actors enact actions citing one agreement as basis and statements
    as justification.
    """
    from .config import load_settings

    _configure_logging(verbose)
    ctx.ensure_object(dict)
    try:
        settings = load_settings(config_path)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["settings"] = settings.with_overrides(label_style=label_style)


_inspector_option = click.option(
    "--inspector",
    type=str,
    default=None,
    metavar="COMMAND",
    help="Pipe the audit stream into this command's stdin (e.g. 'jq -c .')",
)
_timeout_option = click.option(
    "--inspector-timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for the inspector to exit",
)


@cli.command()
@_inspector_option
@_timeout_option
@click.pass_context
def shell(ctx: click.Context, inspector: str | None, inspector_timeout: float | None) -> None:
    """Start the interactive command shell.

    Commands:

        say <name> <payload>

        agree <id> <time>

        enact <name> <basis-id> <id>*

        now <time>

        inspect
    """
    from .commands.session_cmd import run_shell

    settings = ctx.obj["settings"].with_overrides(inspector=inspector, inspector_timeout=inspector_timeout)
    sys.exit(run_shell(settings))


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_inspector_option
@_timeout_option
@click.option("--stop-on-error", is_flag=True, help="Exit non-zero at the first rejected command")
@click.pass_context
def run(
    ctx: click.Context,
    script: Path,
    inspector: str | None,
    inspector_timeout: float | None,
    stop_on_error: bool,
) -> None:
    """Replay a script of shell commands and show the final state.

    Blank lines and lines starting with # are skipped.
    """
    from .commands.session_cmd import run_script

    settings = ctx.obj["settings"].with_overrides(inspector=inspector, inspector_timeout=inspector_timeout)
    sys.exit(run_script(settings, script, stop_on_error=stop_on_error))


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def inspect(ctx: click.Context, script: Path) -> None:
    """Replay a script and write the audit stream as JSON Lines to stdout."""
    from .commands.session_cmd import run_inspect

    sys.exit(run_inspect(ctx.obj["settings"], script))


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
