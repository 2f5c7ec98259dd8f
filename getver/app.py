"""Typer CLI entrypoint for getver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, List, Optional, Sequence

import typer
from rich.console import Console
from rich.text import Text

from . import __version__
from .config import ConfigLocator, ConfigRepository, GlobalConfig
from .engine import LookupPool, RegistryClient
from .errors import ConfigError, UsageError
from .logging_conf import configure_logging
from .reporter import render_report
from .resolver import Resolver

USAGE = "getver [options] name..."

app = typer.Typer(
    add_completion=False,
    rich_markup_mode=None,
)

console = Console()


@dataclass
class AppState:
    repository: ConfigRepository
    config: GlobalConfig
    client: RegistryClient
    resolver: Resolver


def build_state(verbose: bool, **overrides: Any) -> AppState:
    repository = ConfigRepository(ConfigLocator())
    config = repository.with_overrides(**overrides)
    logger = configure_logging(verbose=verbose, log_dir=repository.locator.logs_dir)
    client = RegistryClient(config, logger=logger.bind(component="registry"))
    pool = LookupPool(config.max_workers, unbounded=config.unbounded)
    resolver = Resolver(client.lookup, pool, logger=logger.bind(component="resolver"))
    return AppState(repository=repository, config=config, client=client, resolver=resolver)


def _reject_options(names: Sequence[str]) -> list[str]:
    for name in names:
        if name.startswith("-"):
            raise UsageError(f"Found argument '{name}' which wasn't expected")
    return list(names)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"getver {__version__}", highlight=False)
        raise typer.Exit(code=0)


@app.command(
    help=f"getver {__version__}\n\nPrint the latest published version of each named package.",
    context_settings={
        "help_option_names": ["-h", "--help"],
        # Unknown flags land in NAMES so they can be reported uniformly
        "ignore_unknown_options": True,
    },
)
def main(
    names: Annotated[
        Optional[List[str]],
        typer.Argument(help="Names of the packages to look up.", show_default=False),
    ] = None,
    jobs: Annotated[
        Optional[int],
        typer.Option("--jobs", "-j", help="Maximum number of lookups in flight.", show_default=False),
    ] = None,
    unbounded: Annotated[
        bool,
        typer.Option("--unbounded", help="Start one worker per name (small batches only)."),
    ] = False,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="Per-lookup timeout in seconds.", show_default=False),
    ] = None,
    registry: Annotated[
        Optional[str],
        typer.Option("--registry", help="Registry base URL.", metavar="URL", show_default=False),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging on stderr.")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Print the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Print the latest published version of each named package."""

    try:
        targets = _reject_options(names or [])
    except UsageError as exc:
        console.print(Text.assemble(("error", "bold red"), ": ", (str(exc), "red")))
        console.print(Text.assemble(("usage", "green"), f": {USAGE}"))
        raise typer.Exit(code=2) from exc
    if not targets:
        return

    try:
        state = build_state(
            verbose,
            max_workers=jobs,
            unbounded=unbounded or None,
            timeout=timeout,
            registry_url=registry,
        )
    except ConfigError as exc:
        console.print(Text.assemble(("error", "bold red"), ": ", str(exc)))
        raise typer.Exit(code=2) from exc

    try:
        report = state.resolver.resolve(targets)
    finally:
        state.client.close()

    render_report(report, console)
    if report.has_errors:
        raise typer.Exit(code=1)


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
