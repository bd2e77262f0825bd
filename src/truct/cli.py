"""Command-line interface for truct."""

import sys

import click
from colorama import just_fix_windows_console

from truct.config import ConfigError, load_config
from truct.runtime import FatalBuildError, HostRuntime
from truct.utils.console import _rich_error, _rich_exception, _get_console
from truct.version import get_version

OPTIMIZE_FLAG = "-O"


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    from rich.text import Text
    from rich.panel import Panel
    version_text = Text()
    version_text.append("truct", style="bold cyan")
    version_text.append(f" version {get_version()}", style="white")
    _get_console().print(Panel(version_text, border_style="cyan", padding=(0, 1)))
    ctx.exit()


def _report_fatal(error: FatalBuildError):
    """Write a fatal build error and its traceback to the error stream."""
    _rich_error(f"Build failed during {error.stage.value}: {error}", symbol="error")
    if error.cause is not None:
        _rich_exception(error.cause)


@click.command(
    help="Run the build script (build.py) with truct's native primitives. Pass -O for optimized mode.",
    context_settings=dict(ignore_unknown_options=True, allow_extra_args=True),
    add_help_option=False,
)
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def cli(args):
    """Main entry point for a build invocation.

    Only the exact token ``-O`` is recognized; every other argument,
    including ``--help``, is ignored.
    """
    # None lets truct.yml decide
    optimized = True if OPTIMIZE_FLAG in args else None

    try:
        config = load_config()
    except ConfigError as e:
        _rich_error(str(e), symbol="error")
        sys.exit(1)

    try:
        runtime = HostRuntime(config)
        runtime.run(optimized=optimized)
    except FatalBuildError as e:
        _report_fatal(e)
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    # ANSI support for Windows consoles; a no-op elsewhere
    just_fix_windows_console()
    cli()


if __name__ == "__main__":
    main()
