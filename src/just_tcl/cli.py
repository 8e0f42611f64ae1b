"""Command-line entry point for just-tcl.

Runs a script file, or starts an interactive session when no file is
given. Output from ``puts`` goes straight to stdout; a script that ends in
an error prints the message on stderr and exits with status 1.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click

from just_tcl import __version__
from just_tcl.parser import is_complete
from just_tcl.tcl import Tcl

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

PROMPT = "tcl> "
CONTINUATION_PROMPT = "...> "


def _configure_logging(verbose: bool) -> None:
    if verbose or os.getenv("JUST_TCL_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def run_script(path: Path) -> int:
    """Run a script file and return the process exit status."""
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"cannot read {path}: {e}") from e
    tcl = Tcl(output=sys.stdout)
    result = tcl.run(source)
    if result.exit_code != 0:
        click.echo(result.stderr, err=True, nl=False)
    return result.exit_code


def run_repl() -> int:
    """Read-eval-print loop over one persistent interpreter.

    Lines are buffered until braces, quotes and brackets balance. Errors
    are reported but do not end the session; EOF or ``exit`` does.
    """
    tcl = Tcl(output=sys.stdout)
    buffer: list[str] = []

    while True:
        prompt = CONTINUATION_PROMPT if buffer else PROMPT
        try:
            line = click.prompt("", prompt_suffix=prompt, default="", show_default=False)
        except click.Abort:
            click.echo()
            return 0

        if not buffer and line.strip() == "exit":
            return 0

        buffer.append(line)
        source = "\n".join(buffer)
        if not is_complete(source):
            continue
        buffer.clear()
        if not source.strip():
            continue

        result = tcl.run(source)
        if result.exit_code != 0:
            click.echo(result.stderr, err=True, nl=False)
        elif result.result:
            click.echo(result.result)


@click.command("just-tcl", context_settings=CONTEXT_SETTINGS)
@click.argument(
    "script",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging.",
)
@click.version_option(version=__version__, prog_name="just-tcl")
def cli(script: Optional[Path], verbose: bool) -> None:
    """Run a Tcl-style SCRIPT, or start an interactive session."""
    _configure_logging(verbose)
    if script is None:
        logger.debug("starting interactive session")
        sys.exit(run_repl())
    logger.debug("running script %s", script)
    sys.exit(run_script(script))


def main() -> None:
    """CLI entry point used by the `just-tcl` console script."""
    cli()


if __name__ == "__main__":
    main()
