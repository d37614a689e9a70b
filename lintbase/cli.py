"""LintBase CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - commands are imported after the cli group definition

import click

from lintbase import __version__
from lintbase.utils.constants import LINTBASE_DIR
from lintbase.utils.logging import configure_file_logging


@click.group()
@click.version_option(version=__version__, prog_name="lintbase")
@click.help_option("-h", "--help")
@click.option("--debug-log", is_flag=True, help="Write a DEBUG log to .lintbase/lintbase.log")
def cli(debug_log):
    """LintBase - linter for document databases

    \b
    QUICK START:
      lintbase scan firestore --key ./service-account.json
      lintbase scan json --file ./export.json --json
      lintbase issues json --file ./export.json --severity error
      lintbase schema json --file ./export.json

    \b
    For detailed options: lintbase <command> --help"""
    if debug_log:
        configure_file_logging(LINTBASE_DIR)


from lintbase.commands.issues import issues
from lintbase.commands.scan import scan
from lintbase.commands.schema import schema

cli.add_command(scan)
cli.add_command(issues)
cli.add_command(schema)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
