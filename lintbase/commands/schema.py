"""Print the inferred schema of each collection as JSON."""

import json

import click

from lintbase.commands import connector_options, sample_database
from lintbase.config_runtime import load_runtime_config
from lintbase.schema_inference import schema_report
from lintbase.utils.error_handler import handle_exceptions


@click.command("schema")
@click.argument("database")
@connector_options
@click.option("--limit", type=int, default=None, help="Max documents sampled per collection [default: 100]")
@click.option("--collection", "collections", multiple=True, metavar="NAME", help="Only this collection (repeatable)")
@handle_exceptions
def schema(database, key, file, limit, collections):
    """Infer field names, types and presence rates from a sample.

    Fields marked stable appear in at least 80% of sampled documents with a
    single type; the rest carry a note explaining why they are not.

    \b
    EXAMPLES:
      lintbase schema json --file ./export.json
      lintbase schema firestore --key ./sa.json --collection users
    """
    cfg = load_runtime_config()
    limit = limit if limit is not None else cfg["scan"]["limit"]

    result = sample_database(database, key, file, limit, list(collections))
    click.echo(json.dumps(schema_report(result), indent=2))
