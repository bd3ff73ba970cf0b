"""Command-line interface for the Hacker News GraphQL service."""

import asyncio
import json
import logging
import sys
from typing import Annotated, Any, Dict, Optional

import typer

from hn_graphql.config.settings import settings
from hn_graphql.core.hn_client import HackerNewsClient
from hn_graphql.schema import HNContext, schema
from hn_graphql.utils.logging_utils import setup_logging

app = typer.Typer(help="Hacker News GraphQL - query the Hacker News API with GraphQL")

logger = logging.getLogger(__name__)


async def execute_query(query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Execute a GraphQL query against the live Hacker News API.

    Args:
        query: GraphQL query document
        variables: Optional variable values

    Returns:
        The JSON-serializable response with ``data`` and, if any, ``errors``
    """
    async with HackerNewsClient() as client:
        result = await schema.execute(query, variable_values=variables, context_value=HNContext(client))

    response: Dict[str, Any] = {"data": result.data}
    if result.errors:
        response["errors"] = [error.formatted for error in result.errors]
    return response


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", "-h", help="Interface to bind")] = settings.API_HOST,
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on")] = settings.API_PORT,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "INFO",
) -> None:
    """
    Serve the GraphQL endpoint over HTTP.
    """
    import uvicorn

    setup_logging(log_level=loglevel)
    logger.info(f"Serving {settings.APP_NAME} on {host}:{port}{settings.GRAPHQL_PATH}")
    uvicorn.run("hn_graphql.api.main:app", host=host, port=port, reload=reload, log_level=loglevel.lower())


@app.command()
def query(
    document: Annotated[str, typer.Argument(help="GraphQL query document, or '-' to read it from stdin")],
    variables: Annotated[Optional[str], typer.Option("--variables", "-v", help="Variables as a JSON object")] = None,
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "WARNING",
) -> None:
    """
    Run a single GraphQL query and print the JSON result.

    Exits with status 1 when the response carries errors.
    """
    setup_logging(log_level=loglevel)

    if document == "-":
        document = sys.stdin.read()

    try:
        variable_values = json.loads(variables) if variables else None
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Invalid JSON for --variables: {e}")
    if variable_values is not None and not isinstance(variable_values, dict):
        raise typer.BadParameter("--variables must be a JSON object")

    response = asyncio.run(execute_query(document, variable_values))
    typer.echo(json.dumps(response, indent=2))
    if "errors" in response:
        raise typer.Exit(code=1)


@app.command("schema")
def print_schema() -> None:
    """
    Print the schema in GraphQL SDL.
    """
    typer.echo(schema.as_str())


if __name__ == "__main__":
    app()
