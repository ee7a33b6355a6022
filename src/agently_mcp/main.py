
import asyncio
import sys
from typing import List, Optional

import typer
from rich import print_json
from rich.console import Console
from rich.markup import escape

from .config import load_settings
from .logging_setup import configure_logging
from .server import build_registry, serve as serve_stdio
from .tools.fetch_agents import FetchAgentsTool

app = typer.Typer(help="Agently agent discovery - MCP server and CLI")
console = Console()


@app.command()
def serve():
    """
    Runs the MCP server over stdio.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    asyncio.run(serve_stdio(settings))


@app.command()
def search(
    search_term: Optional[str] = typer.Option(None, "--search-term", "-s", help="Text to search in agent names/descriptions"),
    category: Optional[List[str]] = typer.Option(None, "--category", "-c", help="Category filter, repeatable (AND)"),
    input_mode: Optional[List[str]] = typer.Option(None, "--input-mode", help="Input MIME type filter, repeatable (AND)"),
    output_mode: Optional[List[str]] = typer.Option(None, "--output-mode", help="Output MIME type filter, repeatable (AND)"),
    skill_tag: Optional[List[str]] = typer.Option(None, "--skill-tag", "-t", help="Skill tag filter, repeatable (AND)"),
    page: int = typer.Option(1, help="Page number"),
    limit: int = typer.Option(10, help="Items per page (max 50)"),
    sort_by_name: Optional[str] = typer.Option(None, help="a-z or z-a"),
    sort_by_created_at: Optional[str] = typer.Option(None, help="newest or oldest"),
    sort_by_updated_at: Optional[str] = typer.Option(None, help="newest or oldest"),
    sort_by_success_rate: Optional[str] = typer.Option(None, help="highest or lowest"),
    sort_by_usage: Optional[str] = typer.Option(None, help="highest or lowest"),
    sort_by_request_price: Optional[str] = typer.Option(None, help="highest or lowest"),
    sort_by_streaming_price: Optional[str] = typer.Option(None, help="highest or lowest"),
    local: Optional[bool] = typer.Option(None, "--local/--remote", help="Only local or only remote agents"),
    explanation: Optional[str] = typer.Option(None, help="Why the search is made (not sent as a filter)"),
):
    """
    Runs a single fetch_agents call against the Agently API and prints the result.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    registry = build_registry(settings)

    arguments = {"page": page, "limit": limit}
    optional = {
        "searchTerm": search_term,
        "categories": category,
        "inputModes": input_mode,
        "outputModes": output_mode,
        "skillTags": skill_tag,
        "sortByName": sort_by_name,
        "sortByCreatedAt": sort_by_created_at,
        "sortByUpdatedAt": sort_by_updated_at,
        "sortBySuccessRate": sort_by_success_rate,
        "sortByUsage": sort_by_usage,
        "sortByRequestPrice": sort_by_request_price,
        "sortByStreamingPrice": sort_by_streaming_price,
        "explanation": explanation,
    }
    arguments.update({key: value for key, value in optional.items() if value})
    if local is not None:
        arguments["isLocal"] = local

    console.print(f"[bold blue]Searching agents at {settings.agents_endpoint}...[/bold blue]")
    result = asyncio.run(registry.call(FetchAgentsTool.TOOL_NAME, arguments))
    text = "\n".join(block.text for block in result.content if block.type == "text")

    if result.isError:
        console.print(f"[bold red]Error:[/bold red] {escape(text)}", soft_wrap=True)
        sys.exit(1)

    # soft_wrap keeps the envelope lines intact
    console.print(text, markup=False, highlight=False, soft_wrap=True)
    if result.meta:
        print_json(data=result.meta.get("pagination"))


@app.command()
def schema():
    """
    Prints the tool descriptor advertised to MCP clients.
    """
    registry = build_registry(load_settings())
    for definition in registry.definitions():
        print_json(definition.model_dump_json(exclude_none=True))


def main():
    app()


if __name__ == "__main__":
    main()
