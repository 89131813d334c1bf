import asyncio
import json
import logging
from typing import Optional

import click

from .backend import NewsDeckBackend
from .config import NewsDeckConfig
from .loader import DatasetLoadError
from .query.state import FacetGroup
from .query.url_codec import parse_query_string, to_query_string


def _load_backend(source: str) -> NewsDeckBackend:
    backend = NewsDeckBackend(NewsDeckConfig(data_source=source))
    try:
        asyncio.run(backend.reload())
    except DatasetLoadError as exc:
        click.echo(str(exc), err=True)
        raise SystemExit(1) from exc
    return backend


@click.group()
@click.option("-v", "--verbose", is_flag=True)
def main(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("source")
@click.option("--params", "query", default="", help="URL query string, e.g. 'q=ai&sort=oldest'")
@click.option("--json", "as_json", is_flag=True, help="Print the full view as JSON")
def query(source: str, query: str, as_json: bool) -> None:
    """Run a query against the dataset at SOURCE."""
    backend = _load_backend(source)
    session = backend.session(parse_query_string(query))
    view = session.refresh()
    if as_json:
        click.echo(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
        return
    result = view.result
    if result.is_empty:
        click.echo("Showing 0 results")
    else:
        click.echo(f"Showing {result.display_start}–{result.display_end} of {result.total}")
    for position, article in enumerate(result.page_items, start=result.display_start):
        publisher = article.publisher_name or "Unknown publisher"
        click.echo(f"{position:>4}. {article.title or 'Untitled article'} ({publisher})")
    click.echo(f"?{to_query_string(view.params)}")


@main.command()
@click.argument("source")
@click.option(
    "--group",
    type=click.Choice([group.value for group in FacetGroup]),
    default=None,
    help="Only print one facet group",
)
def facets(source: str, group: Optional[str]) -> None:
    """Print global facet counts for the dataset at SOURCE."""
    backend = _load_backend(source)
    groups = [FacetGroup(group)] if group else list(FacetGroup)
    for facet in groups:
        counts = backend.facets.for_group(facet)
        click.echo(f"[{facet.value}]")
        for label, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
            click.echo(f"  {label}: {count}")


if __name__ == "__main__":
    main()
