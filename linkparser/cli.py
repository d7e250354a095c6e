"""CLI interface for linkparser."""

import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from linkparser.models.model_link import PARSED_LINK_ADAPTER, LinkKind, ParsedLink
from linkparser.models.model_post import PostHint
from linkparser.parsing.extraction import extract_urls
from linkparser.parsing.url_parser import parse_url

app = typer.Typer(
    name="linkparser",
    help="linkparser - Identify what URLs found on Reddit point to",
)

console = Console()

_KIND_COLORS: dict[str, str] = {
    LinkKind.SUBMISSION.value: "cyan",
    LinkKind.SUBREDDIT.value: "cyan",
    LinkKind.USER.value: "cyan",
    LinkKind.UNSUPPORTED.value: "yellow",
    LinkKind.MEDIA.value: "green",
    LinkKind.EXTERNAL.value: "dim",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _truncate(text: str, max_len: int = 80) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def _describe(link: ParsedLink) -> str:
    """One-line summary of a parsed link's fields."""
    match link.kind:
        case LinkKind.SUBMISSION:
            parts = [f"id={link.submission_id}"]
            if link.subreddit_name:
                parts.append(f"r/{link.subreddit_name}")
            if link.initial_comment:
                parts.append(
                    f"comment={link.initial_comment.comment_id} "
                    f"context={link.initial_comment.context_depth}"
                )
            return " ".join(parts)
        case LinkKind.SUBREDDIT:
            return f"r/{link.name}"
        case LinkKind.USER:
            return f"u/{link.name}"
        case LinkKind.MEDIA:
            direct = "direct" if link.host_supplied_direct else "guessed"
            return f"{link.media_kind.value} via {link.host.value} ({direct}) {link.url}"
        case LinkKind.UNSUPPORTED:
            return "not supported yet"
        case _:
            return ""


def _print_links(urls: list[str], links: list[ParsedLink], as_json: bool, title: str) -> None:
    if as_json:
        data = [
            {"input": url, "link": PARSED_LINK_ADAPTER.dump_python(link, mode="json")}
            for url, link in zip(urls, links)
        ]
        typer.echo(json.dumps(data, indent=2))
        return

    table = Table(title=title)
    table.add_column("Kind", style="bold")
    table.add_column("Details")
    table.add_column("Input", style="dim")

    for url, link in zip(urls, links):
        color = _KIND_COLORS.get(link.kind, "white")
        table.add_row(
            f"[{color}]{link.kind}[/{color}]",
            escape(_describe(link)),
            escape(_truncate(url)),
        )

    console.print(table)


@app.command()
def parse(
    urls: list[str] = typer.Argument(..., help="URLs to parse"),
    hint: PostHint = typer.Option(None, "--hint", help="Post hint of the linking post"),
    as_json: bool = typer.Option(False, "--json", help="Print parsed links as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Parse URLs and show what they point to."""
    _configure_logging(verbose)

    links = [parse_url(url, hint=hint) for url in urls]
    _print_links(urls, links, as_json, title="Parsed Links")


@app.command()
def extract(
    source: str = typer.Argument("-", help="Text file to read, '-' for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print parsed links as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Find links in a comment or self-text body and parse them."""
    _configure_logging(verbose)

    if source == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error:[/red] Couldn't read {escape(source)}: {escape(str(e))}")
            raise typer.Exit(1)

    urls = extract_urls(text)
    if not urls:
        if as_json:
            typer.echo("[]")
        else:
            console.print("[yellow]No links found.[/yellow]")
        return

    links = [parse_url(url) for url in urls]
    _print_links(urls, links, as_json, title=f"Links in {source if source != '-' else 'stdin'}")


if __name__ == "__main__":
    app()
