# word_search/cli.py
from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import click

from word_search.application.files.use_cases.list_files import ListFilesUseCase
from word_search.application.search.session_controller import SessionController
from word_search.core.config import settings
from word_search.domain.files.entities import FileDescriptor
from word_search.domain.search.errors import ValidationError
from word_search.domain.search.state import (
    SessionState,
    ActiveState,
    CompletedState,
    FailedState,
    StoppedState,
)
from word_search.domain.search.value_objects import SearchKeyword
from word_search.infrastructure.http.api import Api
from word_search.infrastructure.http.sse_stream import HttpxSearchStream

EXIT_INTERRUPTED = 130


def render_state(state: SessionState) -> str:
    if isinstance(state, ActiveState):
        if state.progress is None:
            return f'Searching for "{state.keyword}"...'
        p = state.progress
        return (
            f"{p.message} | matches: {p.match_count:,} | "
            f"{p.processed_files}/{p.total_files} files ({p.percentage}%)"
        )
    if isinstance(state, CompletedState):
        r = state.result
        return (
            f'Keyword "{r.keyword}": {r.match_count:,} occurrences, '
            f"processed {r.processed_files}/{r.total_files} files"
        )
    if isinstance(state, FailedState):
        return f"Error: {state.error.message}"
    if isinstance(state, StoppedState):
        return "Search stopped"
    return ""


def render_files(files: list[FileDescriptor]) -> str:
    lines = [f"Available files ({len(files)} files):"]
    lines.extend(f"  {f.name}  {f.size_formatted}" for f in files)
    return "\n".join(lines)


def _load_files(base_url: str) -> list[FileDescriptor]:
    with Api(base_url=base_url, timeout=settings.HTTP_TIMEOUT) as api:
        return ListFilesUseCase(api).execute()


async def _run_search(keyword: str, base_url: str) -> SessionState:
    stream = HttpxSearchStream(
        base_url,
        timeout=settings.HTTP_TIMEOUT,
        connect_timeout=settings.STREAM_CONNECT_TIMEOUT,
    )
    controller = SessionController(stream)
    controller.subscribe(lambda state: click.echo(render_state(state)))

    await controller.start(keyword)
    try:
        return await controller.wait_closed()
    finally:
        # Ctrl+C cancels us mid-stream; release the connection either way
        await controller.aclose()


@click.group("word-search")
@click.option(
    "--base-url",
    default=None,
    help="Search server URL (defaults to API_BASE_URL).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output.")
@click.pass_context
def main(ctx: click.Context, base_url: Optional[str], verbose: bool):
    """
    Search keywords across the server's files and follow the progress live.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url or settings.API_BASE_URL


@main.command("files")
@click.pass_context
def files_command(ctx: click.Context):
    """List the files available for searching."""
    files = _load_files(ctx.obj["base_url"])
    click.echo(render_files(files))


@main.command("search")
@click.argument("keyword")
@click.option("--no-files", is_flag=True, help="Do not print the file list first.")
@click.pass_context
def search_command(ctx: click.Context, keyword: str, no_files: bool):
    """Start a search for KEYWORD and print progress until it finishes."""
    try:
        word = SearchKeyword(keyword).value
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    base_url = ctx.obj["base_url"]
    if not no_files:
        files = _load_files(base_url)
        if files:
            click.echo(render_files(files))

    try:
        final = asyncio.run(_run_search(word, base_url))
    except KeyboardInterrupt:
        click.echo("Search stopped", err=True)
        sys.exit(EXIT_INTERRUPTED)

    if isinstance(final, FailedState):
        sys.exit(1)


if __name__ == "__main__":
    main()
