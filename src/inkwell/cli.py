"""Typer CLI for inkwell: serving, search, index maintenance and content editing."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, TypeVar

import typer
from result import Err

from inkwell.config import Config

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from result import Result

    from inkwell.models.content import Page, Post
    from inkwell.services.content_service import ContentService

T = TypeVar("T")

app = typer.Typer(
    name="inkwell",
    help="inkwell: personal blog with full-text search.",
    invoke_without_command=True,
)

DataDirOption = Annotated[
    Path | None,
    typer.Option("--data-dir", help="Directory holding website.db"),
]


def _load_config(data_dir: Path | None, **overrides: object) -> Config:
    config = Config.from_env()
    if data_dir is not None:
        config = replace(config, data_dir=data_dir)
    values = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **values) if values else config


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Annotated[
        str, typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    ] = "INFO",
) -> None:
    """Start the web server when no command is given."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is not None:
        return
    serve(data_dir=None, host=None, port=None)


@app.command()
def serve(
    data_dir: DataDirOption = None,
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Bind port")] = None,
) -> None:
    """Serve the blog."""
    config = _load_config(data_dir, host=host, port=port)
    from inkwell.ui.app import run_app

    run_app(config)


@app.command()
def reindex(data_dir: DataDirOption = None) -> None:
    """Rebuild the full-text indexes from the posts and pages tables."""
    config = _load_config(data_dir)
    asyncio.run(_do_reindex(config))


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Search query")],
    data_dir: DataDirOption = None,
) -> None:
    """Search published posts and pages from the terminal."""
    config = _load_config(data_dir)
    asyncio.run(_do_search(config, query))


async def _do_reindex(config: Config) -> None:
    """Run the reindex operation."""
    from inkwell.data.db import Database

    typer.echo(f"Rebuilding search index in {config.db_path}...")
    async with Database(config.db_path) as db:
        await db.rebuild_search_index()
    typer.echo("Done!")


async def _do_search(config: Config, query: str) -> None:
    from inkwell.data.db import Database
    from inkwell.data.search import SearchEngine
    from inkwell.services.search_service import SearchService

    async with Database(config.db_path) as db:
        engine = SearchEngine(db, limit=config.search_limit, snippet_tokens=config.snippet_tokens)
        result = await SearchService(engine).search(query)

    if isinstance(result, Err):
        typer.echo(result.err_value, err=True)
        raise typer.Exit(code=1)

    results = result.ok_value
    typer.echo(f"{results.total_count} results for {results.query!r}")
    for sr in results.results:
        typer.echo(f"[{sr.kind}] {sr.rank:.4f}  {sr.title}  {sr.url}")
        if sr.snippet:
            typer.echo(f"    {sr.snippet}")


post_app = typer.Typer(help="Create, edit and remove posts.")
page_app = typer.Typer(help="Create, edit and remove static pages.")
app.add_typer(post_app, name="post")
app.add_typer(page_app, name="page")

ContentOption = Annotated[str | None, typer.Option("--content", help="Markdown body")]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", exists=True, dir_okay=False, help="Read the Markdown body from a file"),
]


def _read_body(content: str | None, file: Path | None) -> str | None:
    if file is not None:
        return file.read_text(encoding="utf-8")
    return content


def _visibility(publish: bool, draft: bool, *, current: bool) -> bool:
    if publish and draft:
        raise typer.BadParameter("--publish and --draft are mutually exclusive")
    if publish:
        return True
    if draft:
        return False
    return current


@post_app.command("add")
def post_add(
    title: Annotated[str, typer.Argument(help="Post title")],
    slug: Annotated[str, typer.Option("--slug", help="URL slug")],
    post_type: Annotated[
        str, typer.Option("--type", help="article, note, link or photo")
    ] = "article",
    content: ContentOption = None,
    file: FileOption = None,
    tags: Annotated[str, typer.Option("--tags", help="Comma-separated tags")] = "",
    publish: Annotated[bool, typer.Option("--publish/--draft", help="Publish now")] = False,
    data_dir: DataDirOption = None,
) -> None:
    """Create a post."""

    async def action(svc: ContentService) -> Result[Post, str]:
        return await svc.create_post(
            title=title,
            slug=slug,
            content=_read_body(content, file) or "",
            post_type=post_type,
            published=publish,
            tags=tags,
        )

    post = _run_content(_load_config(data_dir), action)
    typer.echo(f"Created {post.post_type} {post.id}: {post.url}")


@post_app.command("edit")
def post_edit(
    post_id: Annotated[int, typer.Argument(help="Post id")],
    title: Annotated[str | None, typer.Option("--title", help="New title")] = None,
    slug: Annotated[str | None, typer.Option("--slug", help="New URL slug")] = None,
    post_type: Annotated[str | None, typer.Option("--type", help="New post type")] = None,
    content: ContentOption = None,
    file: FileOption = None,
    tags: Annotated[
        str | None, typer.Option("--tags", help="Replace tags (comma-separated)")
    ] = None,
    publish: Annotated[bool, typer.Option("--publish", help="Make it public")] = False,
    draft: Annotated[bool, typer.Option("--draft", help="Hide it from the site")] = False,
    data_dir: DataDirOption = None,
) -> None:
    """Edit a post; options that are not given keep their current value."""

    async def action(svc: ContentService) -> Result[Post, str]:
        current = await svc.get_post_by_id(post_id)
        if isinstance(current, Err):
            return current
        post = current.ok_value
        body = _read_body(content, file)
        return await svc.update_post(
            post_id,
            title=title if title is not None else post.title,
            slug=slug if slug is not None else post.slug,
            content=body if body is not None else post.content,
            post_type=post_type if post_type is not None else post.post_type,
            published=_visibility(publish, draft, current=post.published),
            tags=tags if tags is not None else ", ".join(post.tags),
        )

    post = _run_content(_load_config(data_dir), action)
    typer.echo(f"Updated {post.post_type} {post.id}: {post.url}")


@post_app.command("rm")
def post_rm(
    post_id: Annotated[int, typer.Argument(help="Post id")],
    data_dir: DataDirOption = None,
) -> None:
    """Delete a post and its tag links."""

    async def action(svc: ContentService) -> Result[None, str]:
        return await svc.delete_post(post_id)

    _run_content(_load_config(data_dir), action)
    typer.echo(f"Deleted post {post_id}")


@page_app.command("add")
def page_add(
    title: Annotated[str, typer.Argument(help="Page title")],
    slug: Annotated[str, typer.Option("--slug", help="URL slug")],
    content: ContentOption = None,
    file: FileOption = None,
    publish: Annotated[bool, typer.Option("--publish/--draft", help="Publish now")] = False,
    data_dir: DataDirOption = None,
) -> None:
    """Create a static page."""

    async def action(svc: ContentService) -> Result[Page, str]:
        return await svc.create_page(
            title=title, slug=slug, content=_read_body(content, file) or "", published=publish
        )

    page = _run_content(_load_config(data_dir), action)
    typer.echo(f"Created page {page.id}: {page.url}")


@page_app.command("edit")
def page_edit(
    page_id: Annotated[int, typer.Argument(help="Page id")],
    title: Annotated[str | None, typer.Option("--title", help="New title")] = None,
    slug: Annotated[str | None, typer.Option("--slug", help="New URL slug")] = None,
    content: ContentOption = None,
    file: FileOption = None,
    publish: Annotated[bool, typer.Option("--publish", help="Make it public")] = False,
    draft: Annotated[bool, typer.Option("--draft", help="Hide it from the site")] = False,
    data_dir: DataDirOption = None,
) -> None:
    """Edit a page; options that are not given keep their current value."""

    async def action(svc: ContentService) -> Result[Page, str]:
        current = await svc.get_page_by_id(page_id)
        if isinstance(current, Err):
            return current
        page = current.ok_value
        body = _read_body(content, file)
        return await svc.update_page(
            page_id,
            title=title if title is not None else page.title,
            slug=slug if slug is not None else page.slug,
            content=body if body is not None else page.content,
            published=_visibility(publish, draft, current=page.published),
        )

    page = _run_content(_load_config(data_dir), action)
    typer.echo(f"Updated page {page.id}: {page.url}")


@page_app.command("rm")
def page_rm(
    page_id: Annotated[int, typer.Argument(help="Page id")],
    data_dir: DataDirOption = None,
) -> None:
    """Delete a static page."""

    async def action(svc: ContentService) -> Result[None, str]:
        return await svc.delete_page(page_id)

    _run_content(_load_config(data_dir), action)
    typer.echo(f"Deleted page {page_id}")


@app.command()
def stats(data_dir: DataDirOption = None) -> None:
    """Show how many posts and pages are stored."""

    async def action(svc: ContentService) -> Result[dict[str, int], str]:
        return await svc.stats()

    counts = _run_content(_load_config(data_dir), action)
    typer.echo(f"Posts: {counts['posts']}")
    typer.echo(f"Pages: {counts['pages']}")


def _run_content(
    config: Config, action: Callable[[ContentService], Awaitable[Result[T, str]]]
) -> T:
    """Run one content operation against the configured database.

    An ``Err`` is printed to stderr and ends the command with exit code 1.
    """
    result = asyncio.run(_do_content(config, action))
    if isinstance(result, Err):
        typer.echo(result.err_value, err=True)
        raise typer.Exit(code=1)
    return result.ok_value


async def _do_content(
    config: Config, action: Callable[[ContentService], Awaitable[Result[T, str]]]
) -> Result[T, str]:
    from inkwell.services.container import ServiceContainer

    container = await ServiceContainer.create(config)
    try:
        return await action(container.content_service)
    finally:
        await container.close()
