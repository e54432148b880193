"""entry points tying the block scanner, page assembly and raw mode together."""

from typing import Optional

from mdview.core.blocks import render_body
from mdview.core.models import (
    DEFAULT_TITLE,
    TEXT_MARKDOWN,
    RenderOptions,
    RenderResult,
)
from mdview.core.page import render_page


def normalize_newlines(markdown: str) -> str:
    """converts CRLF line endings to LF."""
    return markdown.replace("\r\n", "\n")


def render(markdown: str, options: Optional[RenderOptions] = None) -> str:
    """
    renders markdown to a complete HTML page.

    Never raises for any string input; malformed constructs fall back to
    paragraphs or literal text.

    Args:
        markdown: markdown source
        options: page and link options

    Returns:
        HTML document
    """
    options = options or RenderOptions()
    body = render_body(normalize_newlines(markdown), options)
    return render_page(body, title=options.title or DEFAULT_TITLE, lang=options.lang)


def wants_markdown(raw: bool = False, accept: Optional[str] = None) -> bool:
    """resolves the raw flag and an Accept hint to a single raw-mode decision."""
    return raw or (accept is not None and TEXT_MARKDOWN in accept.lower())


def render_document(
    markdown: str, raw: bool = False, options: Optional[RenderOptions] = None
) -> RenderResult:
    """
    renders markdown, or passes it through unchanged in raw mode.

    Args:
        markdown: markdown source
        raw: if True, return the normalized markdown as text/markdown
        options: page and link options

    Returns:
        render result carrying body and content type
    """
    if raw:
        return RenderResult(normalize_newlines(markdown), is_raw=True)
    return RenderResult(render(markdown, options))
