"""inline markdown formatting for a single line of text."""

import re
from typing import Optional

from markdown_it.common.normalize_url import validateLink

from mdview.core.escaping import escape_attribute, escape_html
from mdview.core.models import RenderOptions

# alternatives are tried in this order at each position; the scan is
# left-to-right and a matched span is never revisited. link text and URL
# exclude their own opening delimiter.
INLINE_PATTERN = re.compile(
    r"`(?P<code>[^`]+)`"
    r"|\*\*(?P<strong>[^*]+)\*\*"
    r"|(?<!\*)\*(?P<em>[^*]+)\*(?!\*)"
    r"|\[(?P<link_text>[^\[\]]+)\]\((?P<link_url>[^()]+)\)"
)


def _render_link(text: str, url: str, options: RenderOptions) -> str:
    """renders a link, dropping the anchor when the URL scheme is rejected."""
    if options.safe_links and not validateLink(url):
        return escape_html(text)
    return f'<a href="{escape_attribute(url)}" target="_blank">{escape_html(text)}</a>'


def _render_match(match: re.Match[str], options: RenderOptions) -> str:
    kind = match.lastgroup
    if kind == "code":
        return f"<code>{escape_html(match.group('code'))}</code>"
    if kind == "strong":
        return f"<strong>{escape_html(match.group('strong'))}</strong>"
    if kind == "em":
        return f"<em>{escape_html(match.group('em'))}</em>"
    return _render_link(match.group("link_text"), match.group("link_url"), options)


def format_inline(line: str, options: Optional[RenderOptions] = None) -> str:
    """
    converts inline markdown (code spans, bold, italic, links) to HTML.

    Text outside the recognised spans is escaped. Unmatched markers stay
    as literal text.

    Args:
        line: one line of markdown without block markers
        options: render options (link hardening)

    Returns:
        HTML-safe fragment
    """
    options = options or RenderOptions()
    parts: list[str] = []
    pos = 0
    for match in INLINE_PATTERN.finditer(line):
        parts.append(escape_html(line[pos : match.start()]))
        parts.append(_render_match(match, options))
        pos = match.end()
    parts.append(escape_html(line[pos:]))
    return "".join(parts)
