"""HTML escaping helpers."""

import html as html_lib

TAB_WIDTH = 4


def escape_html(text: str, expand_tabs: bool = True) -> str:
    """
    escapes &, < and > to entities, optionally expanding tabs to spaces.

    Args:
        text: literal text
        expand_tabs: if True, replace each tab with four spaces

    Returns:
        escaped text
    """
    escaped = html_lib.escape(text, quote=False)
    if expand_tabs:
        escaped = escaped.replace("\t", " " * TAB_WIDTH)
    return escaped


def escape_attribute(value: str) -> str:
    """escapes a value for use inside a double-quoted attribute."""
    return html_lib.escape(value, quote=True)
