"""block scanner: classifies markdown lines and renders block fragments."""

import re
from collections.abc import Iterator
from typing import Optional

from mdview.core.escaping import escape_html
from mdview.core.inline import format_inline
from mdview.core.models import Block, BlockKind, RenderOptions

FENCE_MARKER = "```"
HEADING_PATTERN = re.compile(r"^(#{1,6}) \S")
RULE_PATTERN = re.compile(r"^(-{3,}|={3,})$")
LIST_MARKERS = ("- ", "* ")


def _is_list_item(stripped: str) -> bool:
    return stripped.startswith(LIST_MARKERS)


def scan_blocks(markdown: str) -> Iterator[Block]:
    """
    yields blocks for newline-normalized markdown in line order.

    Fences are checked first so code content is never classified. An
    unterminated fence at end of input still yields its code block.

    Args:
        markdown: markdown text with "\\n" line endings

    Yields:
        classified blocks
    """
    lines = markdown.split("\n")
    in_code = False
    code_lines: list[str] = []

    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()
        i += 1

        if stripped.startswith(FENCE_MARKER):
            if in_code:
                yield Block(BlockKind.FENCED_CODE, code_lines)
                code_lines = []
            in_code = not in_code
            continue

        if in_code:
            code_lines.append(line)
            continue

        heading = HEADING_PATTERN.match(line)
        if heading:
            level = len(heading.group(1))
            yield Block(BlockKind.HEADING, [line[level + 1 :]], level=level)
            continue

        if RULE_PATTERN.match(stripped):
            yield Block(BlockKind.HORIZONTAL_RULE)
            continue

        if _is_list_item(stripped):
            # consumes list items and blank lines up to the first other line
            items = [stripped[2:]]
            while i < len(lines):
                candidate = lines[i].strip()
                if _is_list_item(candidate):
                    items.append(candidate[2:])
                elif candidate:
                    break
                i += 1
            yield Block(BlockKind.UNORDERED_LIST, items)
            continue

        if not stripped:
            yield Block(BlockKind.BLANK)
        else:
            yield Block(BlockKind.PARAGRAPH, [line])

    if in_code:
        yield Block(BlockKind.FENCED_CODE, code_lines)


def render_block(block: Block, options: Optional[RenderOptions] = None) -> str:
    """
    renders one block to an HTML fragment terminated by a newline.

    Args:
        block: block produced by scan_blocks
        options: render options passed to the inline formatter

    Returns:
        HTML fragment
    """
    kind = block.kind
    if kind is BlockKind.FENCED_CODE:
        code = "".join(f"{line}\n" for line in block.lines)
        return f"<pre><code>{escape_html(code)}</code></pre>\n"
    if kind is BlockKind.HEADING:
        tag = f"h{block.level}"
        return f"<{tag}>{format_inline(block.lines[0], options)}</{tag}>\n"
    if kind is BlockKind.HORIZONTAL_RULE:
        return "<hr/>\n"
    if kind is BlockKind.UNORDERED_LIST:
        items = "".join(
            f"  <li>{format_inline(item, options)}</li>\n" for item in block.lines
        )
        return f"<ul>\n{items}</ul>\n"
    if kind is BlockKind.PARAGRAPH:
        return f"<p>{format_inline(block.lines[0], options)}</p>\n"
    return "\n"


def render_body(markdown: str, options: Optional[RenderOptions] = None) -> str:
    """renders newline-normalized markdown to the HTML body fragment."""
    return "".join(render_block(block, options) for block in scan_blocks(markdown))
