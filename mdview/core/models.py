"""data models for documents, blocks and render results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

TEXT_MARKDOWN = "text/markdown"
TEXT_HTML = "text/html"
DEFAULT_TITLE = "README.md"


class BlockKind(Enum):
    """block classification produced by the scanner."""

    HEADING = "heading"
    HORIZONTAL_RULE = "horizontal_rule"
    FENCED_CODE = "fenced_code"
    UNORDERED_LIST = "unordered_list"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


@dataclass
class Block:
    """one classified run of lines."""

    kind: BlockKind
    # heading/paragraph: single text, list: one entry per item, code: raw lines
    lines: list[str] = field(default_factory=list)
    level: int = 0


@dataclass
class RenderOptions:
    """page and link options for a render."""

    title: Optional[str] = None  # falls back to DEFAULT_TITLE
    lang: str = "fr"
    safe_links: bool = False


@dataclass(frozen=True)
class RenderResult:
    """rendered body plus whether it is the untouched markdown."""

    body: str
    is_raw: bool = False

    @property
    def content_type(self) -> str:
        """media type matching the body."""
        return TEXT_MARKDOWN if self.is_raw else TEXT_HTML

    @property
    def suffix(self) -> str:
        """file suffix matching the body."""
        return ".md" if self.is_raw else ".html"


@dataclass
class Document:
    """markdown source resolved by the document loader."""

    name: str
    text: str
    origin: str = "filesystem"  # "filesystem" or "package"
