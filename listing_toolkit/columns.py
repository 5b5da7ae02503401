from __future__ import annotations
from dataclasses import dataclass
from html import escape
from typing import List, Optional, Tuple, Union
from urllib.parse import quote

from .config import ListingConfig
from .merge import MergedRow
from .utils import slugify

@dataclass(frozen=True)
class PlainText:
    """Escaped cell value; absent renders as an empty cell."""

    def cell(self, css: str, row: MergedRow, value: Optional[str]) -> str:
        return f'<td class="{css}">{escape(value or "")}</td>'

@dataclass(frozen=True)
class FileLink:
    """Row header linking to the file itself."""

    def cell(self, css: str, row: MergedRow, value: Optional[str]) -> str:
        href = quote(row.filename)
        return f'<th scope="row" class="{css}"><a href="{href}">{escape(row.filename)}</a></th>'

@dataclass(frozen=True)
class UrlLink:
    glyph: str

    def cell(self, css: str, row: MergedRow, value: Optional[str]) -> str:
        if not value:
            return f'<td class="{css}"></td>'
        # the href is trusted as-is; only the glyph is escaped
        return f'<td class="{css}"><a href="{value}">{escape(self.glyph)}</a></td>'

@dataclass(frozen=True)
class TextWithFallback:
    placeholder: str

    def cell(self, css: str, row: MergedRow, value: Optional[str]) -> str:
        text = value if value else self.placeholder
        return f'<td class="{css}">{escape(text)}</td>'

Strategy = Union[PlainText, FileLink, UrlLink, TextWithFallback]
Column = Tuple[str, str, Strategy]   # (column name, css class, strategy)

def strategy_for(column: str, config: ListingConfig) -> Strategy:
    if column == config.key_column:
        return FileLink()
    if column == config.description_column:
        return TextWithFallback(config.description_placeholder)
    if column == config.link_column:
        return UrlLink(config.link_glyph)
    return PlainText()

def resolve_columns(header: List[str], config: ListingConfig) -> List[Column]:
    """Pick each column's strategy once, before any row is rendered."""
    return [(name, slugify(name), strategy_for(name, config)) for name in header]
