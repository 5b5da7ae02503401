from __future__ import annotations

from .config import ListingConfig
from .files import list_files
from .merge import merge_listing
from .render import render_page, render_table
from .sources import read_sources

def build_listing(config: ListingConfig) -> str:
    """
    One full render pass: read sources.csv, list the directory, merge, render.
    Any fatal error propagates before a single byte of HTML is produced.
    """
    table = read_sources(config.sources_path, key=config.key_column)
    files = list_files(config.directory, config.extensions, reverse=config.reverse)
    merged = merge_listing(
        files,
        table.records,
        key=config.key_column,
        strict=config.strict_duplicates,
        lines=table.lines,
    )
    return render_page(render_table(table.header, merged, config, config.directory), config)
