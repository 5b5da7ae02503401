from __future__ import annotations
import errno
from html import escape
from pathlib import Path
from typing import Dict, List

from .columns import Column, resolve_columns
from .config import ListingConfig
from .merge import MergedRow
from .sizes import human_filesize
from .utils import log, warn

def size_cell(path: Path, placeholder: str) -> str:
    try:
        # an empty key points at the directory itself
        if not path.is_file():
            raise FileNotFoundError(errno.ENOENT, "not a file on disk", str(path))
        text = human_filesize(path.stat().st_size, 0)
    except OSError as e:
        # described in sources.csv but gone from disk (or unreadable)
        warn(f"no size for {path.name or path}: {e.strerror or e}")
        text = placeholder
    return f'<td class="filesize">{escape(text)}</td>'

def render_row(row: MergedRow, columns: List[Column], config: ListingConfig, directory: Path) -> str:
    cells = [strategy.cell(css, row, row.value(name)) for name, css, strategy in columns]
    cells.append(size_cell(directory / row.filename, config.size_placeholder))
    return "      <tr>\n" + "\n".join(f"        {c}" for c in cells) + "\n      </tr>"

def render_table(
    header: List[str],
    merged: Dict[str, MergedRow],
    config: ListingConfig,
    directory: Path,
) -> str:
    columns = resolve_columns(header, config)
    head = "\n".join(
        f'        <th scope="col" class="{css}">{escape(name)}</th>' for name, css, _ in columns
    )
    body = "\n".join(render_row(row, columns, config, Path(directory)) for row in merged.values())
    log("render", f"{len(merged)} rows x {len(columns) + 1} columns")
    return f"""<table>
    <thead>
      <tr>
{head}
        <th scope="col" class="filesize">filesize</th>
      </tr>
    </thead>
    <tbody>
{body}
    </tbody>
  </table>"""

def render_page(table_html: str, config: ListingConfig) -> str:
    title = escape(config.title)
    intro = "\n".join(f"  <p>{escape(p)}</p>" for p in config.intro)
    footer = f"\n  <footer>\n    <p>{config.footer_html}</p>\n  </footer>" if config.footer_html else ""
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style type="text/css">{config.stylesheet}</style>
</head>
<body>
  <h1>{title}</h1>
{intro}
  {table_html}
{footer}
</body>
</html>
"""
