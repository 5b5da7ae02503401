"""
Listing configuration
---------------------
Everything deployment-specific (which extensions are listed, which CSV columns
get special treatment, the page chrome) lives in a
``ListingConfig``.  Values come from ``config.yaml`` when it exists, otherwise
the defaults below describe the classic "PDFs + sources.csv" deployment.

Example config.yaml::

    title: Zoning documents
    extensions: [".pdf", ".docx"]
    reverse: true
    intro:
      - Documents collected for the neighborhood zoning review.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import ConfigError

DEFAULT_CONFIG = Path("config.yaml")

STYLESHEET = """
  * { box-sizing: border-box; font-family: sans-serif; font-size: 14px; }
  table { max-width: 100%; overflow-x: scroll; border-collapse: collapse; }
  thead { border: 2px solid black; position: sticky; top: 0; background-color: white; }
  thead td { border-bottom: 1px solid black; }
  tbody tr { border-top: 1px solid #ddd; }
  th, td { vertical-align: top; }
  th { text-align: left; }
  td, tbody th { font-weight: normal; padding-bottom: 1.0em; }
  td.blog-url { max-width: 10ch; overflow: hidden; max-height: 1em;
                font-family: "Symbola", "Segoe UI Symbol", sans-serif; }
  td.filesize { white-space: nowrap; }
"""

@dataclass
class ListingConfig:
    directory: Path = Path(".")
    sources: Path = Path("sources.csv")
    extensions: List[str] = field(default_factory=lambda: [".pdf"])
    reverse: bool = False

    key_column: str = "filename"
    description_column: str = "description"
    link_column: str = "blog_url"

    description_placeholder: str = "\u26A0\uFE0F This file is not described in sources.csv"
    # variation selector 15 keeps the link glyph from rendering as emoji
    link_glyph: str = "\U0001F517\uFE0E"
    size_placeholder: str = "unavailable"
    strict_duplicates: bool = False

    title: str = "Files"
    intro: List[str] = field(default_factory=list)
    footer_html: str = ""
    stylesheet: str = STYLESHEET

    @property
    def sources_path(self) -> Path:
        # a relative sources path is resolved against the listing directory
        return self.sources if self.sources.is_absolute() else self.directory / self.sources

def _norm_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else "." + ext

def config_from_dict(data: Dict[str, Any]) -> ListingConfig:
    known = {f.name for f in fields(ListingConfig)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    kwargs: Dict[str, Any] = {}
    for name, value in data.items():
        if name in ("directory", "sources"):
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{name} must be a non-empty path string")
            value = Path(value)
        elif name in ("extensions", "intro"):
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{name} must be a list of strings")
            if name == "extensions":
                if not value:
                    raise ConfigError("extensions must not be empty")
                value = [_norm_extension(v) for v in value]
        elif name in ("reverse", "strict_duplicates"):
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be true or false")
        elif not isinstance(value, str):
            raise ConfigError(f"{name} must be a string")
        kwargs[name] = value
    return ListingConfig(**kwargs)

def load_config(path: Path = DEFAULT_CONFIG) -> ListingConfig:
    """Read ``path`` if it exists; a missing file means all defaults."""
    path = Path(path)
    if not path.exists():
        return ListingConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return config_from_dict(data)
