"""
sources.csv reader
------------------
- Reads every cell as a string; NaN detection is off so an empty cell stays "".
- The first row is the header.  It is kept in file order because it also
  decides the left-to-right column order of the rendered table.
- A row with more or fewer fields than the header is fatal.  Rows are never
  padded or truncated.
- Anything that stops the file from parsing (bad encoding included) is a
  SourcesFormatError.
"""

from __future__ import annotations
import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd

from .errors import SourcesFormatError
from .utils import log

Record = Dict[str, str]

@dataclass
class SourceTable:
    header: List[str]
    records: List[Record] = field(default_factory=list)
    # file line each record starts on (header is line 1)
    lines: List[int] = field(default_factory=list)

def scan_rows(path: Path) -> Tuple[List[str], List[int]]:
    """
    Return the header and the starting line of every data row, after checking
    every row has the same width.  pandas silently pads short rows, so the
    widths are checked here.
    """
    lines: List[int] = []
    try:
        with path.open("r", newline="", encoding="utf-8-sig") as f:
            rdr = csv.reader(f)
            header = next(rdr, None)
            while header == []:
                header = next(rdr, None)
            if header is None:
                raise SourcesFormatError(f"{path.name}: no header row")
            prev = rdr.line_num
            for row in rdr:
                start, prev = prev + 1, rdr.line_num
                if not row:
                    continue
                if len(row) != len(header):
                    raise SourcesFormatError(
                        f"{path.name}: line {start} has {len(row)} fields, "
                        f"header has {len(header)}"
                    )
                lines.append(start)
    except UnicodeDecodeError as e:
        raise SourcesFormatError(f"{path.name}: not UTF-8: {e}") from e
    except csv.Error as e:
        raise SourcesFormatError(f"{path.name}: {e}") from e
    return header, lines

def read_sources(path: Path, key: str = "filename") -> SourceTable:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"sources file not found: {path}")

    header, lines = scan_rows(path)
    if len(set(header)) != len(header):
        raise SourcesFormatError(f"{path.name}: duplicate column names in header {header}")
    if key not in header:
        raise SourcesFormatError(f"{path.name}: header has no {key!r} column: {header}")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise SourcesFormatError(f"{path.name}: {e}") from e

    # zip with our own header: pandas renames blank column names to "Unnamed: n"
    records = [dict(zip(header, values)) for values in df.itertuples(index=False, name=None)]
    if len(records) != len(lines):
        raise SourcesFormatError(
            f"{path.name}: found {len(lines)} rows but parsed {len(records)}"
        )
    log("sources", f"{path.name}: {len(records)} rows, columns {header}")
    return SourceTable(header=header, records=records, lines=lines)
