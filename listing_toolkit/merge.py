"""
Merge the directory listing with sources.csv
--------------------------------------------
- Seeds one row per file found on disk, in enumeration order, with no record.
- Attaches each CSV record to its file by the key column (filename), keeping
  the on-disk position.
- CSV rows whose file is not on disk are appended after all on-disk rows, in
  CSV order.
- A filename described twice: the later row wins and a warning naming both
  file lines is printed, or DuplicateSourceError when strict.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .errors import DuplicateSourceError
from .sources import Record
from .utils import log, warn

@dataclass
class MergedRow:
    filename: str
    record: Optional[Record] = None   # None: no CSV row for this file
    on_disk: bool = True

    def value(self, column: str) -> Optional[str]:
        # None only when there is no record at all; an empty cell is ""
        if self.record is None:
            return None
        return self.record.get(column)

def merge_listing(
    filenames: Iterable[str],
    records: List[Record],
    key: str = "filename",
    strict: bool = False,
    lines: Optional[List[int]] = None,
) -> Dict[str, MergedRow]:
    """
    ``lines`` gives the file line each record starts on (SourceTable.lines);
    without it records are numbered as if one per line after the header.
    """
    if lines is None:
        lines = list(range(2, len(records) + 2))
    merged: Dict[str, MergedRow] = {name: MergedRow(name) for name in filenames}
    seen: Dict[str, int] = {}   # filename -> line its record came from

    for i, record in zip(lines, records):
        name = record[key]
        if name in seen:
            if strict:
                raise DuplicateSourceError(name, seen[name], i)
            warn(f"{name!r} is described on lines {seen[name]} and {i}; keeping line {i}")
        seen[name] = i

        row = merged.get(name)
        if row is not None:
            row.record = record
        else:
            merged[name] = MergedRow(name, record, on_disk=False)

    missing = sum(1 for r in merged.values() if not r.on_disk)
    undescribed = sum(1 for r in merged.values() if r.record is None)
    log("merge", f"{len(merged)} rows ({undescribed} undescribed, {missing} not on disk)")
    return merged
