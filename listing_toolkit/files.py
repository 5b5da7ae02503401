from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from .utils import log

def list_files(directory: Path, extensions: Iterable[str], reverse: bool = False) -> List[str]:
    """
    Names of the regular files directly inside ``directory`` whose suffix is
    one of ``extensions`` (case-insensitive, e.g. ".pdf").  Sorted by name like
    a shell glob; ``reverse`` flips that order.  No match is not an error.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"listing directory not found: {directory}")
    wanted = {e.lower() for e in extensions}
    names = sorted(
        p.name for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in wanted
    )
    if reverse:
        names.reverse()
    log("files", f"{directory}: {len(names)} matching {', '.join(sorted(wanted))}")
    return names
