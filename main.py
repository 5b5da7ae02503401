import argparse
import sys
from pathlib import Path
from typing import List, Optional

from listing_toolkit.config import DEFAULT_CONFIG, load_config
from listing_toolkit.errors import ListingError
from listing_toolkit.listing import build_listing
from listing_toolkit.server import serve
from listing_toolkit.utils import log

def render(config, out: Optional[Path]) -> None:
    page = build_listing(config)
    if out is None:
        sys.stdout.write(page)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(page, encoding="utf-8")
    log("ok", f"wrote {out}")

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="List the files in a directory together with their sources.csv descriptions."
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["render", "serve"],
        default="render",
        help="render: write the page once (default); serve: re-render on every request",
    )
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG, help="YAML config (default: config.yaml, optional)")
    parser.add_argument("--out", type=Path, default=None, help="render: output file (default: stdout)")
    parser.add_argument("--host", default="127.0.0.1", help="serve: bind address")
    parser.add_argument("--port", type=int, default=8000, help="serve: port (default: 8000)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.command == "serve":
            serve(config, args.host, args.port)
        else:
            render(config, args.out)
    except (ListingError, OSError) as e:
        log("error", str(e))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
