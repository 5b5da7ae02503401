import re
import sys

def log(tag: str, msg: str) -> None:
    # stdout carries the page itself, progress goes to stderr
    print(f"[{tag}] {msg}", file=sys.stderr)

def warn(msg: str) -> None:
    log("warn", msg)

def s(x) -> str:
    # safe string
    return "" if x is None else str(x)

def slugify(value: str) -> str:
    """CSS-class-safe version of a column name ("Blog URL" -> "blog-url")."""
    slug = re.sub(r"[^a-z0-9]+", "-", s(value).lower())
    return slug.strip("-") or "column"
