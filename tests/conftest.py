import pytest

from listing_toolkit.config import ListingConfig

@pytest.fixture
def make_listing(tmp_path):
    """
    Build a listing directory: ``files`` maps name -> size in bytes,
    ``csv_text`` is written verbatim to sources.csv.
    """
    def _make(files=None, csv_text="filename,description,blog_url\n", **overrides):
        for name, size in (files or {}).items():
            (tmp_path / name).write_bytes(b"x" * size)
        (tmp_path / "sources.csv").write_text(csv_text, encoding="utf-8")
        return ListingConfig(directory=tmp_path, **overrides)
    return _make
