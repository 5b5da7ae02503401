import re
from pathlib import Path

from listing_toolkit.config import ListingConfig
from listing_toolkit.listing import build_listing
from listing_toolkit.merge import MergedRow
from listing_toolkit.render import render_page, render_table, size_cell

HEADER = ["filename", "description", "blog_url"]

def body_rows(html):
    tbody = html.split("<tbody>", 1)[1].split("</tbody>", 1)[0]
    return re.findall(r"<tr>(.*?)</tr>", tbody, flags=re.S)

def cell(row_html, css):
    m = re.search(rf'<t[dh][^>]*class="{css}"[^>]*>(.*?)</t[dh]>', row_html, flags=re.S)
    assert m, f"no {css} cell in {row_html}"
    return m.group(1)

def test_header_row(tmp_path):
    html = render_table(HEADER + ["Source Year"], {}, ListingConfig(), tmp_path)
    head = html.split("<tbody>")[0]
    assert '<th scope="col" class="filename">filename</th>' in head
    assert '<th scope="col" class="source-year">Source Year</th>' in head
    assert '<th scope="col" class="filesize">filesize</th>' in head
    assert head.index("source-year") < head.index('class="filesize"')

def test_undescribed_file(make_listing):
    config = make_listing(files={"report.pdf": 1234})
    [row] = body_rows(build_listing(config))
    assert "This file is not described" in cell(row, "description")
    assert cell(row, "blog-url") == ""
    assert cell(row, "filesize") == "1kB"

def test_described_file(make_listing):
    config = make_listing(
        files={"my report.pdf": 999},
        csv_text="filename,description,blog_url\nmy report.pdf,Annual report,https://example.com/post?a=1&b=2\n",
    )
    [row] = body_rows(build_listing(config))
    assert cell(row, "filename") == '<a href="my%20report.pdf">my report.pdf</a>'
    assert '<th scope="row" class="filename">' in row
    assert cell(row, "description") == "Annual report"
    # href is passed through untouched
    assert 'href="https://example.com/post?a=1&b=2"' in cell(row, "blog-url")
    assert "\U0001F517" in cell(row, "blog-url")
    assert cell(row, "filesize") == "999B"

def test_missing_file_gets_size_placeholder(make_listing, capsys):
    config = make_listing(csv_text="filename,description,blog_url\nmissing.pdf,Gone,\n")
    [row] = body_rows(build_listing(config))
    assert cell(row, "filesize") == "unavailable"
    assert cell(row, "description") == "Gone"
    assert "missing.pdf" in capsys.readouterr().err

def test_description_is_escaped(make_listing):
    config = make_listing(
        files={"x.pdf": 1},
        csv_text="filename,description,blog_url\nx.pdf,<script>alert(1)</script>,\n",
    )
    html = build_listing(config)
    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

def test_filename_is_escaped_and_quoted(tmp_path):
    merged = {"a&b <1>.pdf": MergedRow("a&b <1>.pdf", None, on_disk=False)}
    [row] = body_rows(render_table(HEADER, merged, ListingConfig(), tmp_path))
    assert cell(row, "filename") == '<a href="a%26b%20%3C1%3E.pdf">a&amp;b &lt;1&gt;.pdf</a>'

def test_other_columns_plain_escaped(make_listing):
    config = make_listing(
        files={"a.pdf": 1, "b.pdf": 1},
        csv_text="filename,description,blog_url,author\na.pdf,A,,Tom & Jerry\n",
    )
    rows = body_rows(build_listing(config))
    assert cell(rows[0], "author") == "Tom &amp; Jerry"
    assert cell(rows[1], "author") == ""

def test_empty_description_uses_placeholder(make_listing):
    config = make_listing(files={"a.pdf": 1}, csv_text="filename,description,blog_url\na.pdf,,\n")
    [row] = body_rows(build_listing(config))
    assert "This file is not described" in cell(row, "description")

def test_column_order_follows_header(make_listing):
    config = make_listing(files={"a.pdf": 1}, csv_text="blog_url,filename,description\n,a.pdf,A\n")
    [row] = body_rows(build_listing(config))
    assert row.index("blog-url") < row.index('class="filename"') < row.index("description")
    assert row.rstrip().endswith('<td class="filesize">1B</td>')

def test_custom_special_columns(make_listing):
    config = make_listing(
        files={"a.gif": 2000},
        csv_text="file,summary,source_url\na.gif,,http://x.test/\n",
        extensions=[".gif"],
        key_column="file",
        description_column="summary",
        link_column="source_url",
        description_placeholder="TBD",
        link_glyph="src",
    )
    [row] = body_rows(build_listing(config))
    assert cell(row, "file") == '<a href="a.gif">a.gif</a>'
    assert cell(row, "summary") == "TBD"
    assert cell(row, "source-url") == '<a href="http://x.test/">src</a>'
    assert cell(row, "filesize") == "2kB"

def test_reverse_keeps_csv_only_rows_last(make_listing):
    csv_text = "filename,description,blog_url\nonly1.pdf,,\nonly2.pdf,,\n"
    files = {"a.pdf": 1, "b.pdf": 1}
    order = lambda html: re.findall(r'class="filename"><a href="([^"]+)"', html)
    assert order(build_listing(make_listing(files=files, csv_text=csv_text))) == [
        "a.pdf", "b.pdf", "only1.pdf", "only2.pdf"]
    assert order(build_listing(make_listing(files=files, csv_text=csv_text, reverse=True))) == [
        "b.pdf", "a.pdf", "only1.pdf", "only2.pdf"]

def test_page_chrome():
    config = ListingConfig(title="Gifs & more", intro=["First.", "Second <b>"], footer_html='<a href="/">home</a>')
    page = render_page("<table></table>", config)
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Gifs &amp; more</title>" in page
    assert "<h1>Gifs &amp; more</h1>" in page
    assert "<p>Second &lt;b&gt;</p>" in page
    assert '<footer>\n    <p><a href="/">home</a></p>' in page
    assert "<style" in page and "<table></table>" in page

def test_page_without_footer():
    assert "<footer>" not in render_page("<table></table>", ListingConfig())

def test_empty_or_unusable_key_gets_size_placeholder(tmp_path, capsys):
    (tmp_path / "a.pdf").write_bytes(b"x" * 5000)
    merged = {
        "": MergedRow("", {"filename": "", "description": "", "blog_url": ""}, on_disk=False),
        "bad\x00.pdf": MergedRow("bad\x00.pdf", None, on_disk=False),
    }
    rows = body_rows(render_table(HEADER, merged, ListingConfig(), tmp_path))
    assert [cell(r, "filesize") for r in rows] == ["unavailable", "unavailable"]
    assert capsys.readouterr().err.count("[warn]") == 2

def test_unreadable_file_gets_size_placeholder(tmp_path, monkeypatch, capsys):
    target = tmp_path / "locked.pdf"
    target.write_bytes(b"x")

    def denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "stat", denied)
    html = size_cell(target, "unavailable")
    monkeypatch.undo()
    assert html == '<td class="filesize">unavailable</td>'
    assert "[warn] no size for locked.pdf: Permission denied" in capsys.readouterr().err
