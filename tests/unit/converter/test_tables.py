"""Tests for table conversion and empty-cell padding."""

from adfify.converter.tables import EMPTY_CELL_TEXT, build_table

PADDING = {"type": "paragraph", "content": [{"type": "text", "text": EMPTY_CELL_TEXT}]}


def _cell(*tokens):
    return {"tokens": list(tokens), "align": None}


def _text(value):
    return {"type": "text", "text": value}


class TestBuildTable:

    def test_header_and_body_rows(self, ctx):
        token = {
            "type": "table",
            "header": [_cell(_text("A")), _cell(_text("B"))],
            "rows": [[_cell(_text("1")), _cell(_text("2"))]],
        }
        node = build_table(token, ctx)
        assert node["type"] == "table"
        assert len(node["content"]) == 2
        header, body = node["content"]
        assert [c["type"] for c in header["content"]] == ["tableHeader", "tableHeader"]
        assert [c["type"] for c in body["content"]] == ["tableCell", "tableCell"]
        assert body["content"][1]["content"] == [
            {"type": "paragraph", "content": [{"type": "text", "text": "2"}]},
        ]

    def test_no_header_row_without_header_cells(self, ctx):
        token = {"type": "table", "header": [], "rows": [[_cell(_text("1"))]]}
        node = build_table(token, ctx)
        assert len(node["content"]) == 1
        assert node["content"][0]["content"][0]["type"] == "tableCell"

    def test_empty_body_cell_padded(self, ctx):
        token = {"type": "table", "header": [_cell(_text("A"))], "rows": [[_cell()]]}
        cell = build_table(token, ctx)["content"][1]["content"][0]
        assert cell["content"] == [PADDING]

    def test_empty_header_cell_padded(self, ctx):
        token = {"type": "table", "header": [_cell()], "rows": []}
        cell = build_table(token, ctx)["content"][0]["content"][0]
        assert cell == {"type": "tableHeader", "content": [PADDING]}

    def test_cell_with_only_dropped_inline_padded(self, ctx):
        token = {
            "type": "table",
            "header": [],
            "rows": [[_cell({"type": "html", "text": "<br>"})]],
        }
        cell = build_table(token, ctx)["content"][0]["content"][0]
        assert cell["content"] == [PADDING]

    def test_empty_paragraph_beside_media_discarded(self, ctx):
        html = {"type": "html", "text": "<br>"}
        image = {"type": "image", "href": "https://x.com/a.png", "text": "a"}
        token = {"type": "table", "header": [], "rows": [[_cell(html, image)]]}
        cell = build_table(token, ctx)["content"][0]["content"][0]
        assert [n["type"] for n in cell["content"]] == ["mediaSingle"]

    def test_image_cell_becomes_media(self, ctx):
        image = {"type": "image", "href": "https://x.com/a.png", "text": "a"}
        token = {"type": "table", "header": [], "rows": [[_cell(image)]]}
        cell = build_table(token, ctx)["content"][0]["content"][0]
        assert [n["type"] for n in cell["content"]] == ["mediaSingle"]

    def test_cell_marks_preserved(self, ctx):
        strong = {"type": "strong", "text": "b", "tokens": [_text("b")]}
        token = {"type": "table", "header": [], "rows": [[_cell(strong)]]}
        cell = build_table(token, ctx)["content"][0]["content"][0]
        assert cell["content"][0]["content"][0]["marks"] == [{"type": "strong"}]
