"""Tests for block token dispatch in block_builder.py."""

from adfify.converter.block_builder import build_nodes, convert_token


def _text(value):
    return {"type": "text", "text": value}


def _paragraph(*inline):
    return {"type": "paragraph", "tokens": list(inline)}


class TestBuildNodes:

    def test_empty(self, ctx):
        assert build_nodes([], ctx) == []
        assert build_nodes(None, ctx) == []

    def test_order_preserved(self, ctx):
        tokens = [
            {"type": "heading", "depth": 1, "tokens": [_text("H")]},
            _paragraph(_text("p")),
            {"type": "thematic_break"},
        ]
        assert [n["type"] for n in build_nodes(tokens, ctx)] == ["heading", "paragraph", "rule"]

    def test_unknown_token_dropped(self, ctx):
        tokens = [{"type": "space"}, {"type": "html", "text": "<br>"}, _paragraph(_text("x"))]
        nodes = build_nodes(tokens, ctx)
        assert [n["type"] for n in nodes] == ["paragraph"]
        assert ctx.dropped == 2

    def test_token_without_type_dropped(self, ctx):
        assert convert_token({}, ctx) == []


class TestHeading:

    def test_level_and_content(self, ctx):
        node = convert_token({"type": "heading", "depth": 3, "tokens": [_text("Title")]}, ctx)[0]
        assert node == {
            "type": "heading",
            "attrs": {"level": 3},
            "content": [{"type": "text", "text": "Title"}],
        }


class TestCodeBlock:

    def test_with_language(self, ctx):
        node = convert_token({"type": "block_code", "text": "x = 1", "lang": "python"}, ctx)[0]
        assert node == {
            "type": "codeBlock",
            "attrs": {"language": "python"},
            "content": [{"type": "text", "text": "x = 1"}],
        }

    def test_without_language_has_no_attrs(self, ctx):
        node = convert_token({"type": "block_code", "text": "x"}, ctx)[0]
        assert "attrs" not in node

    def test_text_kept_verbatim(self, ctx):
        code = "def f():\n    return  1\n\n"
        node = convert_token({"type": "block_code", "text": code}, ctx)[0]
        assert node["content"][0]["text"] == code
        assert "marks" not in node["content"][0]

    def test_empty_code_has_no_text_node(self, ctx):
        node = convert_token({"type": "block_code", "text": ""}, ctx)[0]
        assert node["content"] == []


class TestBlockQuote:

    def test_content_converted_recursively(self, ctx):
        token = {
            "type": "block_quote",
            "tokens": [_paragraph(_text("a")), {"type": "thematic_break"}],
        }
        node = convert_token(token, ctx)[0]
        assert node["type"] == "blockquote"
        assert [n["type"] for n in node["content"]] == ["paragraph", "rule"]

    def test_nested_quotes(self, ctx):
        token = {"type": "block_quote", "tokens": [
            {"type": "block_quote", "tokens": [_paragraph(_text("deep"))]},
        ]}
        node = convert_token(token, ctx)[0]
        assert node["content"][0]["type"] == "blockquote"
        assert ctx.depth == 0


class TestParagraph:

    def test_plain(self, ctx):
        assert convert_token(_paragraph(_text("hi")), ctx) == [
            {"type": "paragraph", "content": [{"type": "text", "text": "hi"}]},
        ]

    def test_image_only_paragraph_becomes_media(self, ctx):
        token = _paragraph({"type": "image", "href": "https://x.com/a.png", "text": "a"})
        nodes = convert_token(token, ctx)
        assert [n["type"] for n in nodes] == ["mediaSingle"]


class TestListDispatch:

    def test_ordinary_list(self, ctx):
        token = {"type": "list", "ordered": False, "items": [
            {"type": "list_item", "task": False, "tokens": [_text("a")]},
        ]}
        assert [n["type"] for n in convert_token(token, ctx)] == ["bulletList"]

    def test_task_list(self, ctx):
        token = {"type": "list", "ordered": False, "items": [
            {"type": "list_item", "task": True, "checked": False, "tokens": [_text("a")]},
        ]}
        assert [n["type"] for n in convert_token(token, ctx)] == ["taskList"]
