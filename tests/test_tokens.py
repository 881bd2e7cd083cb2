"""Tests for the markup tokenizer."""

from io import BytesIO

from epubgrid.rendering.tokens import Token, TokenType, tokenize


def _shape(tokens: list[Token]) -> list[tuple[TokenType, str]]:
    return [(t.type, t.data) for t in tokens]


class TestTokenize:

    def test_document_order(self):
        tokens = list(tokenize("<p>Hello <b>world</b></p>"))
        assert _shape(tokens) == [
            (TokenType.START_TAG, "html"),
            (TokenType.START_TAG, "body"),
            (TokenType.START_TAG, "p"),
            (TokenType.TEXT, "Hello "),
            (TokenType.START_TAG, "b"),
            (TokenType.TEXT, "world"),
            (TokenType.END_TAG, "b"),
            (TokenType.END_TAG, "p"),
            (TokenType.END_TAG, "body"),
            (TokenType.END_TAG, "html"),
        ]

    def test_void_elements_are_self_closing(self):
        tokens = list(tokenize("<p>a<br/>b<hr>c</p>"))
        closing = [t.data for t in tokens if t.type == TokenType.SELF_CLOSING_TAG]
        assert closing == ["br", "hr"]
        assert not any(t.type == TokenType.END_TAG and t.data == "br" for t in tokens)

    def test_start_and_end_tags_balance(self):
        tokens = list(tokenize("<div><p>one<p>two</div><table><tr><td>x"))
        starts = [t.data for t in tokens if t.type == TokenType.START_TAG]
        ends = [t.data for t in tokens if t.type == TokenType.END_TAG]
        assert sorted(starts) == sorted(ends)

    def test_attributes_keep_order(self):
        tokens = list(tokenize('<img alt="A cat" src="images/cat.png"/>'))
        img = next(t for t in tokens if t.data == "img")
        assert img.attrs == [("alt", "A cat"), ("src", "images/cat.png")]

    def test_multi_valued_attribute_stays_a_string(self):
        tokens = list(tokenize('<p class="intro first">x</p>'))
        p = next(t for t in tokens if t.data == "p")
        assert p.attrs == [("class", "intro first")]

    def test_tag_names_are_lowercase(self):
        tokens = list(tokenize("<P><B>x</B></P>"))
        assert {t.data for t in tokens if t.type == TokenType.START_TAG} >= {"p", "b"}

    def test_comments_and_doctype_are_dropped(self):
        tokens = list(tokenize("<!DOCTYPE html><p>a<!-- note -->b</p>"))
        texts = [t.data for t in tokens if t.type == TokenType.TEXT]
        assert texts == ["a", "b"]

    def test_style_text_is_a_text_token(self):
        tokens = list(tokenize("<style>p { color: red }</style>"))
        texts = [t.data for t in tokens if t.type == TokenType.TEXT]
        assert texts == ["p { color: red }"]

    def test_accepts_bytes_and_file_objects(self):
        markup = '<meta charset="utf-8"><p>café</p>'.encode("utf-8")
        from_bytes = [t.data for t in tokenize(markup) if t.type == TokenType.TEXT]
        from_file = [t.data for t in tokenize(BytesIO(markup)) if t.type == TokenType.TEXT]
        assert from_bytes == from_file == ["café"]

    def test_unreadable_source_yields_error_token(self):
        class Broken:
            def read(self, *args):
                raise OSError("disk on fire")

        tokens = list(tokenize(Broken()))
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.ERROR
        assert isinstance(tokens[0].error, OSError)

