"""Tests for extractor.extract_metadata."""

from url_details.services.extractor import extract_metadata


class TestTitle:
    def test_fixture_title_is_entity_decoded(self, example_html):
        assert extract_metadata(example_html).title == "Example Website — - with encoded content."

    def test_accepts_text(self):
        html = "<html><head><title>Caf&eacute; &amp; Bar</title></head></html>"
        assert extract_metadata(html).title == "Café & Bar"

    def test_whitespace_is_collapsed(self):
        html = "<title>\n   Spread\n   over   lines\n</title>"
        assert extract_metadata(html).title == "Spread over lines"

    def test_first_title_wins(self):
        html = "<html><head><title>First</title></head><body><title>Second</title></body></html>"
        assert extract_metadata(html).title == "First"

    def test_declared_encoding_is_honoured(self):
        body = (
            '<html><head><meta charset="iso-8859-1"><title>Gr\xfc\xdfe</title></head></html>'
        ).encode("latin-1")
        assert extract_metadata(body).title == "Grüße"


class TestMissingOrBroken:
    def test_no_title_gives_empty_title(self):
        assert extract_metadata("<html><body><p>No title here</p></body></html>").title == ""

    def test_empty_title_element(self):
        assert extract_metadata("<title></title>").title == ""

    def test_unclosed_title(self):
        assert extract_metadata("<html><head><title>Partial page").title == "Partial page"

    def test_non_html_body(self):
        assert extract_metadata(b"\x00\x01\x02 not html at all").title == ""

    def test_truncated_markup(self):
        assert extract_metadata('<html><head><title>Cut</title><meta name="desc').title == "Cut"


class TestHeaderEncoding:
    _BODY = "<html><head><title>Привет</title></head></html>".encode("windows-1251")

    def test_header_charset_is_used_for_bytes(self):
        assert extract_metadata(self._BODY, "windows-1251").title == "Привет"

    def test_header_charset_is_ignored_for_text(self):
        assert extract_metadata("<title>Привет</title>", "windows-1251").title == "Привет"
