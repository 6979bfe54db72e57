"""Tests for the SVG and text renderers."""

import re
import xml.etree.ElementTree as ET

import pytest

from ansi_svg.core.color import ANSI_COLORS
from ansi_svg.core.constants import ESC
from ansi_svg.core.document import AnsiDocument
from ansi_svg.core.span import Line, Span
from ansi_svg.core.style import Style
from ansi_svg.io.reader import load_text
from ansi_svg.render.svg import SvgRenderer, escape_text
from ansi_svg.render.text import TextRenderer

SVG = "{http://www.w3.org/2000/svg}"


def _parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


class TestEscapeText:

    def test_escapes_all_five(self) -> None:
        assert escape_text("<a href=\"x\">&'") == "&lt;a href=&quot;x&quot;&gt;&amp;&apos;"

    def test_ampersand_first(self) -> None:
        assert escape_text("&lt;") == "&amp;lt;"

    def test_plain_text_untouched(self) -> None:
        assert escape_text("  hello  ") == "  hello  "

    def test_drops_xml_invalid_controls(self) -> None:
        assert escape_text(f"a{ESC}(Bb\x07c\x00d") == "a(Bbcd"

    def test_keeps_tab(self) -> None:
        assert escape_text("a\tb") == "a\tb"


class TestSvgRenderer:

    def test_empty_document(self) -> None:
        svg = SvgRenderer().render(AnsiDocument())
        root = _parse(svg)
        assert root.get("width") == "20"
        assert root.get("height") == "20"
        assert root.findall(f"{SVG}text") == []
        assert root.find(f"{SVG}rect").get("fill") == "#1E1E1E"

    def test_canvas_size(self) -> None:
        doc = load_text("12345\nab\n")
        # 5 chars * 9.6 + 20, 2 lines * 20 + 20
        assert SvgRenderer().canvas_size(doc) == (68, 60)

    def test_canvas_size_truncates(self) -> None:
        doc = load_text("abc")
        # 3 * 9.6 + 20 = 48.8
        assert SvgRenderer().canvas_size(doc) == (48, 40)

    def test_exact_markup(self) -> None:
        doc = load_text(f"{ESC}[31mHello{ESC}[0m World")
        assert SvgRenderer().render(doc) == (
            '<svg xmlns="http://www.w3.org/2000/svg" width="125" height="40" version="1.1">\n'
            '  <rect width="100%" height="100%" fill="#1E1E1E"/>\n'
            '  <text x="10" y="20" font-family="monospace" font-size="16px" xml:space="preserve">'
            '<tspan fill="#CD3131" font-weight="normal" font-style="normal">Hello</tspan>'
            '<tspan fill="#FFFFFF" font-weight="normal" font-style="normal"> World</tspan>'
            '</text>\n'
            '</svg>\n'
        )

    def test_one_text_element_per_line(self, sample_text: str) -> None:
        root = _parse(SvgRenderer().render(load_text(sample_text)))
        texts = root.findall(f"{SVG}text")
        assert [t.get("y") for t in texts] == ["20", "40", "60", "80"]
        assert all(t.get("x") == "10" for t in texts)

    def test_blank_line_still_advances(self) -> None:
        root = _parse(SvgRenderer().render(load_text("a\n\nb\n")))
        texts = root.findall(f"{SVG}text")
        assert len(texts) == 3
        assert len(texts[1]) == 0

    def test_span_attributes(self) -> None:
        doc = AnsiDocument(lines=(Line((
            Span("x", Style(fg=ANSI_COLORS[94], bold=True, italic=True)),
        )),))
        tspan = _parse(SvgRenderer().render(doc)).find(f"{SVG}text/{SVG}tspan")
        assert tspan.attrib == {
            "fill": "#3B8EEA",
            "font-weight": "bold",
            "font-style": "italic",
        }

    def test_special_characters_escaped(self, sample_text: str) -> None:
        svg = SvgRenderer().render(load_text(sample_text))
        for content in re.findall(r"<tspan[^>]*>(.*?)</tspan>", svg):
            assert not re.search(r"[<>\"']", content)
            assert not re.search(r"&(?!amp;|lt;|gt;|quot;|apos;)", content)
        texts = [t.text for t in _parse(svg).iter(f"{SVG}tspan")]
        assert "  <plain> & 'quoted'" in texts

    def test_whitespace_preserved(self) -> None:
        svg = SvgRenderer().render(load_text("  two  spaces  "))
        assert ">  two  spaces  </tspan>" in svg
        assert 'xml:space="preserve"' in svg

    @pytest.mark.parametrize("text", [
        f"{ESC}[31mred{ESC}(B{ESC}[m plain\n",
        f"{ESC}]0;user@host\x07$ ls\n",
        f"{ESC}[31\n",
    ])
    def test_non_csi_controls_stay_well_formed(self, text: str) -> None:
        doc = load_text(text)
        root = _parse(doc.render_to_svg())
        assert len(root.findall(f"{SVG}text")) == 1
        # span text itself is untouched
        assert ESC in doc.lines[0].text

    def test_sgr0_from_tput(self) -> None:
        root = _parse(SvgRenderer().render(load_text(f"{ESC}[31mred{ESC}(B{ESC}[m plain\n")))
        tspans = list(root.iter(f"{SVG}tspan"))
        assert [t.text for t in tspans] == ["red(B", " plain"]
        assert [t.get("fill") for t in tspans] == ["#CD3131", "#FFFFFF"]

    def test_custom_options(self) -> None:
        renderer = SvgRenderer(font_size=10, font_family="Fira Code", background="#000000")
        assert renderer.char_width == pytest.approx(6.0)
        assert renderer.line_height == 14
        svg = renderer.render(load_text("abcde\n"))
        root = _parse(svg)
        assert root.get("width") == "50"
        assert root.get("height") == "34"
        assert root.find(f"{SVG}rect").get("fill") == "#000000"
        text = root.find(f"{SVG}text")
        assert text.get("font-family") == "Fira Code"
        assert text.get("font-size") == "10px"
        assert text.get("y") == "14"


class TestTextRenderer:

    def test_strips_sequences(self, sample_text: str) -> None:
        text = TextRenderer().render(load_text(sample_text))
        assert "\x1b" not in text
        assert text.splitlines()[0] == "user@host:~/src$ ls"

    def test_preserve_whitespace_option(self) -> None:
        doc = load_text(f"a  {ESC}[1m  \n")
        assert TextRenderer().render(doc) == "a    "
        assert TextRenderer(preserve_whitespace=False).render(doc) == "a"

    def test_document_shortcuts(self, sample_text: str) -> None:
        doc = load_text(sample_text)
        assert doc.render_to_text() == TextRenderer().render(doc)
        assert doc.render_to_svg(font_size=12) == SvgRenderer(font_size=12).render(doc)
