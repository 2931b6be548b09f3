#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_terminal_renderer.py
"""Unit tests for TerminalRenderer.

Tests cover:
- Block separation and blank-line normalization
- Link, inline card and URL colouring
- Bullet, ordered and nested list layout
- Rules, media placeholders and code blocks
- Raw JSON fallback for unknown content
"""

import io
import json

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st
from utils import bullet_list, doc, heading, list_item, media, ordered_list, paragraph, text

from jiraterm.adf import AdfParser, Document, Heading, Text
from jiraterm.api import render_description
from jiraterm.options import TerminalRendererOptions
from jiraterm.renderers import TerminalRenderer, normalize_blank_lines
from jiraterm.utils.ansi import CYAN, RESET, UNDERLINE

PLAIN = TerminalRendererOptions(colour=False)


def render(*content, options=PLAIN):
    return render_description(doc(*content), options)


def item(value: str) -> dict:
    return list_item(paragraph(text(value)))


@pytest.mark.unit
class TestBlocks:
    """Tests for headings, paragraphs and their separation."""

    def test_heading(self):
        """Test a level 2 heading renders with two hashes."""
        assert render(heading(2, text("Hi"))) == "## Hi"

    def test_heading_level_six(self):
        """Test deep headings keep their level."""
        assert render(heading(6, text("Deep"))) == "###### Deep"

    def test_heading_level_overflow(self):
        """Test out-of-range heading levels are clamped instead of failing."""
        envelope = json.loads('{"type": "doc", "content": [{"type": "heading", "attrs": {"level": 1e400}}]}')
        assert render_description(envelope, PLAIN) == "#"
        assert render(heading(10**9, text("Deep"))) == "###### Deep"

    def test_paragraphs_separated_by_blank_line(self):
        """Test consecutive blocks are separated by exactly one blank line."""
        assert render(paragraph(text("a")), paragraph(text("b"))) == "a\n\nb"

    def test_inline_text_concatenated(self):
        """Test text runs in a paragraph join without separators."""
        assert render(paragraph(text("Hello, "), text("world"))) == "Hello, world"

    def test_empty_document(self):
        """Test a document without content renders to an empty string."""
        assert render() == ""

    def test_no_description(self):
        """Test a missing description renders the placeholder."""
        assert render_description(None) == "No description."

    def test_empty_paragraphs_collapse(self):
        """Test empty paragraphs never produce more than one blank line."""
        result = render(paragraph(text("a")), paragraph(), paragraph(), paragraph(text("b")))
        assert result == "a\n\nb"

    def test_code_block_unfenced(self):
        """Test code blocks render like paragraphs by default."""
        raw = {"type": "codeBlock", "attrs": {"language": "python"}, "content": [text("x = 1")]}
        assert render(paragraph(text("Code:")), raw) == "Code:\n\nx = 1"

    def test_code_block_fenced(self):
        """Test fenced code blocks include the language."""
        raw = {"type": "codeBlock", "attrs": {"language": "python"}, "content": [text("x = 1")]}
        options = PLAIN.create_updated(fence_code_blocks=True)
        assert render(raw, options=options) == "```python\nx = 1\n```"


@pytest.mark.unit
class TestLinks:
    """Tests for links and inline cards."""

    def test_link_equal_to_text_is_bare_url(self):
        """Test a link whose target is its own text shows only the URL."""
        url = "https://example.com/a"
        assert render(paragraph(text(url, href=url))) == url

    def test_labelled_link(self):
        """Test a labelled link renders as label and URL."""
        result = render(paragraph(text("See "), text("docs", href="https://example.com")))
        assert result == "See [docs](https://example.com)"

    def test_legacy_link_format(self):
        """Test the legacy format omits the closing parenthesis."""
        options = PLAIN.create_updated(legacy_link_format=True)
        result = render(paragraph(text("docs", href="https://example.com")), options=options)
        assert result == "[docs](https://example.com"

    def test_link_colour(self):
        """Test URLs are underlined cyan when colour is enabled."""
        url = "https://example.com"
        result = render(paragraph(text(url, href=url)), options=TerminalRendererOptions(colour=True))
        assert result == f"{UNDERLINE}{CYAN}{url}{RESET}"

    def test_inline_card(self):
        """Test an inline card renders its URL in parentheses."""
        card = {"type": "inlineCard", "attrs": {"url": "https://example.com/browse/ABC-1"}}
        assert render(paragraph(text("Blocked by "), card)) == "Blocked by (https://example.com/browse/ABC-1)"


@pytest.mark.unit
class TestLists:
    """Tests for list layout."""

    def test_bullet_list(self):
        """Test bullet items render one per line."""
        assert render(bullet_list(item("a"), item("b"))) == "- a\n- b"

    def test_nested_bullet_list(self):
        """Test a nested list is indented by two spaces per level."""
        inner = bullet_list(list_item(paragraph(text("b")), bullet_list(item("c"))))
        outer = bullet_list(list_item(paragraph(text("a")), inner))
        assert render(outer) == "- a\n  - b\n    - c"

    def test_ordered_list(self):
        """Test ordered items are numbered from one."""
        assert render(ordered_list(item("a"), item("b"))) == "1. a\n2. b"

    def test_ordered_list_start(self):
        """Test numbering starts at the list's order attribute."""
        assert render(ordered_list(item("a"), item("b"), order=9)) == "9. a\n10. b"

    def test_ordered_list_eleven_items(self):
        """Test numbering continues past single digits."""
        result = render(ordered_list(*[item(f"item {i}") for i in range(1, 12)]))
        lines = result.split("\n")
        assert lines[0] == "1. item 1"
        assert lines[8] == "9. item 9"
        assert lines[10] == "11. item 11"

    def test_ordered_item_continuation_padding(self):
        """Test later lines of an item are padded to the width of its number."""
        multi = list_item(paragraph(text("first")), paragraph(text("second")))
        assert render(ordered_list(multi)) == "1. first\n second"

    def test_ordered_item_continuation_padding_two_digits(self):
        """Test item eleven pads continuation lines with two spaces."""
        multi = list_item(paragraph(text("first")), paragraph(text("second")))
        assert render(ordered_list(multi, order=11)) == "11. first\n  second"

    def test_ordered_item_embedded_newline(self):
        """Test a newline inside the text is padded too."""
        assert render(ordered_list(item("line one\nline two"))) == "1. line one\n line two"

    def test_nested_list_in_ordered_item(self):
        """Test a bullet list nested under a numbered item."""
        nested = list_item(paragraph(text("a")), bullet_list(item("b")))
        assert render(ordered_list(nested)) == "1. a\n  - b"

    def test_list_after_paragraph(self):
        """Test a list directly follows the preceding paragraph's line."""
        assert render(paragraph(text("Steps:")), bullet_list(item("a"))) == "Steps:\n- a"

    def test_list_item_outside_list(self):
        """Test a stray list item renders as a bullet."""
        assert render(item("solo")) == "- solo"

    def test_rule_in_bullet_item_is_continuation(self):
        """Test a rule inside a bullet item sits under the marker."""
        rule_item = list_item(paragraph(text("a")), {"type": "rule"})
        options = PLAIN.create_updated(rule_width=3)
        assert render(bullet_list(rule_item), options=options) == "- a\n  ---"

    def test_heading_first_in_ordered_item(self):
        """Test the number goes to the first paragraph, not a leading heading."""
        titled = list_item(heading(3, text("Title")), paragraph(text("body")))
        result = render(paragraph(text("Steps:")), ordered_list(titled))
        assert result == "Steps:\n ### Title\n1. body"

    def test_media_in_ordered_item_padding(self):
        """Test attachments in item ten are padded by two spaces."""
        attached = list_item(paragraph(text("see")), {"type": "mediaGroup", "content": [media()]})
        assert render(ordered_list(attached, order=10)) == "10. see\n  _file-goes-here_"


@pytest.mark.unit
class TestRulesAndMedia:
    """Tests for horizontal rules and media placeholders."""

    def test_rule_uses_width(self):
        """Test a rule spans the configured width."""
        options = PLAIN.create_updated(rule_width=10)
        result = render(paragraph(text("a")), {"type": "rule"}, paragraph(text("b")), options=options)
        assert result == "a\n\n----------\n\nb"

    def test_rule_char(self):
        """Test the rule character is configurable."""
        options = PLAIN.create_updated(rule_width=3, rule_char="=")
        assert render({"type": "rule"}, options=options) == "==="

    def test_picture_placeholder(self):
        """Test media with a size renders the picture placeholder."""
        result = render({"type": "mediaSingle", "content": [media(width=640, height=480)]})
        assert result == "_picture-goes-here_"

    def test_file_placeholders(self):
        """Test every attachment in a group gets its own placeholder."""
        result = render({"type": "mediaGroup", "content": [media(), media()]})
        assert result == "_file-goes-here_\n\n_file-goes-here_"

    def test_empty_media_group(self):
        """Test an empty media group renders nothing."""
        assert render(paragraph(text("a")), {"type": "mediaGroup", "content": []}) == "a"


@pytest.mark.unit
class TestUnknownContent:
    """Tests for the raw JSON fallback."""

    def test_unknown_node_renders_json(self, caplog):
        """Test an unsupported node is shown as indented JSON with a warning."""
        raw = {"type": "panel", "content": []}
        with caplog.at_level("WARNING", logger="jiraterm.renderers.terminal"):
            result = render(paragraph(text("a")), raw)

        assert result == "a\n\n" + json.dumps(raw, indent=2)
        assert "panel" in caplog.text

    def test_unknown_node_does_not_stop_rendering(self):
        """Test content after an unknown node is still rendered."""
        result = render({"type": "table", "content": []}, paragraph(text("after")))
        assert result.endswith("\n\nafter")


@pytest.mark.unit
class TestRendererApi:
    """Tests for the renderer class itself."""

    def test_render_ast_directly(self):
        """Test rendering a hand-built document."""
        document = Document(children=(Heading(level=1, content=(Text("Title"),)),))
        assert TerminalRenderer(PLAIN).render_to_string(document) == "# Title"

    def test_rejects_wrong_options_type(self):
        """Test passing foreign options fails fast."""
        with pytest.raises(TypeError):
            TerminalRenderer(options={"colour": False})

    def test_render_to_stream(self):
        """Test rendering into a text stream."""
        stream = io.StringIO()
        TerminalRenderer(PLAIN).render(AdfParser().parse(doc(paragraph(text("hi")))), stream)
        assert stream.getvalue() == "hi"

    def test_render_to_path(self, tmp_path):
        """Test rendering into a file."""
        target = tmp_path / "out.txt"
        TerminalRenderer(PLAIN).render(AdfParser().parse(doc(paragraph(text("hi")))), target)
        assert target.read_text(encoding="utf-8") == "hi"

    def test_renderer_is_reusable(self):
        """Test output does not leak between renders."""
        renderer = TerminalRenderer(PLAIN)
        document = AdfParser().parse(doc(paragraph(text("once"))))
        assert renderer.render_to_string(document) == renderer.render_to_string(document) == "once"

    @pytest.mark.parametrize("kwargs", [{"rule_width": 0}, {"rule_char": ""}, {"rule_char": "ab"}])
    def test_invalid_options(self, kwargs):
        """Test option validation."""
        with pytest.raises(ValueError):
            TerminalRendererOptions(**kwargs)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestBlankLineNormalization:
    """Property-based tests for blank-line normalization."""

    @given(st.text(alphabet="ab \n", max_size=60))
    def test_idempotent(self, value):
        """Property: normalizing twice changes nothing."""
        once = normalize_blank_lines(value)
        assert normalize_blank_lines(once) == once

    @given(st.text(alphabet="ab \n", max_size=60))
    def test_no_triple_newlines(self, value):
        """Property: the result never holds three consecutive newlines."""
        assert "\n\n\n" not in normalize_blank_lines(value)

    @given(st.lists(st.sampled_from(["para", "rule", "empty", "list"]), max_size=8))
    def test_rendered_output_is_normalized(self, kinds):
        """Property: rendered documents are trimmed and normalized."""
        builders = {
            "para": lambda: paragraph(text("p")),
            "rule": lambda: {"type": "rule"},
            "empty": lambda: paragraph(),
            "list": lambda: bullet_list(item("x")),
        }
        result = render(*[builders[kind]() for kind in kinds], options=PLAIN.create_updated(rule_width=4))
        assert result == result.strip()
        assert "\n\n\n" not in result


NODE_KINDS = [
    "text",
    "inlineCard",
    "heading",
    "paragraph",
    "codeBlock",
    "bulletList",
    "orderedList",
    "listItem",
    "mediaSingle",
    "mediaGroup",
    "media",
    "rule",
    "panel",
    None,
]
ATTR_NAMES = ["level", "order", "url", "href", "width", "height", "language", "id", "type"]

junk_values = st.one_of(st.none(), st.booleans(), st.integers(), st.floats(), st.text(max_size=6))
junk_attrs = st.one_of(junk_values, st.dictionaries(st.sampled_from(ATTR_NAMES), junk_values, max_size=4))
junk_marks = st.one_of(
    junk_values,
    st.lists(
        st.one_of(junk_values, st.fixed_dictionaries({"type": st.sampled_from(["link", "strong"]), "attrs": junk_attrs})),
        max_size=3,
    ),
)
leaf_nodes = st.one_of(
    junk_values,
    st.fixed_dictionaries(
        {"type": st.sampled_from(NODE_KINDS), "text": junk_values, "attrs": junk_attrs, "marks": junk_marks}
    ),
)
any_nodes = st.recursive(
    leaf_nodes,
    lambda children: st.fixed_dictionaries(
        {
            "type": st.sampled_from(NODE_KINDS),
            "attrs": junk_attrs,
            "content": st.one_of(junk_values, st.lists(children, max_size=4)),
        }
    ),
    max_leaves=20,
)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestArbitraryDocuments:
    """Property-based tests over arbitrary trees inside a valid envelope."""

    @settings(max_examples=200, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    @given(st.lists(any_nodes, max_size=5), st.booleans())
    def test_render_never_raises(self, content, colour):
        """Property: any content under a doc envelope renders to trimmed text."""
        options = TerminalRendererOptions(colour=colour, rule_width=4)
        result = render_description({"type": "doc", "content": content}, options)
        assert isinstance(result, str)
        assert result == result.strip()
        assert "\n\n\n" not in result
