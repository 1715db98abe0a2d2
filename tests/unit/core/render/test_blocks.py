"""Unit tests for core/render/blocks.py"""

import pytest

from markshare.core.models import (
    BlockType,
    Blockquote,
    CodeBlock,
    Header,
    HorizontalRule,
    Paragraph,
)
from markshare.core.render.blocks import convert_to_html, is_horizontal_rule, parse_blocks


@pytest.mark.parametrize("level", range(1, 7))
def test_headers_levels(level):
    """One to six hashes produce the matching heading level."""
    assert convert_to_html("#" * level + " Title") == f"<h{level}>Title</h{level}>\n"


def test_header_trailing_hashes_are_stripped():
    """Closing hashes are not part of the heading text."""
    assert convert_to_html("## Hello ##") == "<h2>Hello</h2>\n"


def test_header_without_space():
    """A space after the hashes is not required."""
    assert convert_to_html("#NotAHeader") == "<h1>NotAHeader</h1>\n"


def test_seven_hashes_is_a_paragraph():
    """Seven hashes are not a heading and the line is still consumed."""
    assert convert_to_html("####### Seven\nnext") == "<p>####### Seven next</p>\n"


def test_paragraph_lines_are_joined():
    """Consecutive lines form one paragraph joined by a space."""
    assert convert_to_html("Hello\n   world  ") == "<p>Hello world</p>\n"


def test_paragraph_hard_break_is_kept():
    """A line ending in two spaces keeps a <br> before the next line."""
    assert convert_to_html("one  \ntwo") == "<p>one<br>\ntwo</p>\n"


def test_blank_lines_split_paragraphs():
    """Blank lines separate paragraphs and produce no output of their own."""
    assert convert_to_html("a\n\n\nb") == "<p>a</p>\n<p>b</p>\n"


@pytest.mark.parametrize("markdown", ["", "\n\n", "   \n\t\n"])
def test_blank_input_renders_empty(markdown):
    """Empty or whitespace-only input gives an empty body."""
    assert convert_to_html(markdown) == ""


def test_paragraph_interrupted_by_constructs():
    """Headers, rules, lists and quotes end a paragraph without a blank line."""
    html = convert_to_html("text\n# H\nmore\n---\nintro:\n- a\nlead\n> q")
    assert html == (
        "<p>text</p>\n<h1>H</h1>\n<p>more</p>\n<hr>\n<p>intro:</p>\n"
        "<ul>\n<li>a</li>\n</ul>\n<p>lead</p>\n<blockquote><p>q</p>\n</blockquote>\n"
    )


def test_paragraph_interrupted_by_table():
    """A line followed by a delimiter row starts a table, not a paragraph line."""
    html = convert_to_html("intro\n| A |\n|---|\n| 1 |")
    assert html.startswith("<p>intro</p>\n<table>")


def test_fenced_code_with_language():
    """The info string becomes a language class."""
    assert convert_to_html("```swift\nlet x = 1\n```") == (
        '<pre><code class="language-swift">let x = 1</code></pre>\n'
    )


def test_fenced_code_is_escaped_and_not_formatted():
    """Code content is HTML-escaped and skipped by inline formatting."""
    html = convert_to_html("```\n<div>**x**</div>\n  indented\n```")
    assert html == "<pre><code>&lt;div&gt;**x**&lt;/div&gt;\n  indented</code></pre>\n"


def test_unterminated_fence_runs_to_end():
    """A fence with no closing line takes the rest of the input."""
    assert convert_to_html("```\ncode\n# not a header") == (
        "<pre><code>code\n# not a header</code></pre>\n"
    )


def test_blockquote_lines_join():
    """Quoted lines are parsed as one nested paragraph."""
    assert convert_to_html("> Line 1\n> Line 2") == "<blockquote><p>Line 1 Line 2</p>\n</blockquote>\n"


def test_blockquote_nested():
    """A second > level nests another blockquote."""
    html = convert_to_html("> Outer\n> > Inner")
    assert html == (
        "<blockquote><p>Outer</p>\n<blockquote><p>Inner</p>\n</blockquote>\n</blockquote>\n"
    )


def test_blockquote_blank_line_continues_when_quote_resumes():
    """A blank line between quoted lines stays inside the quote."""
    html = convert_to_html("> a\n\n> b")
    assert html == "<blockquote><p>a</p>\n<p>b</p>\n</blockquote>\n"


def test_blockquote_ends_at_blank_line():
    """A blank line followed by unquoted text closes the quote."""
    assert convert_to_html("> a\n\nb") == "<blockquote><p>a</p>\n</blockquote>\n<p>b</p>\n"


def test_blockquote_contains_other_blocks():
    """Quote content goes through the full block parser."""
    html = convert_to_html("> # Title\n> - item")
    assert html == "<blockquote><h1>Title</h1>\n<ul>\n<li>item</li>\n</ul>\n</blockquote>\n"


@pytest.mark.parametrize("line", ["---", "***", "___", "_ _ _", "  - - - -", "*****"])
def test_horizontal_rule_detection(line):
    """Three or more of one rule character, spaces allowed."""
    assert is_horizontal_rule(line)


@pytest.mark.parametrize("line", ["--", "-*-", "--- x", "", "==="])
def test_not_horizontal_rule(line):
    """Mixed characters, too few characters or other text are not rules."""
    assert not is_horizontal_rule(line)


def test_spaced_dashes_are_a_list():
    """'- - -' is read as a list item because lists are checked first."""
    assert convert_to_html("- - -").startswith("<ul>")


def test_rule_renders():
    """A rule line emits <hr>."""
    assert convert_to_html("***") == "<hr>\n"


def test_crlf_line_endings():
    """Windows line endings are treated like plain newlines."""
    assert convert_to_html("# A\r\nB\r\n") == "<h1>A</h1>\n<p>B</p>\n"


def test_parse_blocks_types():
    """parse_blocks returns typed blocks in document order."""
    blocks = parse_blocks(["# H", "", "para", "---", "```py", "x", "```", "> q"])
    assert [type(b) for b in blocks] == [Header, Paragraph, HorizontalRule, CodeBlock, Blockquote]
    assert blocks[0].level == 1
    assert blocks[3].language == "py"
    assert blocks[3].lines == ["x"]
    assert blocks[4].blocks[0].type is BlockType.paragraph


def test_placeholder_line_becomes_block():
    """A line equal to a known placeholder is its own block and emitted bare."""
    token = "XTHINKINGBLOCKabcX0XTHINKINGBLOCKX"
    blocks = parse_blocks(["intro", token, "outro"], {token})
    assert [b.type for b in blocks] == [BlockType.paragraph, BlockType.thinking, BlockType.paragraph]
    assert convert_to_html(f"intro\n{token}\noutro", {token}) == f"<p>intro</p>\n{token}\n<p>outro</p>\n"


def test_unknown_placeholder_is_text():
    """Without the placeholder set the token is ordinary paragraph text."""
    token = "XTHINKINGBLOCKabcX0XTHINKINGBLOCKX"
    assert convert_to_html(token) == f"<p>{token}</p>\n"


def test_sample_document(sample_md):
    """The sample document renders every block type once."""
    html = convert_to_html(sample_md)
    for fragment in (
        "<h1>Heading 1</h1>",
        "<p>A paragraph with <strong>bold</strong> text.</p>",
        "<h2>Heading 2</h2>",
        "<li>item one</li>",
        '<li class="task-list-item"><input type="checkbox" checked disabled> item two</li>',
        '<pre><code class="language-python">print(&quot;hello&quot;)</code></pre>',
        '<th style="text-align: left">Name</th>',
        '<td style="text-align: right">10</td>',
        "<blockquote><p>quoted <em>text</em></p>\n</blockquote>",
        "<hr>",
        "<p>Footer paragraph.</p>",
    ):
        assert fragment in html


@pytest.mark.parametrize("text", [
    "just words",
    "a < b\nand c & d",
    'quote "this"\n   then more\nthen end',
])
def test_plain_text_is_one_escaped_paragraph(text):
    """Text with no syntax becomes one escaped paragraph with newlines as spaces."""
    expected = " ".join(line.strip() for line in text.split("\n"))
    expected = expected.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
    assert convert_to_html(text) == f"<p>{expected}</p>\n"


def test_emphasis_spans_hard_broken_lines():
    """Bold and italic still match across a hard break inside a paragraph."""
    assert convert_to_html("**first line  \nsecond line**") == (
        "<p><strong>first line<br>\nsecond line</strong></p>\n"
    )
    assert convert_to_html("*one  \ntwo*") == "<p><em>one<br>\ntwo</em></p>\n"
