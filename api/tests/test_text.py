from app.posting.text import (
    html_to_text,
    make_excerpt,
    strip_block_delimiters,
    strip_shortcodes,
    trim_words,
)


def test_html_to_text_strips_tags_and_decodes_entities():
    assert html_to_text("  <b>Tom &amp; Jerry</b>&#8217;s ") == "Tom & Jerry’s"


def test_html_to_text_empty():
    assert html_to_text("") == ""


def test_strip_shortcodes_self_closing():
    assert strip_shortcodes('Before [gallery ids="1,2"] after') == "Before  after"
    assert strip_shortcodes('[audio src="a.mp3" /]Listen') == "Listen"


def test_strip_shortcodes_enclosing_drops_content():
    text = 'A [caption id="x"]<img src="a.png"> Cap[/caption] B'
    assert strip_shortcodes(text) == "A  B"


def test_strip_shortcodes_keeps_escaped_form():
    assert strip_shortcodes("Use [[gallery]] to embed") == "Use [gallery] to embed"


def test_strip_shortcodes_ignores_numeric_brackets():
    assert strip_shortcodes("See note [1].") == "See note [1]."


def test_strip_block_delimiters():
    content = '<!-- wp:paragraph {"align":"center"} --><p>Hi</p><!-- /wp:paragraph -->'
    assert strip_block_delimiters(content) == "<p>Hi</p>"


def test_trim_words_appends_marker_only_when_truncated():
    assert trim_words("one two three", 2, " ...") == "one two ..."
    assert trim_words("one  two\n\tthree", 3, " ...") == "one two three"


def test_make_excerpt_truncates_to_word_limit():
    words = [f"word{i}" for i in range(100)]
    content = "[intro]<p>" + " ".join(words) + "</p>"

    excerpt = make_excerpt(content, 55, " ...")

    assert excerpt == " ".join(words[:55]) + " ..."
    assert len(excerpt.split()) == 56


def test_make_excerpt_escapes_cdata_terminator():
    assert make_excerpt("<p>See ]]> here</p>", 55, " ...") == "See ]]&gt; here"


def test_make_excerpt_applies_filters_in_order():
    excerpt = make_excerpt("<p>hello</p>", 55, " ...", filters=[str.upper, lambda s: s + " world"])
    assert excerpt == "HELLO world"


def test_make_excerpt_strips_tags_decoded_from_entities():
    assert make_excerpt("<p>&lt;b&gt;bold&lt;/b&gt; text</p>", 55, " ...") == "bold text"
