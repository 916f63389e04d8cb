import pytest

from folio.exceptions import InvalidSlugError
from folio.markdown.renderer import render_markdown


def test_relative_image_is_scoped_under_post_slug():
    html = render_markdown("![alt](photo.png)", "hello")

    assert 'src="/blog-images/hello/photo.png"' in html
    assert 'alt="alt"' in html


def test_absolute_image_url_is_left_alone():
    html = render_markdown("![alt](https://example.com/photo.png)", "hello")

    assert 'src="https://example.com/photo.png"' in html
    assert "/blog-images/" not in html


@pytest.mark.parametrize(
    "src",
    [
        "http://example.com/a.png",
        "//cdn.example.com/a.png",
        "data:image/png;base64,iVBORw0KGgo=",
    ],
)
def test_other_external_sources_are_left_alone(src):
    html = render_markdown(f"![x]({src})", "hello")

    assert f'src="{src}"' in html


def test_attribute_values_equal_to_their_name_are_kept():
    html = render_markdown('![title](t.png "title")', "hello")

    assert 'alt="title"' in html
    assert 'title="title"' in html


def test_reference_style_images_and_titles_are_rewritten():
    text = '![one][pic] and ![two](two.gif "Two")\n\n[pic]: one.jpg\n'

    html = render_markdown(text, "gallery")

    assert 'src="/blog-images/gallery/one.jpg"' in html
    assert 'src="/blog-images/gallery/two.gif"' in html
    assert 'title="Two"' in html


def test_nested_relative_paths_are_kept():
    html = render_markdown("![d](diagrams/flow.svg)", "post")

    assert 'src="/blog-images/post/diagrams/flow.svg"' in html


def test_custom_asset_root():
    html = render_markdown("![a](a.png)", "post", asset_root="/static/")

    assert 'src="/static/post/a.png"' in html


def test_raw_html_block_is_preserved_verbatim():
    text = 'Intro\n\n<div class="callout">Raw <b>HTML</b> here</div>\n\nOutro\n'

    html = render_markdown(text, "hello")

    assert '<div class="callout">Raw <b>HTML</b> here</div>' in html
    assert "&lt;div" not in html


def test_inline_raw_html_is_preserved():
    html = render_markdown('Some <span class="hl">marked</span> text', "hello")

    assert '<span class="hl">marked</span>' in html


def test_raw_img_tags_are_not_rewritten():
    html = render_markdown('<img src="raw.png">', "hello")

    assert '<img src="raw.png">' in html
    assert "/blog-images/" not in html


def test_emoji_shortcode_becomes_glyph():
    html = render_markdown("Launching soon :rocket:", "hello")

    assert "\U0001F680" in html
    assert ":rocket:" not in html


def test_unknown_emoji_shortcode_is_left_as_text():
    html = render_markdown("nothing :definitely-not-an-emoji: here", "hello")

    assert ":definitely-not-an-emoji:" in html


def test_standard_markdown_constructs():
    text = (
        "# Title\n\n"
        "- one\n- two\n\n"
        "*em* and **strong** with a [link](https://example.com)\n\n"
        "```python\nprint('hi')\n```\n"
    )

    html = render_markdown(text, "hello")

    assert "<h1>Title</h1>" in html
    assert "<li>one</li>" in html
    assert "<em>em</em>" in html
    assert "<strong>strong</strong>" in html
    assert '<a href="https://example.com">link</a>' in html
    assert "<pre><code" in html
    assert "print(&#x27;hi&#x27;)" in html or "print('hi')" in html


def test_image_syntax_inside_code_is_not_rewritten():
    html = render_markdown("`![x](y.png)`", "hello")

    assert "<code>![x](y.png)</code>" in html


def test_malformed_markdown_degrades_to_text():
    html = render_markdown("**unclosed emphasis and [broken link(", "hello")

    assert "unclosed emphasis" in html
    assert "[broken link(" in html


def test_empty_input_renders_empty_string():
    assert render_markdown("", "hello") == ""


def test_render_is_deterministic():
    text = "# Hi :smile:\n\n![a](a.png)\n\n<div>raw</div>\n"

    assert render_markdown(text, "same") == render_markdown(text, "same")


def test_renders_are_independent_per_slug():
    first = render_markdown("![a](a.png)", "first")
    second = render_markdown("![a](a.png)", "second")

    assert "/blog-images/first/a.png" in first
    assert "/blog-images/second/a.png" in second


@pytest.mark.parametrize("slug", ["", "../escape", "a/b", None, "with space"])
def test_invalid_slug_is_rejected(slug):
    with pytest.raises(InvalidSlugError):
        render_markdown("![a](a.png)", slug)
