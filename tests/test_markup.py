"""Tests for markup sanitizing, stripping and texturizing helpers."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from waitlist_mail.utils.markup import escape_for_text  # noqa: E402
from waitlist_mail.utils.markup import sanitize_post_html  # noqa: E402
from waitlist_mail.utils.markup import strip_all_markup  # noqa: E402
from waitlist_mail.utils.texturize import texturize  # noqa: E402
from waitlist_mail.utils.texturize import texturize_text  # noqa: E402


class TestSanitizePostHtml:
    """Tests for sanitize_post_html function."""

    def test_empty_input(self) -> None:
        assert sanitize_post_html(None) == ''
        assert sanitize_post_html('') == ''

    def test_keeps_allowed_markup(self) -> None:
        html = '<p>Hello <strong>world</strong></p>'
        assert sanitize_post_html(html) == html

    def test_removes_script_with_content(self) -> None:
        result = sanitize_post_html('<p>Hello<script>alert(1)</script> world</p>')
        assert result == '<p>Hello world</p>'

    def test_removes_style_element_with_content(self) -> None:
        result = sanitize_post_html('<style>p { color: red }</style><p>Hi</p>')
        assert result == '<p>Hi</p>'

    def test_removes_event_attributes(self) -> None:
        assert sanitize_post_html('<p onclick="evil()">Hi</p>') == '<p>Hi</p>'

    def test_strips_disallowed_tag_keeps_text(self) -> None:
        result = sanitize_post_html('<form><label>Name</label></form>')
        assert '<form' not in result
        assert '<label' not in result
        assert 'Name' in result

    def test_drops_javascript_href(self) -> None:
        result = sanitize_post_html('<a href="javascript:alert(1)">x</a>')
        assert result == '<a>x</a>'

    def test_keeps_http_image(self) -> None:
        result = sanitize_post_html(
            '<img src="https://shop.test/a.png" alt="A" onerror="steal()">'
        )
        assert 'src="https://shop.test/a.png"' in result
        assert 'onerror' not in result

    def test_filters_css_properties(self) -> None:
        result = sanitize_post_html(
            '<span style="color: red; position: absolute">Red</span>'
        )
        assert 'color' in result
        assert 'position' not in result

    def test_removes_comments(self) -> None:
        assert sanitize_post_html('<p>Hi<!-- secret --></p>') == '<p>Hi</p>'


class TestStripAllMarkup:
    """Tests for strip_all_markup function."""

    def test_empty_input(self) -> None:
        assert strip_all_markup(None) == ''

    def test_removes_tags(self) -> None:
        assert strip_all_markup('<p>Hi <b>there</b></p>') == 'Hi there'

    def test_removes_script_content(self) -> None:
        assert strip_all_markup('<p>Hi</p><script>x()</script>') == 'Hi'

    def test_decodes_entities(self) -> None:
        assert strip_all_markup('Fish &amp; Chips') == 'Fish & Chips'

    def test_trims_whitespace(self) -> None:
        assert strip_all_markup('  <div>\n Hello \n</div>  ') == 'Hello'


class TestEscapeForText:
    """Tests for escape_for_text function."""

    def test_escapes_angle_brackets(self) -> None:
        assert escape_for_text('a<b>c') == 'a&lt;b&gt;c'

    def test_leaves_ampersands(self) -> None:
        assert escape_for_text('?a=1&b=2') == '?a=1&b=2'

    def test_empty_input(self) -> None:
        assert escape_for_text(None) == ''


class TestTexturize:
    """Tests for texturize and texturize_text functions."""

    def test_empty_input(self) -> None:
        assert texturize(None) == ''

    def test_apostrophe(self) -> None:
        assert texturize_text("It's back") == 'It’s back'

    def test_double_quotes(self) -> None:
        assert texturize_text('say "hi" now') == 'say “hi” now'

    def test_single_quotes(self) -> None:
        assert texturize_text("a 'word' here") == 'a ‘word’ here'

    def test_dashes(self) -> None:
        assert texturize_text('a -- b') == 'a — b'
        assert texturize_text('a---b') == 'a—b'
        assert texturize_text('1--2') == '1–2'
        assert texturize_text('a - b') == 'a – b'

    def test_keeps_punycode_hyphens(self) -> None:
        assert texturize_text('xn--bcher-kva') == 'xn--bcher-kva'

    def test_ellipsis_and_trademark(self) -> None:
        assert texturize_text('Widget (tm)...') == 'Widget ™…'

    def test_abbreviated_year(self) -> None:
        assert texturize_text("back in '99") == 'back in ’99'

    def test_primes(self) -> None:
        assert texturize_text('9\' 10"') == '9′ 10″'

    def test_multiplication(self) -> None:
        assert texturize_text('32x32 pixels') == '32×32 pixels'

    def test_leaves_tags_untouched(self) -> None:
        html = '<a href="it\'s--here" title="a...b">It\'s</a>'
        assert texturize(html) == '<a href="it\'s--here" title="a...b">It’s</a>'

    def test_skips_code_and_pre(self) -> None:
        html = "<p>It's</p><code>it's</code><pre>a -- b</pre><p>don't</p>"
        assert texturize(html) == (
            '<p>It’s</p><code>it\'s</code><pre>a -- b</pre><p>don’t</p>'
        )

    def test_nested_skip_tags(self) -> None:
        html = "<pre><code>it's</code> still 'raw'</pre> it's"
        assert texturize(html) == "<pre><code>it's</code> still 'raw'</pre> it’s"
