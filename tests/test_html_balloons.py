import pytest

from chatexport.balloons import AppMessage, CollaborationMessage, MusicMessage, URLMessage
from chatexport.html_balloons import HtmlBalloonFormatter


def full_app() -> AppMessage:
    return AppMessage(
        image="image",
        url="url",
        title="title",
        subtitle="subtitle",
        caption="caption",
        subcaption="subcaption",
        trailing_caption="trailing_caption",
        trailing_subcaption="trailing_subcaption",
        app_name="app_name",
        ldtext="ldtext",
    )


FULL_APP_HTML = (
    '<a href="url"><div class="app_header"><img src="image"><div class="name">app_name</div>'
    '<div class="image_title">title</div><div class="image_subtitle">subtitle</div>'
    '<div class="ldtext">ldtext</div></div><div class="app_footer">'
    '<div class="caption">caption</div><div class="subcaption">subcaption</div>'
    '<div class="trailing_caption">trailing_caption</div>'
    '<div class="trailing_subcaption">trailing_subcaption</div></div></a>'
)


def full_url() -> URLMessage:
    return URLMessage(
        title="title",
        summary="summary",
        url="url",
        original_url="original_url",
        item_type="item_type",
        images=("images",),
        icons=("icons",),
        site_name="site_name",
        placeholder=False,
    )


def test_format_url():
    expected = (
        '<a href="url"><div class="app_header"><img src="images" loading="lazy", '
        "onerror=\"this.style.display='none'\"><div class=\"name\">site_name</div></div>"
        '<div class="app_footer"><div class="caption"><xmp>title</xmp></div>'
        '<div class="subcaption"><xmp>summary</xmp></div></div></a>'
    )
    assert HtmlBalloonFormatter().format_url(full_url()) == expected


def test_format_url_no_lazy():
    expected = (
        '<a href="url"><div class="app_header"><img src="images" '
        "onerror=\"this.style.display='none'\"><div class=\"name\">site_name</div></div>"
        '<div class="app_footer"><div class="caption"><xmp>title</xmp></div>'
        '<div class="subcaption"><xmp>summary</xmp></div></div></a>'
    )
    assert HtmlBalloonFormatter(no_lazy=True).format_url(full_url()) == expected


def test_format_url_original_only_uses_it_as_name_and_link():
    balloon = URLMessage(original_url="orig")
    expected = '<a href="orig"><div class="app_header"><div class="name">orig</div></div></a>'
    assert HtmlBalloonFormatter().format_url(balloon) == expected


def test_format_url_without_link_has_no_anchor():
    balloon = URLMessage(title="title")
    expected = (
        '<div class="app_header"></div><div class="app_footer">'
        '<div class="caption"><xmp>title</xmp></div></div>'
    )
    assert HtmlBalloonFormatter().format_url(balloon) == expected


def test_format_music():
    balloon = MusicMessage(
        url="url",
        preview="preview",
        artist="artist",
        album="album",
        track_name="track_name",
    )
    expected = (
        '<div class="app_header"><div class="name">track_name</div>'
        '<audio controls src="preview" </audio></div><a href="url"><div class="app_footer">'
        '<div class="caption">artist</div><div class="subcaption">album</div></div></a>'
    )
    assert HtmlBalloonFormatter().format_music(balloon) == expected


def test_format_music_empty():
    assert HtmlBalloonFormatter().format_music(MusicMessage()) == '<div class="app_header"></div>'


def test_format_collaboration():
    balloon = CollaborationMessage(
        original_url="original_url",
        url="url",
        title="title",
        creation_date=0.0,
        bundle_id="bundle_id",
        app_name="app_name",
    )
    expected = (
        '<div class="app_header"><div class="name">app_name</div></div><a href="url">'
        '<div class="app_footer"><div class="caption">title</div>'
        '<div class="subcaption">url</div></div></a>'
    )
    assert HtmlBalloonFormatter().format_collaboration(balloon) == expected


def test_format_collaboration_bundle_id_fallback():
    balloon = CollaborationMessage(bundle_id="bundle_id")
    expected = '<div class="app_header"><div class="name">bundle_id</div></div>'
    assert HtmlBalloonFormatter().format_collaboration(balloon) == expected


@pytest.mark.parametrize("method", ["format_apple_pay", "format_fitness", "format_slideshow"])
def test_format_app_balloons(method):
    formatter = HtmlBalloonFormatter()
    assert getattr(formatter, method)(full_app()) == FULL_APP_HTML


def test_format_generic_app():
    assert (
        HtmlBalloonFormatter().format_generic_app(full_app(), "bundle_id", "") == FULL_APP_HTML
    )


def test_format_generic_app_uses_bundle_id_and_attachment():
    balloon = AppMessage(title="title")
    actual = HtmlBalloonFormatter().format_generic_app(balloon, "bundle_id", '<img src="a.png">')
    expected = (
        '<div class="app_header"><img src="a.png"><div class="name">bundle_id</div>'
        '<div class="image_title">title</div></div>'
    )
    assert actual == expected


def test_apple_pay_default_name():
    actual = HtmlBalloonFormatter().format_apple_pay(AppMessage())
    assert actual == '<div class="app_header"><div class="name">Apple Pay</div></div>'


def test_format_handwriting():
    actual = HtmlBalloonFormatter().format_handwriting(AppMessage())
    assert actual == "Handwritten messages are not yet supported!"


def test_format_url_fallback():
    expected = (
        '<a href="https://example.com"><div class="app_header"><div class="name">'
        'https://example.com</div></div><div class="app_footer"><div class="caption">'
        "https://example.com</div></div></a>"
    )
    assert HtmlBalloonFormatter().format_url_fallback("https://example.com") == expected