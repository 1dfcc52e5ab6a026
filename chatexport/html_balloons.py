"""Rendering of custom message balloons as HTML fragments."""

from __future__ import annotations

from chatexport.balloons import (
    AppMessage,
    BalloonFormatter,
    CollaborationMessage,
    MusicMessage,
    URLMessage,
)


def _div(css_class: str, content: str) -> str:
    return f'<div class="{css_class}">{content}</div>'


def _unsupported(kind: str) -> str:
    return f"{kind} messages are not yet supported!"


class HtmlBalloonFormatter(BalloonFormatter):
    """Formats app, link and media balloons into HTML."""

    def __init__(self, no_lazy: bool = False) -> None:
        self.no_lazy = no_lazy

    def format_url(self, balloon: URLMessage) -> str:
        """Render a link preview as a clickable card."""
        url = balloon.get_url()
        parts: list[str] = []

        if url is not None:
            parts.append(f'<a href="{url}">')

        parts.append('<div class="app_header">')
        for image in balloon.images:
            if self.no_lazy:
                parts.append(f"<img src=\"{image}\" onerror=\"this.style.display='none'\">")
            else:
                parts.append(
                    f"<img src=\"{image}\" loading=\"lazy\", "
                    f"onerror=\"this.style.display='none'\">"
                )

        if balloon.site_name is not None:
            parts.append(_div("name", balloon.site_name))
        elif url is not None:
            parts.append(_div("name", url))
        parts.append("</div>")

        if balloon.title is not None or balloon.summary is not None:
            parts.append('<div class="app_footer">')
            if balloon.title is not None:
                parts.append(_div("caption", f"<xmp>{balloon.title}</xmp>"))
            if balloon.summary is not None:
                parts.append(_div("subcaption", f"<xmp>{balloon.summary}</xmp>"))
            parts.append("</div>")

        if url is not None:
            parts.append("</a>")
        return "".join(parts)

    def format_music(self, balloon: MusicMessage) -> str:
        """Render an Apple Music share with an audio preview."""
        parts = ['<div class="app_header">']

        if balloon.track_name is not None:
            parts.append(_div("name", balloon.track_name))
        if balloon.preview is not None:
            parts.append(f'<audio controls src="{balloon.preview}" </audio>')
        parts.append("</div>")

        if balloon.url is not None:
            parts.append(f'<a href="{balloon.url}">')

        if balloon.artist is not None or balloon.album is not None:
            parts.append('<div class="app_footer">')
            if balloon.artist is not None:
                parts.append(_div("caption", balloon.artist))
            if balloon.album is not None:
                parts.append(_div("subcaption", balloon.album))
            parts.append("</div>")

        if balloon.url is not None:
            parts.append("</a>")
        return "".join(parts)

    def format_collaboration(self, balloon: CollaborationMessage) -> str:
        """Render a rich collaboration message."""
        parts = ['<div class="app_header">']

        if balloon.app_name is not None:
            parts.append(_div("name", balloon.app_name))
        elif balloon.bundle_id is not None:
            parts.append(_div("name", balloon.bundle_id))
        parts.append("</div>")

        if balloon.url is not None:
            parts.append(f'<a href="{balloon.url}">')

        link = balloon.get_url()
        if balloon.title is not None or link is not None:
            parts.append('<div class="app_footer">')
            if balloon.title is not None:
                parts.append(_div("caption", balloon.title))
            if link is not None:
                parts.append(_div("subcaption", link))
            parts.append("</div>")

        if balloon.url is not None:
            parts.append("</a>")
        return "".join(parts)

    def format_handwriting(self, balloon: AppMessage) -> str:
        """Handwritten notes cannot be rendered; return a notice saying so."""
        return _unsupported("Handwritten")

    def format_apple_pay(self, balloon: AppMessage) -> str:
        """Render an Apple Pay message."""
        return self._balloon_to_html(balloon, "Apple Pay", "")

    def format_fitness(self, balloon: AppMessage) -> str:
        """Render a Fitness message."""
        return self._balloon_to_html(balloon, "Fitness", "")

    def format_slideshow(self, balloon: AppMessage) -> str:
        """Render a photo slideshow message."""
        return self._balloon_to_html(balloon, "Slideshow", "")

    def format_generic_app(self, balloon: AppMessage, bundle_id: str, attachment_html: str) -> str:
        """Render a message from any other app, using the attachment when there is no image."""
        return self._balloon_to_html(balloon, bundle_id, attachment_html)

    def format_url_fallback(self, text: str) -> str:
        """Render a link whose preview payload is missing, from the message text alone."""
        return (
            f'<a href="{text}">'
            f'<div class="app_header"><div class="name">{text}</div></div>'
            f'<div class="app_footer"><div class="caption">{text}</div></div></a>'
        )

    def _balloon_to_html(self, balloon: AppMessage, bundle_id: str, attachment_html: str) -> str:
        parts: list[str] = []
        if balloon.url is not None:
            parts.append(f'<a href="{balloon.url}">')
        parts.append('<div class="app_header">')

        if balloon.image is not None:
            parts.append(f'<img src="{balloon.image}">')
        elif attachment_html:
            parts.append(attachment_html)

        parts.append(_div("name", balloon.app_name if balloon.app_name is not None else bundle_id))

        if balloon.title is not None:
            parts.append(_div("image_title", balloon.title))
        if balloon.subtitle is not None:
            parts.append(_div("image_subtitle", balloon.subtitle))
        if balloon.ldtext is not None:
            parts.append(_div("ldtext", balloon.ldtext))
        parts.append("</div>")

        footer = [
            ("caption", balloon.caption),
            ("subcaption", balloon.subcaption),
            ("trailing_caption", balloon.trailing_caption),
            ("trailing_subcaption", balloon.trailing_subcaption),
        ]
        present = [(css, value) for css, value in footer if value is not None]
        if present:
            parts.append('<div class="app_footer">')
            parts.extend(_div(css, value) for css, value in present)
            parts.append("</div>")

        if balloon.url is not None:
            parts.append("</a>")
        return "".join(parts)