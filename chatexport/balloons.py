"""Custom message balloon payloads and the interface that renders them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class URLMessage:
    """A link preview balloon."""

    title: str | None = None
    summary: str | None = None
    url: str | None = None
    original_url: str | None = None
    item_type: str | None = None
    images: tuple[str, ...] = ()
    icons: tuple[str, ...] = ()
    site_name: str | None = None
    placeholder: bool = False

    def get_url(self) -> str | None:
        """The best available link for this preview."""
        return self.url if self.url is not None else self.original_url


@dataclass(frozen=True)
class MusicMessage:
    """An Apple Music share balloon."""

    url: str | None = None
    preview: str | None = None
    artist: str | None = None
    album: str | None = None
    track_name: str | None = None


@dataclass(frozen=True)
class CollaborationMessage:
    """A rich collaboration balloon."""

    original_url: str | None = None
    url: str | None = None
    title: str | None = None
    creation_date: float | None = None
    bundle_id: str | None = None
    app_name: str | None = None

    def get_url(self) -> str | None:
        """The best available link for this collaboration."""
        return self.url if self.url is not None else self.original_url


@dataclass(frozen=True)
class AppMessage:
    """A balloon sent by an iMessage app."""

    image: str | None = None
    url: str | None = None
    title: str | None = None
    subtitle: str | None = None
    caption: str | None = None
    subcaption: str | None = None
    trailing_caption: str | None = None
    trailing_subcaption: str | None = None
    app_name: str | None = None
    ldtext: str | None = None


class BalloonFormatter(ABC):
    """Renders custom balloons into an output format."""

    @abstractmethod
    def format_url(self, balloon: URLMessage) -> str:
        """Render a link preview."""

    @abstractmethod
    def format_music(self, balloon: MusicMessage) -> str:
        """Render an Apple Music share."""

    @abstractmethod
    def format_collaboration(self, balloon: CollaborationMessage) -> str:
        """Render a rich collaboration message."""

    @abstractmethod
    def format_handwriting(self, balloon: AppMessage) -> str:
        """Render a handwritten note."""

    @abstractmethod
    def format_apple_pay(self, balloon: AppMessage) -> str:
        """Render an Apple Pay message."""

    @abstractmethod
    def format_fitness(self, balloon: AppMessage) -> str:
        """Render a Fitness message."""

    @abstractmethod
    def format_slideshow(self, balloon: AppMessage) -> str:
        """Render a photo slideshow message."""

    @abstractmethod
    def format_generic_app(self, balloon: AppMessage, bundle_id: str, attachment_html: str) -> str:
        """Render a message from any other app."""