"""Building blocks of an HTML export document and the files that hold it."""

from __future__ import annotations

import sys
from pathlib import Path

from chatexport.naming import ME, UNKNOWN

HEADER = '<html>\n<meta charset="UTF-8">'
FOOTER = "</html>"

_EXPRESSIVES = {
    "Confetti": "Sent with Confetti",
    "Echo": "Sent with Echo",
    "Fireworks": "Sent with Fireworks",
    "Balloons": "Sent with Balloons",
    "Heart": "Sent with Heart",
    "Lasers": "Sent with Lasers",
    "ShootingStar": "Sent with Shooting Start",
    "Sparkles": "Sent with Sparkles",
    "Spotlight": "Sent with Spotlight",
    "Slam": "Sent with Slam",
    "Loud": "Sent with Loud",
    "Gentle": "Sent with Gentle",
    "InvisibleInk": "Sent with Invisible Ink",
}


def add_line(text: str, part: str, pre: str = "", post: str = "") -> str:
    """Append ``part`` wrapped in ``pre`` and ``post`` as a new line; empty parts are skipped."""
    if not part:
        return text
    return f"{text}{pre}{part}{post}\n"


def edited_to_html(timestamp: str, text: str, last: bool) -> str:
    """One row of an edit history table; the final version goes in the footer."""
    tag = "tfoot" if last else "tbody"
    return (
        f'<{tag}><tr><td><span class="timestamp">{timestamp}</span></td>'
        f"<td>{text}</td></tr></{tag}>"
    )


def format_announcement(timestamp: str, who: str, group_title: str | None) -> str:
    """Render a conversation rename notice."""
    if who == ME:
        who = "You"
    title = group_title if group_title is not None else UNKNOWN
    return (
        f'\n<div class ="announcement"><p><span class="timestamp">{timestamp}</span> '
        f"{who} named the conversation <b>{title}</b></p></div>\n"
    )


def format_deleted(timestamp: str, is_from_me: bool) -> str:
    """Render a notice that a message was unsent."""
    who = "You" if is_from_me else "They"
    return (
        f'<div class ="announcement"><p><span class="timestamp">{timestamp}</span> '
        f"{who} deleted a message.</p></div>"
    )


def format_time(date: str, read_after: str | None, is_from_me: bool) -> str:
    """The timestamp line of a message, with how long it took to be read."""
    if read_after:
        who = "them" if is_from_me else "you"
        return f"{date} (Read by {who} after {read_after})"
    return date


def format_reaction(reaction: str, who: str, added: bool) -> str:
    """Render a tapback; removed tapbacks render as an empty string."""
    if not added:
        return ""
    return f'<span class="reaction"><b>{reaction}</b> by {who}</span>'


def format_sticker(image_html: str | None, who: str) -> str:
    """Render a sticker placed on a message, or a note that it is missing."""
    if image_html is None:
        return f'<span class="reaction">Sticker from {who} not found!</span>'
    return f'{image_html}<span class="reaction"> from {who}</span>'


def expressive_text(effect: str | None) -> str:
    """Describe a send effect; unknown effects are shown as given."""
    if not effect:
        return ""
    return _EXPRESSIVES.get(effect, effect)


def format_shareplay() -> str:
    """The text shown for an ended SharePlay session."""
    return "SharePlay Message Ended"


def write_to_file(path: Path, text: str) -> None:
    """Append text to a file, creating it when missing; failures are reported on stderr."""
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as why:
        print(f"Unable to write to {path}: {why}", file=sys.stderr)


def write_headers(path: Path, style: str) -> None:
    """Write the document opening and the style sheet."""
    write_to_file(path, HEADER)
    write_to_file(path, "<style>\n")
    write_to_file(path, style)
    write_to_file(path, "\n</style>")


def write_footer(path: Path) -> None:
    """Close the document."""
    write_to_file(path, FOOTER)