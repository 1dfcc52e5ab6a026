"""Copying attachments into an export and embedding them in HTML."""

from __future__ import annotations

import os
import shutil
import sys
import uuid
from enum import Enum
from pathlib import Path

from chatexport.converter import Converter, heic_to_jpeg
from chatexport.errors import ExportError
from chatexport.naming import ATTACHMENTS_DIR

_HEIC_EXTENSIONS = frozenset({"heic", "HEIC"})


class MediaKind(Enum):
    """The broad kind of media an attachment holds."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    TEXT = "text"
    APPLICATION = "application"
    UNKNOWN = "unknown"
    OTHER = "other"


class AttachmentError(ExportError):
    """An attachment could not be located on disk."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(filename)


def resolve_attachment_path(path: str) -> str:
    """Expand a leading ``~`` component of an attachment path to the home directory."""
    parts = Path(path).parts
    if parts and parts[0] == "~":
        return path.replace("~", str(Path.home()))
    return path


def media_tag(
    embed_path: str,
    kind: MediaKind,
    media_type: str,
    filename: str,
    no_lazy: bool,
) -> str:
    """Build the HTML element that embeds or links to an attachment."""
    if kind is MediaKind.IMAGE:
        if no_lazy:
            return f'<img src="{embed_path}">'
        return f'<img src="{embed_path}" loading="lazy">'
    if kind is MediaKind.VIDEO:
        # The source tag is duplicated so players that reject the type still load it.
        return (
            f'<video controls> <source src="{embed_path}" type="{media_type}"> '
            f'<source src="{embed_path}"> </video>'
        )
    if kind is MediaKind.AUDIO:
        return f'<audio controls src="{embed_path}" type="{media_type}" </audio>'
    if kind in (MediaKind.TEXT, MediaKind.APPLICATION):
        return f'<a href="file://{embed_path}">Click to download {filename}</a>'
    if kind is MediaKind.UNKNOWN:
        return (
            f"<p>Unknown attachment type: {embed_path}</p> "
            f'<a href="file://{embed_path}">Download</a>'
        )
    return f"<p>Unable to embed {media_type} attachments: {embed_path}</p>"


def copy_attachment(
    source: Path,
    destination_dir: Path,
    extension: str,
    converter: Converter | None,
    mtime: float | None,
) -> Path | None:
    """Copy (or convert) an attachment into ``destination_dir`` under a random name.

    HEIC images are converted to JPEG when a converter is available. Returns the
    new file's path, or None when the conversion could not be set up. Raises
    AttachmentError when a file to be copied does not exist. The copy's access
    time is taken from the source; its modification time is ``mtime`` (Unix
    seconds) or, when None, the source's.
    """
    source = Path(source)
    target = Path(destination_dir) / str(uuid.uuid4())

    if extension in _HEIC_EXTENSIONS and converter is not None:
        target = target.with_suffix(".jpg")
        try:
            heic_to_jpeg(source, target, converter)
        except OSError as why:
            print(f"Unable to create {target.parent}: {why}", file=sys.stderr)
            return None
    else:
        target = target.with_suffix(f".{extension}")
        if not source.exists():
            print(f"Unable to create {target} from {source}", file=sys.stderr)
            raise AttachmentError(source.name)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as why:
            print(f"Unable to create {target.parent}: {why}", file=sys.stderr)
        try:
            shutil.copyfile(source, target)
        except OSError as why:
            print(f"Unable to copy {source} to {target}: {why}", file=sys.stderr)

    try:
        stat = source.stat()
    except OSError:
        return target

    modified = mtime if mtime is not None else stat.st_mtime
    try:
        os.utime(target, (stat.st_atime, modified))
    except OSError as why:
        print(f"Unable to update {target} metadata: {why}", file=sys.stderr)
    return target


def embed_path(copied_path: Path, sub_dir: str) -> str:
    """The export-relative path under which a copied attachment is embedded."""
    name = Path(copied_path).name
    if not name:
        raise AttachmentError(str(copied_path))
    return f"{ATTACHMENTS_DIR}/{sub_dir}/{name}"