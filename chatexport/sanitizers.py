"""Helpers that make names safe to use as file names."""

REPLACEMENT_CHAR = "_"
DISALLOWED_CHARS = frozenset("/\\:")


def sanitize_filename(filename: str) -> str:
    """Replace every character that is unsafe in a file name with an underscore."""
    return "".join(REPLACEMENT_CHAR if char in DISALLOWED_CHARS else char for char in filename)