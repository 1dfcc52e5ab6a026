"""Conversion of HEIC images to JPEG through an external program."""

from __future__ import annotations

import shutil
import subprocess
import sys
from enum import Enum
from pathlib import Path


class Converter(Enum):
    """An image conversion program available on this system."""

    SIPS = "sips"
    IMAGEMAGICK = "convert"

    @staticmethod
    def determine() -> Converter | None:
        """Pick the converter available in the current environment, if any."""
        for converter in (Converter.SIPS, Converter.IMAGEMAGICK):
            if program_exists(converter.value):
                return converter
        print("No HEIC converter found, attachments will not be converted!", file=sys.stderr)
        return None


def program_exists(name: str) -> bool:
    """Tell whether a program of this name can be run from the shell."""
    return shutil.which(name) is not None


def heic_to_jpeg(source: Path, target: Path, converter: Converter) -> None:
    """Convert the HEIC image at ``source`` into a JPEG at ``target``.

    The target's parent directories are created when missing; an OSError from
    that step propagates. Failure to start the converter is reported on stderr.
    """
    source = Path(source)
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)

    if converter is Converter.SIPS:
        command = ["sips", "-s", "format", "jpeg", str(source), "-o", str(target)]
    else:
        command = ["convert", str(source), str(target)]

    try:
        subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as why:
        print(f"Conversion failed: {why}", file=sys.stderr)