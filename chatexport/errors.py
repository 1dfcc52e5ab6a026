"""Errors raised while preparing or running an export."""


class ExportError(Exception):
    """Base class for every error the exporter raises."""


class InvalidOptionsError(ExportError):
    """The command line options do not describe a valid run."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid options!\n{reason}")


class DiskError(ExportError):
    """Reading from or writing to the file system failed."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(str(cause))


class DatabaseError(ExportError):
    """Reading from the message database failed."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(str(cause))