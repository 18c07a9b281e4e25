"""
Failure taxonomy for dpkg-builder.

Library code raises one of these and never recovers from it; the CLI
dispatcher is the only place that catches them, logs the message and sets
a non-zero exit status.
"""


class DpkgBuilderError(Exception):
    """Base class for every failure raised by dpkg-builder."""

    kind = "internal"

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{self.kind}: {msg}" if msg else self.kind


class UsageError(DpkgBuilderError):
    """Bad command-line input, e.g. a missing package name."""

    kind = "usage"

    def __str__(self) -> str:
        # Usage messages already carry the sub-command prefix.
        return Exception.__str__(self)


class NetworkError(DpkgBuilderError):
    """Transport failure or non-success HTTP status."""

    kind = "network"


class FilesystemError(DpkgBuilderError):
    """Directory creation or file write failure."""

    kind = "filesystem"


class ParseError(DpkgBuilderError):
    """An href or URL that cannot be parsed."""

    kind = "parse"


class SubprocessError(DpkgBuilderError):
    """The extraction tool could not start or exited unsuccessfully."""

    kind = "subprocess"

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
