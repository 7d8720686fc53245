"""Where diagnostic lines go."""

from typing import Protocol


class DiagnosticSink(Protocol):
    """Anything with ``write(str)``: sys.stderr, io.StringIO, an open file."""

    def write(self, line: str, /) -> object: ...
