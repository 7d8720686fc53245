"""External parser backend (pandoc by default)."""

import logging
import subprocess

from ..config.ParserConfig import ParserConfig
from .ParseError import ParseError

logger = logging.getLogger(__name__)


class _PandocBackend:
    """Run a Markdown-to-JSON command on standard streams."""

    def __init__(self, config: ParserConfig):
        self.command = list(config.command)
        self.timeout = config.timeout_secs

    def run(self, text: str) -> str:
        """Feed ``text`` to the command and return its standard output.

        Raises:
            ParseError: If the command cannot start, times out, exits non-zero
                or writes output that is not UTF-8
        """
        try:
            process = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise ParseError(f"Cannot start parser {self.command[0]!r}: {exc}") from exc

        with process:
            try:
                stdout, stderr = process.communicate(text.encode("utf-8"), timeout=self.timeout)
            except subprocess.TimeoutExpired as exc:
                process.kill()
                process.communicate()
                raise ParseError(f"Parser timed out after {self.timeout}s") from exc

        message = stderr.decode("utf-8", errors="replace").strip()
        if message:
            logger.warning("%s: %s", self.command[0], message)

        if process.returncode != 0:
            detail = f": {message}" if message else ""
            raise ParseError(f"Parser failed with exit code {process.returncode}{detail}")

        try:
            return stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"Parser output is not valid UTF-8: {exc}") from exc
