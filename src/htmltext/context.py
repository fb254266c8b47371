import logging

from .buffer import OutputBuffer
from .tokens import Diagnostic

logger = logging.getLogger(__name__)


class StrictModeError(SyntaxError):
    """Raised on the first diagnostic when strict mode is enabled."""

    def __init__(self, diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


class ExtractionContext:
    """Mutable state threaded through one extraction run."""

    __slots__ = (
        "diagnostics",
        "output",
        "preformatted_depth",
        "strict",
        "subscript_depth",
        "superscript_depth",
    )

    def __init__(self, strict=False):
        self.output = OutputBuffer()
        self.diagnostics = []
        self.strict = bool(strict)
        self.preformatted_depth = 0
        self.superscript_depth = 0
        self.subscript_depth = 0

    def reset(self, preserve_newlines=False):
        self.output.clear()
        self.diagnostics = []
        self.preformatted_depth = 1 if preserve_newlines else 0
        self.superscript_depth = 0
        self.subscript_depth = 0

    def emit(self, text):
        self.output.append(text)

    def report(self, message, position=None):
        diagnostic = Diagnostic(message, position)
        self.diagnostics.append(diagnostic)
        logger.debug("%s (at %s)", message, position)
        if self.strict:
            raise StrictModeError(diagnostic)
        return diagnostic
