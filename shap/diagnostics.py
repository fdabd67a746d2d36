"""Caret-style error reporting shared by the lexer, parser and walker."""
from dataclasses import dataclass

from shap.tokens import Location


def render_diagnostic(source: str, loc: Location, message: str) -> str:
    """Format ``message`` as a header line, the offending source line and a caret under ``loc.column``.

    A location past the end of the source (e.g. end of input after a trailing newline) renders an empty line.
    """
    # only "\n" starts a new line for the lexer, a bare "\r" is ordinary whitespace
    lines = source.split("\n")
    source_line = lines[loc.line - 1].removesuffix("\r") if 0 < loc.line <= len(lines) else ""
    return "\n".join(
        [
            f"[{loc}] {message}",
            source_line,
            " " * max(0, loc.column - 1) + "^",
        ]
    )


@dataclass
class SourceError(Exception):
    errmsg: str
    loc: Location

    def __str__(self) -> str:
        return f"[{self.loc}] {self.errmsg}"

    def render(self, source: str) -> str:
        return render_diagnostic(source, self.loc, self.errmsg)
