"""Error types with formatted source context."""

from __future__ import annotations


class ScanError(Exception):
    """Raised on the first fatal scanning error, with offset and source context."""

    def __init__(self, message: str, position: int, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.titan") -> str:
        # Locate the line holding the offending offset (display only)
        line_start = self.source.rfind("\n", 0, self.position) + 1
        line_end = self.source.find("\n", self.position)
        if line_end == -1:
            line_end = len(self.source)
        source_line = self.source[line_start:line_end].rstrip("\r")

        pad = "".join("\t" if ch == "\t" else " " for ch in source_line[: self.position - line_start])
        gutter = "  |"

        return (
            f"error: {self.message}\n"
            f"  --> {filename}@{self.position}\n"
            f"{gutter}\n"
            f"{gutter} {source_line}\n"
            f"{gutter} {pad}^"
        )


class UnterminatedLiteralError(ScanError):
    """An opening quote with no matching closing quote before end of input."""

    def __init__(self, delimiter: str, position: int, source: str) -> None:
        self.delimiter = delimiter
        super().__init__(f"no closing {delimiter} found", position, source)


class MalformedNumberError(ScanError):
    """A digit/dot run that does not parse as a 32-bit integer or float."""

    def __init__(self, text: str, position: int, source: str) -> None:
        self.text = text
        super().__init__(f"malformed numeric literal {text!r}", position, source)
