"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def format(self, **values: object) -> str:
        """Fill the `{placeholders}` in the message template."""
        return self.message.format(**values) if values else self.message


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character {char}",
    hint="Remove the character or move it inside a string literal or comment.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated String.",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)

# Messages passed to `DiagnosticSink.report` that match no known spec.
GENERIC_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ERROR",
    message="{message}",
    severity="error",
)

LEXER_SPECS: Final[tuple[DiagnosticSpec, ...]] = (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
)


def spec_for_message(message: str) -> DiagnosticSpec:
    """Find the lexer spec whose template produced `message`."""
    for spec in LEXER_SPECS:
        prefix, placeholder, _ = spec.message.partition("{")
        if message == spec.message or (placeholder and message.startswith(prefix)):
            return spec
    return GENERIC_ERROR
