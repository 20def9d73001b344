"""Whitespace emission policies for the stripper."""

from enum import Enum


class WhitespaceHandling(Enum):
    """Determines how whitespace is emitted in the JSON output."""

    NO_WHITESPACE = "none"
    SPACES_AFTER_COMMA_COLON = "comma-colon"
    UNTOUCHED = "untouched"

    @classmethod
    def from_name(cls, name: str) -> "WhitespaceHandling":
        """Look up a policy by value ("comma-colon") or member name.

        Raises:
            ValueError: If the name matches no policy
        """
        key = name.strip().lower()
        for policy in cls:
            if key == policy.value or key == policy.name.lower():
                return policy
        choices = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown whitespace handling '{name}'. Choose one of: {choices}")

    def emits_source_whitespace(self) -> bool:
        """Whether whitespace read at top level is copied to the output."""
        return self is WhitespaceHandling.UNTOUCHED

    def emits_comment_line_breaks(self) -> bool:
        """Whether the CR/LF terminating a // comment is copied to the output."""
        return self is WhitespaceHandling.UNTOUCHED

    def leading_space(self, last_emitted: str) -> bool:
        """Whether a space goes before a value-starting token.

        Only ever true right after a ':' or ',' was emitted.
        """
        return (
            self is WhitespaceHandling.SPACES_AFTER_COMMA_COLON
            and last_emitted in (":", ",")
        )


__all__ = ["WhitespaceHandling"]
