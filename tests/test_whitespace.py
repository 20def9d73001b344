"""Tests for whitespace handling policies."""

import pytest

from hson.whitespace import WhitespaceHandling


class TestFromName:
    """Tests for looking up policies by name."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("none", WhitespaceHandling.NO_WHITESPACE),
            ("comma-colon", WhitespaceHandling.SPACES_AFTER_COMMA_COLON),
            ("untouched", WhitespaceHandling.UNTOUCHED),
            ("NO_WHITESPACE", WhitespaceHandling.NO_WHITESPACE),
            ("spaces_after_comma_colon", WhitespaceHandling.SPACES_AFTER_COMMA_COLON),
            ("  Untouched ", WhitespaceHandling.UNTOUCHED),
        ],
    )
    def test_known_names(self, name, expected):
        """Values and member names are accepted, case-insensitively."""
        assert WhitespaceHandling.from_name(name) is expected

    def test_unknown_name(self):
        """Unknown names raise ValueError listing the choices."""
        with pytest.raises(ValueError, match="Unknown whitespace handling 'pretty'") as exc:
            WhitespaceHandling.from_name("pretty")
        assert "comma-colon" in str(exc.value)


class TestEmissionDecisions:
    """Tests for the per-emission policy checks."""

    @pytest.mark.parametrize("last", [":", ","])
    def test_leading_space_after_comma_colon(self, last):
        """Only the comma-colon policy injects a space after ':' or ','."""
        assert WhitespaceHandling.SPACES_AFTER_COMMA_COLON.leading_space(last)
        assert not WhitespaceHandling.NO_WHITESPACE.leading_space(last)
        assert not WhitespaceHandling.UNTOUCHED.leading_space(last)

    @pytest.mark.parametrize("last", ["\0", "{", "[", "1", '"', "]", " "])
    def test_no_leading_space_after_other_chars(self, last):
        """Any other last-emitted char gets no space."""
        assert not WhitespaceHandling.SPACES_AFTER_COMMA_COLON.leading_space(last)

    def test_only_untouched_emits_source_whitespace(self):
        """Source whitespace and comment line breaks survive only untouched."""
        for policy in WhitespaceHandling:
            expected = policy is WhitespaceHandling.UNTOUCHED
            assert policy.emits_source_whitespace() is expected
            assert policy.emits_comment_line_breaks() is expected
