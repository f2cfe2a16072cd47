# =============================================================================
# Separator Scanner Tests
# =============================================================================

import pytest

from spoolview.spool import find_boundaries, split_messages


def rejoin(messages: list[str]) -> str:
    """Put split messages back together."""
    return messages[0] + "".join("\n\n" + m for m in messages[1:])


class TestSplitMessages:
    def test_empty_text_has_no_messages(self):
        assert split_messages("") == []

    def test_text_without_boundary_is_one_message(self):
        text = "From a\nSubject: hi\n\nNo other sender line here\n"
        assert split_messages(text) == [text]

    def test_blank_line_then_from_starts_a_message(self):
        messages = split_messages("From a\nHi\n\nFrom b\nBye\n")
        assert messages == ["From a\nHi", "From b\nBye\n"]

    def test_from_without_blank_line_is_body_text(self):
        text = "From a\nHi\nFrom b\nBye\n"
        assert split_messages(text) == [text]

    def test_quoted_from_in_body_does_not_split(self, alice_spool):
        messages = split_messages(alice_spool)
        assert len(messages) == 2
        assert "From what I remember" in messages[1]

    def test_first_line_is_never_a_boundary(self):
        assert list(find_boundaries("From a\n\nFrom b\n")) == [8]

    def test_leading_blank_line(self):
        text = "\nFrom a\nHi\n"
        assert split_messages(text) == [text]

    def test_leading_blank_lines_before_first_message(self):
        messages = split_messages("\n\nFrom a\nHi\n")
        assert messages == ["", "From a\nHi\n"]

    def test_several_blank_lines_stay_with_previous_message(self):
        messages = split_messages("From a\nHi\n\n\n\nFrom b\n")
        assert messages == ["From a\nHi\n\n", "From b\n"]

    def test_from_needs_trailing_space(self):
        text = "From a\n\nFromage\n\nFrom:someone\n"
        assert split_messages(text) == [text]

    def test_whitespace_only_line_is_not_blank(self):
        text = "From a\n \nFrom b\n"
        assert split_messages(text) == [text]

    def test_carriage_returns_are_kept(self):
        text = "From a\r\nHi\r\n\nFrom b\r\n"
        assert rejoin(split_messages(text)) == text


@pytest.mark.parametrize(
    "text",
    [
        "From a\nx\n\nFrom b\ny\n\nFrom c\nz\n",
        "preamble\n\nFrom a\n\n\nFrom b",
        "From a\n\nFrom b\n\nFrom c\n\n",
        "From a\nbody\n\n>From quoted\n\nFrom b\n",
    ],
)
def test_boundaries_give_one_more_message_and_round_trip(text):
    boundaries = list(find_boundaries(text))
    messages = split_messages(text)

    assert len(messages) == len(boundaries) + 1
    assert rejoin(messages) == text
    assert all(m.startswith("From ") for m in messages[1:])


def test_round_trip_sample_spool(alice_spool):
    assert rejoin(split_messages(alice_spool)) == alice_spool
