# =============================================================================
# Frame Rendering Tests
# =============================================================================

from spoolview.core import Message
from spoolview.pager import Command, NavigatorState, transition
from spoolview.rendering import HEADER_HEIGHT, render_frame


def numbered_message(count: int) -> Message:
    body = "\n".join(f"body {i}" for i in range(1, count + 1))
    return Message(
        "\n\nFrom a@example.com  Mon Jan  1 10:00:00 2024\n"
        "Date: Mon, 1 Jan 2024 10:00:00 +0000 (UTC)\n"
        "To: b@example.com\n"
        "\n"
        f"{body}\n\n",
        "b",
    )


def test_status_shows_position_and_help():
    frame = render_frame(numbered_message(3), NavigatorState(current_message=1), 5, 24)

    assert frame.status.startswith("message 2/5")
    assert "q/Esc=quit" in frame.status


def test_meta_shows_to_and_short_date():
    frame = render_frame(numbered_message(3), NavigatorState(), 1, 24)

    assert frame.meta == "To: b@example.com    Date: Mon, 1 Jan 2024 10:00:00"


def test_meta_falls_back_to_unknown():
    frame = render_frame(Message("From a\n\nhi\n"), NavigatorState(), 1, 24)
    assert frame.meta == "Unknown    Unknown"


def test_body_starts_at_trimmed_first_line():
    frame = render_frame(numbered_message(3), NavigatorState(), 1, 24)

    assert frame.body[0].startswith("From a@example.com")
    assert frame.body[-1] == "body 3"


def test_body_is_cut_to_viewport():
    frame = render_frame(numbered_message(50), NavigatorState(), 1, 10)

    assert len(frame.body) == 10 - HEADER_HEIGHT
    assert len(frame.lines) == 10


def test_body_follows_current_line():
    message = numbered_message(50)
    state = NavigatorState()
    for _ in range(4):
        state = transition(state, Command.LINE_DOWN, 1, message.line_count)

    frame = render_frame(message, state, 1, 10)

    # 4 header lines, then body 1..
    assert frame.body[0] == "body 1"
    assert frame.body[-1] == "body 8"


def test_short_message_leaves_rows_empty():
    frame = render_frame(numbered_message(1), NavigatorState(), 1, 40)
    assert len(frame.body) == 5


def test_last_line_shows_alone():
    message = numbered_message(5)
    state = NavigatorState(current_line=message.line_count - 1)

    assert render_frame(message, state, 1, 24).body == ["body 5"]


def test_tiny_viewport_has_no_body():
    frame = render_frame(numbered_message(5), NavigatorState(), 1, 1)
    assert frame.body == []


def test_armed_delete_shows_prompt():
    state = transition(NavigatorState(), Command.DELETE, 1, 5)
    frame = render_frame(numbered_message(5), state, 1, 24)

    assert frame.status.startswith("message 1/1")
    assert "Press d again" in frame.status
    assert "q/Esc=quit" not in frame.status
