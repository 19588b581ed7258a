import pytest

from suggest_core.layout import format_count_suffix, layout, suggestion_width
from suggest_core.loader import load_fragments
from suggest_core.models import Fragment, Frame, Placement
from suggest_core.search import rank


def _frame(cols, rows, buffer, lines, overflow="clip") -> Frame:
    ranked = rank(load_fragments(lines), buffer)
    return layout(cols, rows, list(buffer), ranked, overflow=overflow)


def test_suggestions_align_overlap_under_buffer_tail():
    fr = _frame(40, 5, "say hel", ["hello world", "help me", "hello world"])
    assert fr.buffer_line == Placement(0, 0, "say hel")
    assert fr.cursor_col == 7
    assert fr.suggestions == [
        Placement(1, 4, "hello world (02)"),
        Placement(2, 4, "help me (01)"),
    ]


def test_count_suffix_is_capped_not_wrapped():
    assert format_count_suffix(137) == " (99)"
    assert format_count_suffix(99) == " (99)"
    assert format_count_suffix(7) == " (07)"
    fr = _frame(40, 3, "", ["x"] * 137)
    assert fr.suggestions[0].text == "x (99)"


def test_suggestion_width_counts_only_the_part_past_the_cursor():
    assert suggestion_width(Fragment("hello", overlap=2)) == 3 + 5
    assert suggestion_width(Fragment("", overlap=0)) == 5


def test_only_rows_minus_one_suggestions_are_drawn():
    fr = _frame(40, 2, "", ["a", "b", "c"])
    assert [p.row for p in fr.suggestions] == [1]


def test_rows_beyond_fragments_stay_blank():
    fr = _frame(40, 10, "a", ["ab"])
    assert len(fr.suggestions) == 1


def test_long_buffer_shows_only_its_tail():
    # widest suggestion "xyz (01)" needs 8 columns, leaving 4 for the buffer
    fr = _frame(12, 3, "abcdefghij", ["xyz"])
    assert fr.buffer_line == Placement(0, 0, "ghij")
    assert fr.cursor_col == 4
    assert fr.suggestions == [Placement(1, 4, "xyz (01)")]


@pytest.mark.parametrize("cols,rows", [(0, 0), (0, 10), (10, 0)])
def test_zero_sized_terminal_draws_nothing(cols, rows):
    fr = _frame(cols, rows, "hello", ["hello world"])
    assert fr.placements() == []


def test_no_fragments_still_draws_buffer():
    fr = layout(20, 5, list("typed"), [])
    assert fr.buffer_line == Placement(0, 0, "typed")
    assert fr.suggestions == []
    assert fr.cursor_col == 5


def test_text_is_clipped_at_the_right_edge():
    fr = _frame(8, 3, "", ["abcdefghij"])
    assert fr.buffer_line is None
    assert fr.suggestions == [Placement(1, 0, "abcdefgh")]


# overlap longer than the visible buffer window -------------------------------

def test_overflow_clip_keeps_alignment_from_column_zero():
    # "abcdefgh" overlaps all 8 chars but only 5 buffer columns are visible
    fr = _frame(10, 3, "xxabcdefgh", ["abcdefgh"], overflow="clip")
    assert fr.buffer_line == Placement(0, 0, "defgh")
    assert fr.cursor_col == 5
    assert fr.suggestions == [Placement(1, 0, "defgh (01)")]


def test_overflow_clip_with_a_second_fragment():
    fr = _frame(10, 4, "xxabcdefgh", ["abcdefgh", "q"], overflow="clip")
    assert fr.buffer_line == Placement(0, 0, "efgh")
    assert fr.suggestions == [Placement(1, 0, "efgh (01)"), Placement(2, 4, "q (01)")]


def test_overflow_suppress_skips_the_fragment():
    fr = _frame(10, 4, "xxabcdefgh", ["abcdefgh", "q"], overflow="suppress")
    assert fr.buffer_line == Placement(0, 0, "efgh")
    assert fr.suggestions == [Placement(1, 4, "q (01)")]


def test_unknown_overflow_policy_rejected():
    with pytest.raises(ValueError):
        layout(10, 3, [], [], overflow="wrap")
