from textpad_engine.buffer import ColumnSelection, LineCol
from textpad_engine.editing import column


def test_extend_then_type_fills_rectangle() -> None:
    doc = "ab\ncd"
    rectangle = column.enter(LineCol(0, 0))

    for direction in ("down", "right", "right"):
        doc, rectangle = column.extend(doc, rectangle, direction)

    assert (rectangle.min_line, rectangle.max_line) == (0, 1)
    assert (rectangle.min_col, rectangle.max_col) == (0, 2)

    doc, rectangle = column.insert_text(doc, rectangle, "X")

    assert doc == "X\nX"
    assert rectangle == ColumnSelection(0, 1, 1, 1)


def test_extend_pads_short_lines() -> None:
    doc, rectangle = column.extend("abc\nd", column.enter(LineCol(0, 3)), "down")

    assert doc == "abc\nd  "
    assert rectangle == ColumnSelection(0, 1, 3, 3)

    doc, rectangle = column.extend(doc, rectangle, "right")

    assert doc == "abc \nd   "
    assert rectangle == ColumnSelection(0, 1, 3, 4)


def test_extend_at_boundary_is_noop() -> None:
    rectangle = column.enter(LineCol(0, 0))

    assert column.extend("ab\ncd", rectangle, "up") == ("ab\ncd", rectangle)
    assert column.extend("ab\ncd", rectangle, "left") == ("ab\ncd", rectangle)


def test_page_moves_clamp_to_document() -> None:
    doc = "a\nb\nc"

    _, rectangle = column.extend(doc, column.enter(LineCol(0, 0)), "page_down")
    assert rectangle.end_line == 2

    _, rectangle = column.extend(doc, rectangle, "page_up")
    assert rectangle.end_line == 0


def test_move_end_leaves_anchor() -> None:
    rectangle = ColumnSelection(2, 2, 1, 1)

    moved = column.move_end(rectangle, "up", line_count=5, page_size=3)

    assert (moved.start_line, moved.start_col) == (2, 1)
    assert moved.end_line == 1


def test_column_has_no_upper_bound() -> None:
    doc, rectangle = column.extend("", column.enter(LineCol(0, 0)), "right")

    assert rectangle.end_col == 1
    assert doc == " "


def test_backspace_degenerate_narrows() -> None:
    doc, rectangle = column.backspace("abc\ndef", ColumnSelection(0, 1, 2, 2))

    assert doc == "ac\ndf"
    assert rectangle == ColumnSelection(0, 1, 1, 1)


def test_backspace_at_column_zero_is_noop() -> None:
    rectangle = ColumnSelection(0, 1, 0, 0)

    assert column.backspace("abc\ndef", rectangle) == ("abc\ndef", rectangle)


def test_delete_forward_degenerate_keeps_columns() -> None:
    rectangle = ColumnSelection(0, 1, 1, 1)

    doc, updated = column.delete_forward("abc\ndef", rectangle)

    assert doc == "ac\ndf"
    assert updated == rectangle


def test_backspace_and_delete_remove_span() -> None:
    rectangle = ColumnSelection(0, 1, 0, 2)

    assert column.backspace("abc\ndef", rectangle) == (
        "c\nf",
        ColumnSelection(0, 1, 0, 0),
    )
    assert column.delete_forward("abc\ndef", rectangle) == (
        "c\nf",
        ColumnSelection(0, 1, 0, 0),
    )


def test_copy_includes_empty_fragments_for_short_lines() -> None:
    assert column.copy_text("abc\nd\nefg", ColumnSelection(0, 2, 1, 3)) == "bc\n\nfg"


def test_cut_copies_then_deletes() -> None:
    copied, doc, rectangle = column.cut("abc\nd\nefg", ColumnSelection(2, 0, 3, 1))

    assert copied == "bc\n\nfg"
    assert doc == "a\nd\ne"
    assert rectangle == ColumnSelection(0, 2, 1, 1)


def test_paste_multiline_fills_leading_rows_only() -> None:
    doc, rectangle = column.paste(
        "aaa\nbbb\nccc", ColumnSelection(0, 2, 1, 1), "1\n2"
    )

    assert doc == "a1aa\nb2bb\nccc"
    assert rectangle == ColumnSelection(0, 2, 1, 1)


def test_paste_single_line_fills_every_row() -> None:
    doc, _ = column.paste("aaa\nbbb\nccc", ColumnSelection(0, 2, 1, 1), "x")

    assert doc == "axaa\nbxbb\ncxcc"


def test_paste_drops_extra_lines_and_replaces_span() -> None:
    doc, _ = column.paste("aaa\nbbb", ColumnSelection(0, 1, 0, 2), "1\n2\n3")

    assert doc == "1a\n2b"


def test_paste_empty_payload_is_noop() -> None:
    rectangle = ColumnSelection(0, 0, 0, 0)

    assert column.paste("abc", rectangle, "") == ("abc", rectangle)


def test_pad_and_recompute_clamps_rows() -> None:
    doc, rectangle = column.pad_and_recompute(ColumnSelection(0, 4, 0, 2), "a\nb")

    assert doc == "a \nb "
    assert rectangle == ColumnSelection(0, 1, 0, 2)


def test_exit_cleanup_strips_every_line() -> None:
    assert column.exit_cleanup("a  \nb \nc") == "a\nb\nc"
