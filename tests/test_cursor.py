from typebox.config import DEFAULT_TEXT
from typebox.typing.cursor import Cursor, advance, retreat
from typebox.typing.layout import layout


def _two_pages():
    # [["hello", "world"], ["foo"]]
    return layout("hello world foo", 5, 2)


def test_advance_within_line():
    document = _two_pages()
    assert advance(document, Cursor(column=1, row=0)) == Cursor(column=2, row=0)


def test_advance_wraps_to_next_row():
    document = _two_pages()
    assert advance(document, Cursor(column=4, row=0)) == Cursor(column=0, row=1)
    assert document.current_page == 0


def test_advance_moves_to_next_page_and_reports_once():
    document = _two_pages()
    pages = []
    cursor = advance(document, Cursor(column=4, row=1), pages.append)
    assert cursor == Cursor()
    assert document.current_page == 1
    assert pages == [1]


def test_advance_at_final_cell_is_sticky():
    document = _two_pages()
    document.current_page = 1
    pages = []
    final = Cursor(column=2, row=0)
    assert advance(document, final, pages.append) == final
    assert advance(document, final, pages.append) == final
    assert document.current_page == 1
    assert pages == []


def test_retreat_within_line():
    document = _two_pages()
    assert retreat(document, Cursor(column=3, row=1)) == Cursor(column=2, row=1)


def test_retreat_wraps_to_end_of_previous_row():
    document = _two_pages()
    assert retreat(document, Cursor(column=0, row=1)) == Cursor(column=4, row=0)


def test_retreat_moves_to_previous_page_and_reports_once():
    document = _two_pages()
    document.current_page = 1
    pages = []
    cursor = retreat(document, Cursor(), pages.append)
    assert cursor == Cursor(column=4, row=1)
    assert document.current_page == 0
    assert pages == [0]


def test_retreat_at_document_start_is_idempotent():
    document = _two_pages()
    pages = []
    cursor = retreat(document, Cursor(), pages.append)
    cursor = retreat(document, cursor, pages.append)
    assert cursor == Cursor()
    assert document.current_page == 0
    assert pages == []


def test_advance_then_retreat_round_trips_across_document():
    document = layout(DEFAULT_TEXT, 17, 3)
    cursor = Cursor()
    visited = 1
    while True:
        page = document.current_page
        forward_pages = []
        moved = advance(document, cursor, forward_pages.append)
        if moved == cursor and document.current_page == page:
            break
        back_pages = []
        assert retreat(document, moved, back_pages.append) == cursor
        assert document.current_page == page
        assert len(forward_pages) == len(back_pages) <= 1
        advance(document, cursor)
        cursor = moved
        visited += 1
    assert visited == sum(1 for _ in document.cells())
    assert document.pages[document.current_page][cursor.row][cursor.column].is_last
