import io
import os
from contextlib import contextmanager

import pytest

from typebox.config import TextboxSettings
from typebox.terminal import app as terminal_app
from typebox.terminal.rawmode import raw_mode, read_key
from typebox.terminal.renderer import (
    CLEAR_SCREEN,
    DIM,
    GREEN,
    RED,
    RESET,
    RESTORE_SCREEN,
    SAVE_SCREEN,
    UNDERLINE,
    AnsiRenderer,
    move_to,
)
from typebox.typing import keys
from typebox.typing.events import DrawPage, MoveCursor, PutChar, SetDim, ShowResult, Style, StyledChar


def _renderer(columns=10, rows=5):
    out = io.StringIO()
    renderer = AnsiRenderer(out, columns, rows, terminal_size=os.terminal_size((80, 24)))
    return renderer, out


def test_textbox_is_centered():
    renderer, _ = _renderer()
    assert renderer.origin_x == 35
    assert renderer.origin_y == 10


def test_move_cursor_is_offset_by_origin():
    renderer, out = _renderer()
    renderer.render(MoveCursor(row=1, column=2))
    assert out.getvalue() == move_to(11, 37)


def test_put_char_styles():
    renderer, out = _renderer()
    renderer.render(PutChar("a", Style.PLAIN))
    renderer.render(PutChar("b", Style.CORRECT))
    renderer.render(PutChar("c", Style.INCORRECT))
    renderer.render(PutChar(" ", Style.INCORRECT_SPACE))
    assert out.getvalue() == "a" + GREEN + "b" + RESET + RED + "c" + RESET + RED + UNDERLINE + " " + RESET


def test_styled_char_restores_dim_mode():
    renderer, out = _renderer()
    renderer.render(SetDim(True))
    renderer.render(PutChar("b", Style.CORRECT))
    assert out.getvalue() == DIM + GREEN + "b" + RESET + DIM


def test_draw_page_clears_and_writes_lines():
    renderer, out = _renderer()
    page = DrawPage(
        page=0,
        lines=(
            (StyledChar("a", Style.CORRECT), StyledChar("b", Style.PLAIN)),
            (StyledChar("c", Style.PLAIN),),
        ),
    )
    renderer.render(page)
    text = out.getvalue()
    assert text.startswith(CLEAR_SCREEN + move_to(10, 35) + GREEN + "a" + RESET + "b" + move_to(11, 35) + "c")
    assert "restart" in text
    assert text.endswith(move_to(10, 35))


def test_show_result_prints_wpm():
    renderer, out = _renderer()
    renderer.render(ShowResult(wpm=42.5, words=10, minutes=0.25))
    assert "42.50" in out.getvalue()


def test_unknown_event_raises():
    renderer, _ = _renderer()
    with pytest.raises(TypeError):
        renderer.render(object())


def test_enter_and_leave_save_and_restore_screen():
    renderer, out = _renderer()
    renderer.enter()
    renderer.leave()
    assert SAVE_SCREEN in out.getvalue()
    assert out.getvalue().index(RESTORE_SCREEN) > out.getvalue().index(SAVE_SCREEN)


def test_read_key_decodes_utf8():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, "é".encode("utf-8") + b"a")
        assert read_key(read_fd) == ord("é")
        assert read_key(read_fd) == ord("a")
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_read_key_raises_on_eof():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    try:
        with pytest.raises(EOFError):
            read_key(read_fd)
    finally:
        os.close(read_fd)


def test_raw_mode_restores_attributes_on_error(monkeypatch):
    calls = []
    monkeypatch.setattr("typebox.terminal.rawmode.termios.tcgetattr", lambda fd: ["saved"])
    monkeypatch.setattr("typebox.terminal.rawmode.tty.setraw", lambda fd, when: calls.append(("raw", fd)))
    monkeypatch.setattr(
        "typebox.terminal.rawmode.termios.tcsetattr",
        lambda fd, when, attrs: calls.append(("restore", fd, attrs)),
    )

    with pytest.raises(RuntimeError):
        with raw_mode(7):
            raise RuntimeError("boom")
    assert calls == [("raw", 7), ("restore", 7, ["saved"])]


def test_run_terminal_plays_a_full_session(monkeypatch):
    scripted = iter([ord("a"), ord("b"), keys.CTRL_C])

    @contextmanager
    def fake_raw_mode(fd):
        yield

    monkeypatch.setattr(terminal_app, "raw_mode", fake_raw_mode)
    monkeypatch.setattr(terminal_app, "read_key", lambda fd: next(scripted))

    out = io.StringIO()
    terminal_app.run_terminal(TextboxSettings(columns=10, rows=2, text="ab"), stdin_fd=0, stdout=out)
    text = out.getvalue()
    assert "WPM" in text
    assert text.rstrip().endswith(RESTORE_SCREEN + "\x1b[u")


def test_run_terminal_restores_screen_on_eof(monkeypatch):
    @contextmanager
    def fake_raw_mode(fd):
        yield

    def closed(fd):
        raise EOFError("input stream closed")

    monkeypatch.setattr(terminal_app, "raw_mode", fake_raw_mode)
    monkeypatch.setattr(terminal_app, "read_key", closed)

    out = io.StringIO()
    with pytest.raises(EOFError):
        terminal_app.run_terminal(TextboxSettings(text="ab"), stdin_fd=0, stdout=out)
    assert RESTORE_SCREEN in out.getvalue()
