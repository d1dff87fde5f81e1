from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from typebox.config import TextboxSettings
from typebox.terminal.rawmode import raw_mode, read_key
from typebox.terminal.renderer import AnsiRenderer
from typebox.typing.session import TypingSession

logger = logging.getLogger(__name__)


def run_terminal(
    settings: TextboxSettings,
    *,
    stdin_fd: Optional[int] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    out = sys.stdout if stdout is None else stdout

    session = TypingSession(settings)
    renderer = AnsiRenderer(out, settings.columns, settings.rows)
    logger.info(
        "Terminal session: %d page(s), textbox %dx%d",
        session.document.page_count,
        settings.columns,
        settings.rows,
    )

    with raw_mode(fd):
        renderer.enter()
        try:
            session.redraw()
            renderer.render_all(session.events())
            while session.running:
                session.handle_key(read_key(fd))
                renderer.render_all(session.events())
        finally:
            renderer.leave()
