from __future__ import annotations

import codecs
import logging
import os
import termios
import tty
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Put the terminal on ``fd`` into raw mode for the duration of the block.

    Ctrl-C arrives as byte 3 instead of a signal. The original attributes are
    restored on every exit path.
    """
    saved = termios.tcgetattr(fd)
    tty.setraw(fd, termios.TCSAFLUSH)
    logger.debug("Raw mode enabled on fd %d", fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, saved)
        logger.debug("Terminal attributes restored on fd %d", fd)


def read_key(fd: int) -> int:
    """Block until one full code point arrives on ``fd`` and return it."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        data = os.read(fd, 1)
        if not data:
            raise EOFError("input stream closed")
        text = decoder.decode(data)
        if text:
            return ord(text[0])
