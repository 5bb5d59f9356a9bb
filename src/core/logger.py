# core/logger.py
"""Project logger.

  LOGGER    — the ``tulars_e2e`` logger every package writes to
  LogStream — attach extra streams for the duration of one scenario run

The stderr handler shows INFO and above (one line per scenario step);
``set_console_level(logging.DEBUG)`` adds the driver's polling detail.
"""

import itertools
import logging
import sys
from contextlib import contextmanager

FORMAT = "%(asctime)s %(name)s [%(process)d] %(levelname)-5s %(message)s"

LOGGER = logging.getLogger("tulars_e2e")
LOGGER.setLevel(logging.DEBUG)

_console = logging.StreamHandler(sys.stderr)
_console.setLevel(logging.INFO)
_console.setFormatter(logging.Formatter(FORMAT))
LOGGER.addHandler(_console)


def set_console_level(level: int) -> None:
    _console.setLevel(level)


class LogStream:
    """Streams that receive LOGGER output besides stderr.

    Register/Unregister pair up by ID; Capture is the with-statement form
    used by the CLI's --log-file and by UITestCase's per-test step log.
    """

    __HANDLERS: dict[int, logging.Handler] = {}
    __IDS = itertools.count()

    @classmethod
    def Register(cls, stream, level: int = logging.INFO) -> int:
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FORMAT))
        LOGGER.addHandler(handler)
        stream_id = next(cls.__IDS)
        cls.__HANDLERS[stream_id] = handler
        return stream_id

    @classmethod
    def Unregister(cls, stream_id: int) -> None:
        handler = cls.__HANDLERS.pop(stream_id, None)
        if handler:
            handler.flush()
            LOGGER.removeHandler(handler)

    @classmethod
    @contextmanager
    def Capture(cls, stream, level: int = logging.INFO):
        stream_id = cls.Register(stream, level)
        try:
            yield stream
        finally:
            cls.Unregister(stream_id)
