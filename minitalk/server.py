"""Receive messages sent bit by bit as signals and print each one."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import Sequence, TextIO

from .printf import printf, putendl
from .protocol import ONE_SIGNAL, ZERO_SIGNAL, Decoder


class Server:
    """Decode incoming signals and write each finished message as a line."""

    def __init__(self, output: TextIO | None = None) -> None:
        self.output = sys.stdout if output is None else output
        self._decoder = Decoder()

    def handle(self, signum: int, frame: FrameType | None = None) -> str | None:
        """Signal handler: one signal is one bit; return a message when complete."""
        message = self._decoder.feed(1 if signum == ONE_SIGNAL else 0)
        if message is not None:
            putendl(message, self.output)
            self.output.flush()
        return message

    def install(self) -> None:
        """Route both message signals to this server."""
        signal.signal(ZERO_SIGNAL, self.handle)
        signal.signal(ONE_SIGNAL, self.handle)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the pid, then print messages until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    sys.stdout.flush()
    server = Server()
    server.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())