"""Send a text message to a server process, one signal per bit."""

from __future__ import annotations

import os
import sys
import time
from typing import Sequence

from .libstr import atoi, isdigit
from .protocol import ONE_SIGNAL, ZERO_SIGNAL, encode

BIT_DELAY = 0.0001


def parse_pid(argv: Sequence[str]) -> int:
    """Check the command arguments (pid and text) and return the pid."""
    if len(argv) != 2:
        raise ValueError("usage: client <pid> <text>")
    pid_text = argv[0]
    if not all(isdigit(ch) for ch in pid_text):
        raise ValueError(f"pid must contain only digits: {pid_text!r}")
    pid = atoi(pid_text)
    if pid <= 0:
        raise ValueError(f"pid must be positive: {pid_text!r}")
    return pid


def send(pid: int, text: str, delay: float = BIT_DELAY) -> None:
    """Deliver *text* to process *pid*, pausing *delay* seconds after each bit."""
    for bit in encode(text):
        os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        time.sleep(delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: client <pid> <text>."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        pid = parse_pid(args)
    except ValueError:
        return 1
    send(pid, args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())