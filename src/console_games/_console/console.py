# Area: Console
"""
console_games._console.console - Terminal I/O wrapper
=====================================================

All screen output, keyboard input, screen clearing and pauses go through
a Console so the game screens can be driven by scripted input in tests.
"""

import time
from typing import Callable, Optional

CLEAR_SEQUENCE = "\033[2J\033[H"


class Console:
    """
    Thin wrapper over input()/print().

    Args:
        input_fn: Reads one line (prompt already printed)
        output_fn: Writes one line
        clear_enabled: Emit the ANSI clear sequence on clear()
        pause_seconds: Default length of pause()
        sleep_fn: Used by pause(); replaced in tests
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clear_enabled: bool = True,
        pause_seconds: float = 1.0,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        self._input = input_fn
        self._output = output_fn
        self.clear_enabled = clear_enabled
        self.pause_seconds = pause_seconds
        self._sleep = sleep_fn

    def say(self, text: str = "") -> None:
        self._output(text)

    def ask(self, prompt: str = "") -> str:
        return self._input(prompt)

    def clear(self) -> None:
        if self.clear_enabled:
            self._output(CLEAR_SEQUENCE)

    def pause(self, seconds: Optional[float] = None) -> None:
        duration = self.pause_seconds if seconds is None else seconds
        if duration > 0:
            self._sleep(duration)
