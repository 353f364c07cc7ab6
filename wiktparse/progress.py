"""Progress reporting for long passes over a file."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO


def format_time(seconds: float) -> str:
    """Format a duration in seconds, minutes or hours."""
    if seconds < 60:
        return f"{seconds:.0f} s"
    if seconds < 600:
        return f"{seconds / 60.0:.1f} m"
    if seconds < 3600:
        return f"{seconds / 60.0:.0f} m"
    return f"{seconds / 3600.0:.1f} h"


def _digits_after_dot(text: str) -> int:
    pos = text.find(".")
    return 0 if pos == -1 else len(text) - pos - 1


def trim_after_difference(a: str, b: str) -> str:
    """Cut the number ``b`` just after the first digit where it differs from ``a``."""
    if a == b:
        return a
    if "." not in a:
        a += "."
    if "." not in b:
        b += "."
    a_digits = _digits_after_dot(a)
    b_digits = _digits_after_dot(b)
    padding = "0" * (max(a_digits, b_digits) - min(a_digits, b_digits))
    if a_digits < b_digits:
        a += padding
    else:
        b += padding
    common = len(a) if len(a) < len(b) else len(b)
    cut = next((i + 1 for i in range(common) if a[i] != b[i]), common)
    result = b[:cut]
    if result.endswith("."):
        result += "0"
    return result


def _format_float(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


class Progress:
    """Prints the share of a file done, with time estimates.

    A line is printed whenever a new step of ``step_len`` is reached, or
    at least every ``TIMER_INTERVAL`` seconds.
    """

    TIMER_INTERVAL = 20.0

    def __init__(
        self,
        filesize: int,
        step_len: float = 0.01,
        *,
        out: Optional[TextIO] = None,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        if step_len <= 0 or step_len > 1:
            raise ValueError("Invalid step lengths")
        self.filesize = filesize
        self.step_len = step_len
        digits = 0
        scaled = step_len
        while scaled < 1:
            scaled *= 10
            digits += 1
        self._step_digits = digits
        self._out = out
        self._clock = clock
        self._wall_clock = wall_clock
        self._last_step = 0
        self._last_num = "0"
        self._start = clock()
        self._last_shown = self._start

    def update(self, current_pos: int) -> int:
        """Report progress at ``current_pos``.

        Returns 0 when nothing was printed, 1 for a new step and 2 for a
        line forced by the timer.
        """
        if self.filesize == 0:
            return 0
        progress = current_pos / self.filesize
        step = int(progress / self.step_len)
        now = self._clock()
        elapsed = now - self._start
        forced = now - self._last_shown >= self.TIMER_INTERVAL
        step_changed = step > self._last_step
        if not (step_changed or forced):
            return 0
        self._last_step = step
        self._last_shown = now
        if step_changed:
            precision = max(0, self._step_digits - 2)
            self._last_num = f"{step * self.step_len * 100:.{precision}f}"
        else:
            self._last_num = trim_after_difference(self._last_num, _format_float(progress * 100))
        line = f"{self._last_num} %"
        total = elapsed / progress if progress > 0 else 0.0
        remaining = total - elapsed
        if total >= 60:
            line += f"  ({format_time(elapsed)} elapsed, {format_time(remaining)} left"
            if total >= 300:
                line += self._ends_at(remaining)
            line += ")"
        out = self._out if self._out is not None else sys.stdout
        out.write(line + "\n")
        return 1 if step_changed else 2

    def _ends_at(self, remaining: float) -> str:
        now_time = int(self._wall_clock())
        now_local = time.localtime(now_time)
        end_local = time.localtime(now_time + int(remaining))
        if end_local.tm_mday != now_local.tm_mday:
            return f", ends at {time.strftime('%Y-%m-%d %H:%M', end_local)}"
        return f", ends at {end_local.tm_hour:02}:{end_local.tm_min:02}"