"""A progress bar value and a progress meter with elapsed and remaining time."""

from __future__ import annotations

import math
import time
from typing import Any, Callable

DEFAULT_COLOR = "blue"
TIME_FORMAT = ("Elapsed Time: {:03d}:{:02d}:{:02d}\n"
               "Remaining Time: {:03d}:{:02d}:{:02d}")


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def secs_to_hms(secs: float) -> tuple[int, int, int]:
    """Split a number of seconds into whole hours, minutes and seconds."""
    s = int(secs)
    m = _tdiv(s, 60)
    s -= m * 60
    h = _tdiv(m, 60)
    m -= h * 60
    return h, m, s


class Progress:
    """A value on a range, shown as a whole percentage."""

    def __init__(self, minimum: float = 0.0, maximum: float = 1.0, value: float = 0.0,
                 color: Any = DEFAULT_COLOR,
                 on_percent_change: Callable[[int], Any] | None = None) -> None:
        if maximum == minimum:
            raise ValueError("progress range must not be empty")
        self.minimum = minimum
        self.maximum = maximum
        self.color = color
        self.on_percent_change = on_percent_change
        self._value = value

    def _fraction(self, value: float) -> float:
        return (value - self.minimum) / (self.maximum - self.minimum)

    @property
    def value(self) -> float:
        """The current value."""
        return self._value

    @value.setter
    def value(self, v: float) -> None:
        last = int(100.0 * self._fraction(self._value))
        this = int(100.0 * self._fraction(v))
        self._value = v
        if this != last and self.on_percent_change is not None:
            self.on_percent_change(this)

    def percent(self) -> float:
        """The value as a fraction of the range."""
        return self._fraction(self._value)

    def percent_text(self) -> str:
        """The text drawn on the bar, such as ``"42%"``."""
        return f"{int(self.percent() * 100.0)}%"


class ProgressMeter:
    """Progress of a long operation with timing estimates and optional cancelling."""

    def __init__(self, title: str | None = None, *,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.title = title
        self.label = ""
        self.show_completion_time = True
        self.cancel_callback: Callable[[], Any] | None = None
        self.cancelled = False
        self.shown = False
        self.cancel_visible = False
        self.etc_text = ""
        self.progress = Progress()
        self._clock = clock
        self._start = clock()

    @property
    def color(self) -> Any:
        """Colour of the progress bar."""
        return self.progress.color

    @color.setter
    def color(self, c: Any) -> None:
        self.progress.color = c

    @property
    def value(self) -> float:
        """Current progress, on [0, 1]."""
        return self.progress.value

    def show(self, with_cancel_button: bool = False) -> None:
        """Show the meter and start timing.

        The cancel button is shown if asked for or if a cancel callback is set.
        """
        self._start = self._clock()
        self.cancelled = False
        self.cancel_visible = self.cancel_callback is not None or with_cancel_button
        self.shown = True
        self.etc_text = self.time_text()

    def hide(self) -> None:
        """Hide the meter."""
        self.shown = False

    def reset(self) -> None:
        """Restart timing and set the progress back to zero."""
        self._start = self._clock()
        self.update(0.0)

    def update(self, value: float) -> bool:
        """Set the progress to ``value``; return whether cancel was pressed."""
        self.progress.value = value
        self.etc_text = self.time_text()
        return self.cancelled

    def cancel(self) -> None:
        """Press the cancel button."""
        self.cancelled = True
        if self.cancel_callback is not None:
            self.cancel_callback()

    def time_text(self) -> str:
        """Elapsed and estimated remaining time, or ``""`` when not shown.

        With no progress made the remaining time cannot be estimated and
        shows as zero.
        """
        if not (self.show_completion_time and self.shown):
            return ""
        elapsed = self._clock() - self._start
        value = self.progress.value
        remaining = elapsed / value - elapsed + 1.0 if value else 0.0
        if not math.isfinite(remaining):
            remaining = 0.0
        eh, em, es = secs_to_hms(elapsed)
        rh, rm, rs = secs_to_hms(remaining)
        return TIME_FORMAT.format(eh, em, es, rh, rm, rs)