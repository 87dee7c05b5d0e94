"""Display helpers: typing-style reveal animation and clipboard copy."""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator

import pyperclip

logger = logging.getLogger(__name__)

REVEAL_DELAY = 0.05
COPY_NOTICE_SECONDS = 2.0


def reveal(text: str) -> Iterator[str]:
    """Yield the increasing prefixes of *text*, one character at a time.

    Stopping iteration (or calling ``close()``) aborts the reveal.
    """
    for i in range(1, len(text) + 1):
        yield text[:i]


def animate(
    text: str,
    render: Callable[[str], None],
    *,
    delay: float = REVEAL_DELAY,
    sleep: Callable[[float], None] | None = None,
    cancelled: Callable[[], bool] | None = None,
) -> int:
    """Render each prefix of *text*, pausing *delay* seconds in between.

    Returns the number of frames rendered.  If *cancelled* returns true
    before a frame, the animation stops there.
    """
    if sleep is None:
        sleep = time.sleep
    frames = 0
    steps = reveal(text)
    try:
        for prefix in steps:
            if cancelled is not None and cancelled():
                logger.debug("Reveal cancelled after %d frames", frames)
                break
            render(prefix)
            frames += 1
            sleep(delay)
    finally:
        steps.close()
    return frames


@dataclass(frozen=True)
class CopyNotice:
    """Transient "copied" acknowledgement shown after a clipboard write."""

    copied_at: float
    duration: float = COPY_NOTICE_SECONDS
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    @property
    def active(self) -> bool:
        return self.clock() - self.copied_at < self.duration


def copy_to_clipboard(
    text: str,
    *,
    clipboard: Callable[[str], None] | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> CopyNotice:
    """Write *text* to the system clipboard and return a copy notice.

    The write is fire-and-forget: a missing clipboard mechanism is logged
    and otherwise ignored.
    """
    if clipboard is None:
        clipboard = pyperclip.copy
    try:
        clipboard(text)
    except pyperclip.PyperclipException as exc:
        logger.warning("Clipboard unavailable: %s", exc)
    return CopyNotice(copied_at=clock(), clock=clock)
