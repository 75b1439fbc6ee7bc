"""
Copy-to-clipboard controller with time-boxed "copied" acknowledgments.

Each exportable item (a question index, or "all") is idle until a clipboard
write for it succeeds, then copied until its reset timer fires or the active
score changes. Changing the score resets every item at once.
"""

import asyncio
from enum import Enum
from typing import Optional, Sequence, Union

from cuecards.answers.export import QuestionNumbering, export_all, export_answer
from cuecards.clipboard.backends import Clipboard, ClipboardError
from cuecards.logging import get_logger

logger = get_logger(__name__)

ALL_ITEMS = "all"

ItemId = Union[int, str]


class CopyStatus(str, Enum):
    IDLE = "idle"
    COPIED = "copied"


class CopyStateMachine:
    """
    idle -> copied -> idle, per item.
    
    Reset timers are asyncio TimerHandles owned here, one per item. reset()
    cancels them all and bumps a generation counter; timers and writes
    started under an older generation do nothing when they complete.
    """

    def __init__(self, clipboard: Clipboard, reset_delay: float = 2.0):
        self.clipboard = clipboard
        self.reset_delay = reset_delay
        self._states: dict[ItemId, CopyStatus] = {}
        self._timers: dict[ItemId, asyncio.TimerHandle] = {}
        self._in_flight: set[ItemId] = set()
        self._generation = 0

    def status(self, item: ItemId) -> CopyStatus:
        return self._states.get(item, CopyStatus.IDLE)

    def is_disabled(self, item: ItemId) -> bool:
        """Copy is disabled while an item shows "copied" or is being written."""
        return self.status(item) is CopyStatus.COPIED or item in self._in_flight

    def statuses(self) -> dict[ItemId, CopyStatus]:
        return dict(self._states)

    async def copy(self, item: ItemId, text: str) -> bool:
        """
        Write text to the clipboard and acknowledge it for this item.
        
        Returns:
            True if the item moved to copied; False if the call was a no-op
            (item disabled, nothing to copy) or the write failed
        """
        if not text or self.is_disabled(item):
            return False
        
        generation = self._generation
        self._in_flight.add(item)
        try:
            await self.clipboard.write_text(text)
        except ClipboardError as e:
            logger.warning(f"Could not copy text for item {item!r}: {e}")
            return False
        finally:
            self._in_flight.discard(item)
        
        if generation != self._generation:
            logger.debug(f"Copy for item {item!r} finished after a reset; not acknowledged")
            return False
        
        self._states[item] = CopyStatus.COPIED
        loop = asyncio.get_running_loop()
        self._timers[item] = loop.call_later(
            self.reset_delay, self._expire, item, generation
        )
        return True

    def _expire(self, item: ItemId, generation: int) -> None:
        if generation != self._generation:
            return
        self._timers.pop(item, None)
        self._states[item] = CopyStatus.IDLE

    def reset(self) -> None:
        """Return every item to idle immediately and drop pending timers."""
        self._generation += 1
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()
        self._states.clear()


class ExportController:
    """
    Copy actions for one card shown at one active score.
    
    Formats answers with the export formatter and drives a CopyStateMachine.
    Selecting another score invalidates every acknowledgment, since text
    copied at the old score no longer matches what is shown.
    """

    def __init__(
        self,
        sample_answers: Sequence,
        clipboard: Clipboard,
        score: str,
        numbering: Optional[QuestionNumbering] = None,
        reset_delay: float = 2.0,
    ):
        self.sample_answers = list(sample_answers)
        self.score = score
        self.numbering = numbering
        self.copies = CopyStateMachine(clipboard, reset_delay=reset_delay)

    def status(self, item: ItemId) -> CopyStatus:
        return self.copies.status(item)

    def is_disabled(self, item: ItemId) -> bool:
        return self.copies.is_disabled(item)

    def statuses(self) -> dict[str, str]:
        """Status of every question and of "all", keyed by string id."""
        result = {
            str(index): self.copies.status(index).value
            for index in range(len(self.sample_answers))
        }
        result[ALL_ITEMS] = self.copies.status(ALL_ITEMS).value
        return result

    def select_score(self, score: str) -> None:
        """Switch score; all items go back to idle right away."""
        self.score = score
        self.copies.reset()

    async def copy_item(self, index: int) -> bool:
        """Copy one question's answer at the active score."""
        if not 0 <= index < len(self.sample_answers):
            raise IndexError(f"question index {index} out of range")
        
        text = export_answer(self.sample_answers, index, self.score, self.numbering)
        if text is None:
            return False
        return await self.copies.copy(index, text)

    async def copy_all(self) -> bool:
        """Copy every answer available at the active score."""
        text = export_all(self.sample_answers, self.score, self.numbering)
        return await self.copies.copy(ALL_ITEMS, text)
