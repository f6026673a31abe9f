"""Conversion history owned by the caller.

The engines hold no state; a ``ConversionHistory`` is created by whoever
drives conversions and passed to ``perform_conversion``.
"""

from collections import deque
from datetime import datetime
from typing import Iterator

from pydantic import BaseModel, ConfigDict

from textconvert.core.conversions import convert
from textconvert.core.types import ConversionId
from textconvert.utils.constants import Constants


class HistoryEntry(BaseModel):
    """One completed conversion."""

    model_config = ConfigDict(frozen=True)

    id: int  # millisecond creation timestamp, unique within its history
    input: str
    output: str
    conversion_id: ConversionId
    timestamp: datetime

    def preview(self, length: int = Constants.HISTORY_PREVIEW_LENGTH) -> str:
        return f"{self.input[:length]}..."


class ConversionHistory:
    """Bounded, newest-first log of conversions."""

    def __init__(self, capacity: int = Constants.HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)
        self._last_id = 0

    def _next_id(self, now: datetime) -> int:
        entry_id = max(int(now.timestamp() * 1000), self._last_id + 1)
        self._last_id = entry_id
        return entry_id

    def record(
        self,
        conversion_id: ConversionId,
        input_text: str,
        output_text: str,
        now: datetime | None = None,
    ) -> HistoryEntry:
        """Add an entry at the front, evicting the oldest once full."""
        now = now or datetime.now()
        entry = HistoryEntry(
            id=self._next_id(now),
            input=input_text,
            output=output_text,
            conversion_id=conversion_id,
            timestamp=now,
        )
        self._entries.appendleft(entry)
        return entry

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    @property
    def latest(self) -> HistoryEntry | None:
        return self._entries[0] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)


def perform_conversion(
    conversion_id: ConversionId | str,
    text: str,
    history: ConversionHistory,
) -> str | None:
    """Convert text and log it in history.

    Blank input is ignored: nothing is converted or recorded.

    Args:
        conversion_id: Conversion to apply
        text: Current input text
        history: Caller-owned history to append to

    Returns:
        Converted text, or None for blank input

    Raises:
        ValueError: If conversion_id names no conversion
    """
    conversion_id = ConversionId(conversion_id)
    if not text.strip():
        return None
    output = convert(conversion_id, text)
    history.record(conversion_id, text, output)
    return output
