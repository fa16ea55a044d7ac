"""Day 6: tuning trouble (start-of-packet and start-of-message markers)."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Optional

logger = logging.getLogger(__name__)

PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


def find_marker(stream: str, size: int) -> Optional[int]:
    """Return the 1-based position ending the first window of `size` distinct characters."""
    if size <= 0 or len(stream) < size:
        return None
    window = Counter(stream[:size])
    if len(window) == size:
        return size
    for end in range(size, len(stream)):
        dropped = stream[end - size]
        window[dropped] -= 1
        if not window[dropped]:
            del window[dropped]
        window[stream[end]] += 1
        if len(window) == size:
            return end + 1
    return None


def _solve(text: str, size: int) -> Optional[int]:
    position = find_marker(text.strip(), size)
    if position is None:
        logger.warning("no window of %d distinct characters", size)
    return position


def part_one(text: str) -> Optional[int]:
    return _solve(text, PACKET_MARKER_SIZE)


def part_two(text: str) -> Optional[int]:
    return _solve(text, MESSAGE_MARKER_SIZE)
