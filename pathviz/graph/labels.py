"""
Label allocator for node display identifiers.

Labels are drawn from a fixed enumeration of 156 symbols in this order:
A..Z, A'..Z', A''..Z'', a..z, a'..z', a''..z''. The allocator always hands
out the lowest free label and can reclaim labels of deleted or renamed nodes.
"""

from __future__ import annotations

import logging
import re

from pathviz.config import LABEL_LETTERS, LABEL_PATTERN, LABEL_SUFFIXES, MAX_NODES

logger = logging.getLogger(__name__)

ALL_LABELS: tuple[str, ...] = tuple(
    letter + suffix
    for letters in LABEL_LETTERS
    for suffix in LABEL_SUFFIXES
    for letter in letters
)

_LABEL_RE = re.compile(LABEL_PATTERN)
_LABEL_INDEX = {label: i for i, label in enumerate(ALL_LABELS)}


class LabelAllocator:
    """
    Issues unique, reclaimable node labels.

    Each Graph owns its own allocator, so several graphs can coexist
    without sharing label state.
    """

    def __init__(self) -> None:
        self._taken = [False] * len(ALL_LABELS)

    @staticmethod
    def is_valid(label: str) -> bool:
        """Whether the label matches the label syntax (A, A', A'', a, ...)."""
        return bool(_LABEL_RE.fullmatch(label))

    @property
    def issued(self) -> int:
        """Number of labels currently in use."""
        return sum(self._taken)

    @property
    def capacity(self) -> int:
        return MAX_NODES

    def is_taken(self, label: str) -> bool:
        index = _LABEL_INDEX.get(label)
        return index is not None and self._taken[index]

    def allocate(self) -> str | None:
        """
        Allocate the lowest free label.

        Returns:
            The label, or None if all labels are in use
        """
        for index, taken in enumerate(self._taken):
            if not taken:
                self._taken[index] = True
                return ALL_LABELS[index]

        logger.warning("Maximum number of nodes reached")
        return None

    def reserve(self, label: str) -> bool:
        """
        Lock a specific label (renamed or externally created nodes).

        Returns:
            False if the label is invalid or already taken
        """
        index = _LABEL_INDEX.get(label)
        if index is None or self._taken[index]:
            return False
        self._taken[index] = True
        return True

    def release(self, label: str) -> None:
        """Free a label so it can be handed out again. Unknown labels are ignored."""
        index = _LABEL_INDEX.get(label)
        if index is not None:
            self._taken[index] = False

    def clear(self) -> None:
        self._taken = [False] * len(ALL_LABELS)
