import logging
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)


class StringSequence:
    """
    A growable sequence of strings. No slot is ever None: absent objects
    are stored as the text "null".
    """

    NULL_TEXT = "null"

    def __init__(self):
        self._values: list[str] = []

    def copy(self) -> list[str]:
        return list(self._values)

    def size(self) -> int:
        return len(self._values)

    def append(self, text: Optional[str]) -> None:
        """
        Appends text at the end. None is stored as "null".
        """
        self._values.append(self.NULL_TEXT if text is None else text)

    def remove_all_of(self, text: str) -> None:
        """
        Removes every element equal to text (case-sensitive).
        """
        self._values = [v for v in self._values if v != text]

    def count_occurrences_case_insensitive(self, text: str) -> int:
        folded = text.casefold()
        return sum(1 for v in self._values if v.casefold() == folded)

    def sort_lexicographic(self) -> None:
        self._values.sort()

    def reset_from_objects(self, objects: Optional[Iterable[Any]]) -> None:
        """
        Replaces the contents with str() of each object, in order.
        A None collection leaves the sequence empty.
        """
        if objects is None:
            self._values = []
            logger.debug("String sequence reset from None, now empty")
            return

        self._values = [self.NULL_TEXT if obj is None else str(obj) for obj in objects]
        logger.debug("String sequence reset with %d values", len(self._values))
