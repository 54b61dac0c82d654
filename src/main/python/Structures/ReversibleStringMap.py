import logging
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)


class ReversibleStringMap:
    """
    A str -> str mapping where each key is derived from its value:
    the key is always the value spelled backwards.

    Callers never pick keys. The one exception to the derived-key rule is
    uppercase_all_keys(), after which every key is the upper-cased reverse
    of its value.
    """

    NULL_TEXT = "null"

    def __init__(self):
        # Reversed value -> value, in insertion order
        self._entries: dict[str, str] = {}

    @staticmethod
    def _derive_key(value: str) -> str:
        return value[::-1]

    def insert(self, value: str) -> None:
        """
        Stores value under its reversed form, overwriting any previous
        value stored under the same key.
        """
        self._entries[self._derive_key(value)] = value

    def remove_by_key(self, key: str) -> None:
        self._entries.pop(key, None)

    def remove_by_value(self, value: str) -> None:
        """
        Removes the first entry (in insertion order) holding value, if any.
        """
        for key, stored in self._entries.items():
            if stored == value:
                del self._entries[key]
                return

    def reset_from_objects(self, objects: Iterable[Any]) -> None:
        """
        Clears the map and inserts str() of every object, in order.
        Raises TypeError if objects is None; the map is left untouched.
        """
        if objects is None:
            raise TypeError("Cannot reset map from None, expected an iterable of objects")

        texts = [self.NULL_TEXT if obj is None else str(obj) for obj in objects]
        self._entries.clear()
        for text in texts:
            self.insert(text)
        logger.debug("Map reset from %d objects, %d entries kept", len(texts), len(self._entries))

    def uppercase_all_keys(self) -> None:
        """
        Rewrites every key in upper case, keeping its value.
        Keys colliding once upper-cased keep the last value in insertion order.
        """
        upper: dict[str, str] = {}
        for key, value in self._entries.items():
            upper_key = key.upper()
            if upper_key in upper:
                logger.debug("Key %r collides on %r, dropping value %r", key, upper_key, upper[upper_key])
            upper[upper_key] = value
        self._entries = upper

    def sorted_values(self) -> list[str]:
        return sorted(self._entries.values())

    def sorted_keys_descending(self) -> list[str]:
        return sorted(self._entries, reverse=True)

    def first_key(self) -> Optional[str]:
        """
        Lexicographically smallest key, or None if the map is empty.
        """
        if not self._entries:
            return None
        return min(self._entries)

    def last_value(self) -> Optional[str]:
        """
        Lexicographically greatest value, or None if the map is empty.
        """
        if not self._entries:
            return None
        return max(self._entries.values())

    def uppercased_keys_view(self) -> list[str]:
        """
        Keys in upper case without touching the map. Collisions are
        kept, so the result has one item per entry.
        """
        return [key.upper() for key in self._entries]

    def distinct_value_count(self) -> int:
        return len(set(self._entries.values()))

    def contains_all_values(self, candidates: Iterable[str]) -> bool:
        if candidates is None:
            raise TypeError("Cannot compare against None, expected an iterable of strings")

        values = set(self._entries.values())
        for candidate in candidates:
            if candidate not in values:
                return False
        return True

    def contains_key(self, key: str) -> bool:
        return key in self._entries

    def contains_value(self, value: str) -> bool:
        return value in self._entries.values()

    def size(self) -> int:
        return len(self._entries)

    def export_mapping(self) -> dict[str, str]:
        """
        Returns a copy of the current key -> value pairs.
        """
        return self._entries.copy()
