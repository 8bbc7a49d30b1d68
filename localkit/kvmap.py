"""A string-keyed hash map with separate chaining and djb2 hashing."""

from typing import Any, Iterator, List, Optional, Tuple

_DEFAULT_SLOTS = 100
_INITIAL_HASH = 7691
_U64_MASK = (1 << 64) - 1


def _require_key(key) -> str:
    if not isinstance(key, str):
        raise TypeError(f"key must be a string, not {type(key).__name__}")
    return key


def hash_djb2(key: str) -> int:
    """Hash key with djb2 seeded at 7691, wrapping to 64 bits.

    Bytes are taken from the UTF-8 encoding and read as signed chars.
    """
    _require_key(key)
    value = _INITIAL_HASH
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & _U64_MASK
    return value


class KVMap:
    """A fixed-slot hash map from strings to arbitrary values."""

    def __init__(self, slots: int = _DEFAULT_SLOTS) -> None:
        if slots <= 0:
            raise ValueError("a map needs at least one slot")
        self._slots = slots
        self._buckets: List[List[List[Any]]] = [[] for _ in range(slots)]
        self._size = 0

    @property
    def slots(self) -> int:
        """Number of hash slots."""
        return self._slots

    def _bucket(self, key: str) -> List[List[Any]]:
        return self._buckets[hash_djb2(key) % self._slots]

    @staticmethod
    def _position(bucket: List[List[Any]], key: str) -> Optional[int]:
        return next(
            (pos for pos, (entry_key, _) in enumerate(bucket) if entry_key == key),
            None,
        )

    def insert(self, key: str, value: Any) -> None:
        """Add key with value; an existing key is left untouched."""
        bucket = self._bucket(_require_key(key))
        if self._position(bucket, key) is not None:
            return
        bucket.append([key, value])
        self._size += 1

    def force_insert(self, key: str, value: Any) -> None:
        """Add key with value, replacing the value of an existing key."""
        bucket = self._bucket(_require_key(key))
        pos = self._position(bucket, key)
        if pos is None:
            bucket.append([key, value])
            self._size += 1
        else:
            bucket[pos][1] = value

    def get(self, key: str) -> Any:
        """The value stored under key, or None."""
        bucket = self._bucket(_require_key(key))
        pos = self._position(bucket, key)
        return None if pos is None else bucket[pos][1]

    def retrieve(self, key: str) -> Any:
        """Remove key and return its value, or None if it is absent."""
        bucket = self._bucket(_require_key(key))
        pos = self._position(bucket, key)
        if pos is None:
            return None
        _, value = bucket.pop(pos)
        self._size -= 1
        return value

    def remove(self, key: str) -> None:
        """Remove key if present."""
        self.retrieve(key)

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield (key, value) pairs in slot order, then insertion order."""
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value

    def __contains__(self, key) -> bool:
        if not isinstance(key, str):
            return False
        return self._position(self._bucket(key), key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def __repr__(self) -> str:
        return f"KVMap({dict(self.items())!r})"