"""A growable byte buffer with a read/write position."""

from __future__ import annotations

import os


class Data:
    """A fixed-size byte buffer that can be read and written like a stream."""

    def __init__(self, content: bytes | bytearray | memoryview | int | None = None) -> None:
        self._buffer = bytearray()
        self._position = 0
        if isinstance(content, int):
            self.create(content)
        elif content is not None:
            self.assign(content)

    @property
    def size(self) -> int:
        """Number of bytes held."""
        return len(self._buffer)

    @property
    def position(self) -> int:
        """Current stream position."""
        return self._position

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Data):
            return self._buffer == other._buffer
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._buffer == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Data({bytes(self._buffer)!r})"

    def create(self, count: int) -> None:
        """Replace the content with ``count`` zero bytes and rewind."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._buffer = bytearray(count)
        self._position = 0

    def assign(self, content: bytes | bytearray | memoryview) -> None:
        """Replace the content with a copy of ``content`` and rewind."""
        self._buffer = bytearray(content)
        self._position = 0

    def resize(self, count: int) -> None:
        """Grow or shrink to ``count`` bytes, keeping the existing prefix."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self._buffer):
            self._buffer.extend(bytes(count - len(self._buffer)))
        else:
            del self._buffer[count:]
        self._position = min(self._position, count)

    def destroy(self) -> None:
        """Drop all content and rewind."""
        self._buffer = bytearray()
        self._position = 0

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes from the position; all remaining if negative."""
        end = len(self._buffer) if size < 0 else min(self._position + size, len(self._buffer))
        chunk = bytes(self._buffer[self._position:end])
        self._position += len(chunk)
        return chunk

    def write(self, buffer: bytes | bytearray | memoryview) -> int:
        """Overwrite bytes at the position without growing; return the count written."""
        data = bytes(buffer)
        amount = min(len(data), len(self._buffer) - self._position)
        if amount <= 0:
            return 0
        self._buffer[self._position:self._position + amount] = data[:amount]
        self._position += amount
        return amount

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the position and return it."""
        if whence == os.SEEK_SET:
            position = offset
        elif whence == os.SEEK_CUR:
            position = self._position + offset
        elif whence == os.SEEK_END:
            position = len(self._buffer) + offset
        else:
            raise ValueError("Bad seek direction")

        if position < 0 or position > len(self._buffer):
            raise ValueError("Bad seek offset")

        self._position = position
        return position