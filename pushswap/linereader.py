"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline kept.

    The stream is read ``buffer_size`` units at a time; text read past a
    newline is kept for the following call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        stash = self._stash
        while True:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            stash = chunk if stash is None else stash + chunk
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
            if newline in chunk:
                break
        return stash

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, ending with its newline if it has one, or None at the end."""
        try:
            text = self._fill()
        except OSError:
            self._stash = None
            raise
        if text is None:
            return None
        newline = b"\n" if isinstance(text, bytes) else "\n"
        line, sep, rest = text.partition(newline)
        self._stash = rest if rest else None
        return line + sep

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line