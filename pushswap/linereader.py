"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

BUFFER_SIZE = 1


class LineReader:
    """Yield the lines of *stream*, each with its trailing newline if it had one.

    The stream is read in chunks of *buffer_size*; data read past a newline
    is kept for the next line. Both text and binary streams are supported.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"

    def _fill(self) -> None:
        while self._stash is None or self._newline(self._stash) not in self._stash:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted.

        A read error discards any buffered data and is re-raised.
        """
        try:
            self._fill()
        except OSError:
            self._stash = None
            raise
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = stash.find(self._newline(stash))
        cut = len(stash) if end < 0 else end + 1
        line, rest = stash[:cut], stash[cut:]
        self._stash = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line