"""
bfi Runtime Environment

The executor's external collaborators: a byte source for ',' and a byte sink
for '.'. Both are agnostic to where bytes come from or go to.

Key classes:
- ByteSource / ByteSink: Protocols the executor depends on
- BytesSource, StreamSource: In-memory and file-object input
- BufferSink, StreamSink: In-memory and file-object output
- Environment: One source paired with one sink
"""

from __future__ import annotations

from typing import BinaryIO, Optional, Protocol


class ByteSource(Protocol):
    def read_byte(self) -> Optional[int]:
        """Return the next byte, or None at end of stream."""
        ...


class ByteSink(Protocol):
    def write_byte(self, value: int) -> None:
        ...


class BytesSource:
    """Input served from an in-memory buffer."""

    def __init__(self, data: bytes = b""):
        self.data = bytes(data)
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.position

    def read_byte(self) -> Optional[int]:
        if self.position >= len(self.data):
            return None
        value = self.data[self.position]
        self.position += 1
        return value


class StreamSource:
    """Input read one byte at a time from a binary file object."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_byte(self) -> Optional[int]:
        chunk = self.stream.read(1)
        if not chunk:
            return None
        return chunk[0]


class BufferSink:
    """Output collected in memory."""

    def __init__(self):
        self.buffer = bytearray()

    def write_byte(self, value: int) -> None:
        self.buffer.append(value)

    def getvalue(self) -> bytes:
        return bytes(self.buffer)

    def __len__(self) -> int:
        return len(self.buffer)


class StreamSink:
    """Output written to a binary file object, flushed per byte by default."""

    def __init__(self, stream: BinaryIO, autoflush: bool = True):
        self.stream = stream
        self.autoflush = autoflush
        self.written = 0

    def write_byte(self, value: int) -> None:
        self.stream.write(bytes((value,)))
        self.written += 1
        if self.autoflush:
            self.stream.flush()


class Environment:
    """
    Input and output for a run.

    Per-run collaborators only; the environment holds no interpreter state.
    """

    def __init__(self, source: ByteSource = None, sink: ByteSink = None):
        self.source = source if source is not None else BytesSource()
        self.sink = sink if sink is not None else BufferSink()

    @classmethod
    def from_bytes(cls, data: bytes = b"") -> "Environment":
        """In-memory input with captured output."""
        return cls(BytesSource(data), BufferSink())

    @classmethod
    def from_streams(cls, stdin: BinaryIO, stdout: BinaryIO,
                     autoflush: bool = True) -> "Environment":
        return cls(StreamSource(stdin), StreamSink(stdout, autoflush))

    def captured_output(self) -> bytes:
        """Bytes written so far, when the sink keeps them."""
        if isinstance(self.sink, BufferSink):
            return self.sink.getvalue()
        return b""

    def output_size(self) -> int:
        if isinstance(self.sink, BufferSink):
            return len(self.sink)
        return getattr(self.sink, "written", 0)
