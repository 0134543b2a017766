"""
Output Buffer
Captures a render and emits it, filtered, when the scope ends
"""
import io
from typing import Callable, Optional, TextIO


class OutputBuffer:
    """
    Scoped output capture

    Everything written inside the `with` block is kept in memory. When the
    block exits, normally or through an exception, the captured text goes
    through the callback and is written to the sink.

    Example:
        with OutputBuffer(sys.stdout, str.upper) as buffer:
            buffer.write('hello')
        # HELLO written to stdout
    """

    def __init__(self, sink: TextIO, callback: Optional[Callable[[str], str]] = None):
        self.sink = sink
        self.callback = callback
        self._buffer: Optional[io.StringIO] = None

    @property
    def active(self) -> bool:
        return self._buffer is not None

    def __enter__(self) -> 'OutputBuffer':
        if self.active:
            raise RuntimeError("Output buffer already started")
        self._buffer = io.StringIO()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.end_flush()
        return False

    def write(self, text: str) -> int:
        if not self.active:
            raise RuntimeError("Output buffer is not active")
        return self._buffer.write(text)

    def flush(self):
        """Kept in memory until the scope ends"""

    def get_contents(self) -> str:
        return self._buffer.getvalue() if self.active else ''

    def end_flush(self):
        """Filter the captured text, write it to the sink and stop capturing"""
        if not self.active:
            return

        buffer, self._buffer = self._buffer, None
        contents = buffer.getvalue()
        buffer.close()

        if self.callback is not None:
            contents = self.callback(contents)

        if contents:
            self.sink.write(contents)
            if hasattr(self.sink, 'flush'):
                self.sink.flush()
