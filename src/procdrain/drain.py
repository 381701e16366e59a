"""Read one output stream to exhaustion on its own thread.

A child whose stdout and stderr are both pipes will block as soon as either
kernel buffer fills. Reading the streams one after the other can therefore
deadlock; each stream gets its own StreamDrain instead, and the caller joins
both before looking at the results.
"""

import io
import threading
from dataclasses import dataclass

from procdrain.errors import DrainError


@dataclass
class DrainResult:
    name: str
    text: str
    error: DrainError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _as_text(stream, encoding: str | None):
    if isinstance(stream, io.TextIOBase):
        return stream
    return io.TextIOWrapper(stream, encoding=encoding, errors="replace", newline=None)


def _close_quietly(stream) -> None:
    try:
        stream.close()
    except (OSError, ValueError):
        pass  # Close failures are never surfaced


class StreamDrain(threading.Thread):
    """Thread that accumulates every line of a stream into a DrainResult.

    Line terminators (\\n, \\r\\n, \\r) are normalized to a single \\n and an
    unterminated last line still gets one. A read failure stops the drain and
    is recorded on the result next to whatever was read before it. The stream
    is always closed.
    """

    def __init__(self, stream, name: str, encoding: str | None = None):
        super().__init__(name=f"drain-{name}", daemon=True)
        self.stream = stream
        self.stream_name = name
        self.encoding = encoding
        self._result: DrainResult | None = None

    def run(self) -> None:
        lines: list[str] = []
        error = None
        reader = self.stream
        try:
            reader = _as_text(self.stream, self.encoding)
            for line in reader:
                if line.endswith("\n"):
                    line = line[:-1]
                lines.append(line)
                lines.append("\n")
        except (OSError, ValueError, LookupError) as e:
            error = DrainError(self.stream_name, e)
        finally:
            _close_quietly(reader)
        self._result = DrainResult(name=self.stream_name, text="".join(lines), error=error)

    @property
    def result(self) -> DrainResult:
        """The drained content. Only available once the thread has finished."""
        if self._result is None or self.is_alive():
            raise RuntimeError(f"{self.name} has not finished or did not produce a result")
        return self._result


def drain(stream, name: str = "stream", encoding: str | None = None) -> DrainResult:
    """Drain a stream synchronously in the calling thread."""
    worker = StreamDrain(stream, name, encoding=encoding)
    worker.run()
    return worker.result
