"""
collaborators.py
----------------
Concrete sources and sinks for the pricing Pipeline.

    StaticSource  - fixed parameter set (the reference contract by default)
    QueueSource   - one parameter set per fetch, DataUnavailable when empty
    ConsoleSink   - "(price,delta,gamma)" lines, serialised across threads
    FrameSink     - collects results into a pandas DataFrame
"""

import sys
import threading
from collections import deque
from typing import Iterable, List, Optional, TextIO

import pandas as pd

from bsm_pipeline.errors import DataUnavailable, SinkWriteFailed
from bsm_pipeline.models.black_scholes import OptionParameters, PricingResult

# Process-wide: every ConsoleSink shares it, whatever stream it writes to.
_PRINT_LOCK = threading.Lock()

REFERENCE_CONTRACT = OptionParameters(
    strike=65.0, time_to_expiry=0.25, risk_free_rate=0.08, volatility=0.30)


class StaticSource:
    """Always returns the same parameters."""

    def __init__(self, params: Optional[OptionParameters] = None):
        self.params = params if params is not None else REFERENCE_CONTRACT

    def fetch(self) -> OptionParameters:
        return self.params


class QueueSource:
    """
    Hands out queued parameter sets in order, one per fetch.

    Raises DataUnavailable once the queue is exhausted.
    """

    def __init__(self, params: Iterable[OptionParameters] = ()):
        self._queue = deque(params)
        self._lock = threading.Lock()

    def put(self, params: OptionParameters) -> None:
        with self._lock:
            self._queue.append(params)

    def __len__(self) -> int:
        return len(self._queue)

    def fetch(self) -> OptionParameters:
        with self._lock:
            if not self._queue:
                raise DataUnavailable("No option parameters left in queue")
            return self._queue.popleft()


class ConsoleSink:
    """
    Writes each result as ``(price,delta,gamma)`` and ``end`` on finish.

    Numbers use six significant digits. Each line is written and flushed
    under the shared print lock so concurrent pipelines never interleave
    mid-line.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout is looked up at write time
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, line: str) -> None:
        try:
            with _PRINT_LOCK:
                self.stream.write(line + "\n")
                self.stream.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteFailed(f"Console write failed: {exc}") from exc

    def accept(self, result: PricingResult) -> None:
        self._emit("({:g},{:g},{:g})".format(*result.as_tuple()))

    def finish(self) -> None:
        self._emit("end")


class FrameSink:
    """
    Collects results as rows tagged with a run number.

    ``finish`` closes the current run; the next accepted result starts a
    new one.

    Usage:
        >>> sink = FrameSink()
        >>> Pipeline(StaticSource(), sink, PricingPolicy.CALL).run(60.0)
        >>> sink.to_frame()
    """

    COLUMNS = ["run", "price", "delta", "gamma"]

    def __init__(self):
        self._rows: List[tuple] = []
        self._run = 0
        self._lock = threading.Lock()

    @property
    def runs_completed(self) -> int:
        return self._run

    def accept(self, result: PricingResult) -> None:
        with self._lock:
            self._rows.append((self._run, *result.as_tuple()))

    def finish(self) -> None:
        with self._lock:
            self._run += 1

    def to_frame(self) -> pd.DataFrame:
        with self._lock:
            return pd.DataFrame(self._rows, columns=self.COLUMNS)
