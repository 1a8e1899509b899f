"""
Instaparser Streaming Module.

Provides the accumulator that turns a streamed summary response into a
Summary while forwarding each line to a caller callback.

Example:
    >>> from instaparser.streaming import SummaryStreamAccumulator
    >>> accumulator = SummaryStreamAccumulator(print)
    >>> for chunk in stream:
    ...     accumulator.on_chunk(chunk)
    >>> summary = accumulator.on_end()
    >>> print(summary.overview)
"""

from .accumulator import LineCallback, SummaryStreamAccumulator

__all__ = [
    "LineCallback",
    "SummaryStreamAccumulator",
]
