"""
Accumulator for streaming summary responses.

The summary endpoint streams newline-delimited, tagged lines::

    key_sentences: ["First sentence.", "Second sentence."]
    delta: The article
    delta:  explains...

Chunks from the transport can split a line or a UTF-8 character anywhere, so
bytes are decoded incrementally and only complete lines are classified.
"""

import codecs
import json
import logging
from typing import Callable, List, NoReturn, Optional

from .._http.errors import InstaparserError
from ..types.responses import Summary

logger = logging.getLogger(__name__)

KEY_SENTENCES_TAG = "key_sentences:"
DELTA_TAG = "delta:"
DELTA_SEPARATOR = ": "

LineCallback = Callable[[str], None]


class SummaryStreamAccumulator:
    """
    Folds a streamed summary response into a Summary.

    Feed raw chunks to ``on_chunk`` in arrival order, then call ``on_end``
    for the result, or ``on_error`` if the transport failed. Every line is
    passed to ``callback`` before it is classified.

    Example:
        >>> accumulator = SummaryStreamAccumulator(print)
        >>> for chunk in response.iter_bytes():
        ...     accumulator.on_chunk(chunk)
        >>> summary = accumulator.on_end()
    """

    def __init__(self, callback: LineCallback):
        self._callback = callback
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self._key_sentences: List[str] = []
        self._overview = ""
        self._line_count = 0
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def on_chunk(self, chunk: bytes) -> None:
        """
        Consume one chunk of the response body.

        Raises:
            InstaparserError: If a complete ``key_sentences:`` line is malformed.
        """
        self._ensure_active()
        self._buffer += self._decoder.decode(chunk)

        *lines, self._buffer = self._buffer.split("\n")
        for line in lines:
            try:
                self._handle_line(line, final=False)
            except BaseException:
                self._finished = True
                raise

    def on_end(self) -> Summary:
        """Flush the leftover buffer and return the finished Summary."""
        self._ensure_active()
        self._buffer += self._decoder.decode(b"", final=True)
        self._finished = True

        if self._buffer.strip():
            self._handle_line(self._buffer, final=True)
        self._buffer = ""

        logger.debug(
            "Summary stream finished: %d lines, %d key sentences, %d overview chars",
            self._line_count,
            len(self._key_sentences),
            len(self._overview),
        )
        return Summary(key_sentences=self._key_sentences, overview=self._overview)

    def on_error(self, error: BaseException) -> NoReturn:
        """
        Abort on a transport failure.

        Raises:
            InstaparserError: Always, of kind TRANSPORT, wrapping ``error``.
        """
        self._finished = True
        raise InstaparserError.stream_failure(error) from error

    def _ensure_active(self) -> None:
        if self._finished:
            raise RuntimeError("summary stream has already finished")

    def _handle_line(self, line: str, *, final: bool) -> None:
        self._line_count += 1
        self._callback(line)

        # blank lines are forwarded but never classified
        if not line.strip():
            return

        if line.startswith(KEY_SENTENCES_TAG):
            sentences = self._parse_key_sentences(line, final=final)
            if sentences is not None:
                self._key_sentences = sentences
        elif line.startswith(DELTA_TAG):
            _, separator, delta = line.partition(DELTA_SEPARATOR)
            if separator and delta:
                self._overview += delta

    def _parse_key_sentences(self, line: str, *, final: bool) -> Optional[List[str]]:
        payload = line.split(":", 1)[1].strip()
        if not payload:
            return None

        try:
            sentences = json.loads(payload)
            if not isinstance(sentences, list) or not all(isinstance(s, str) for s in sentences):
                raise ValueError("key_sentences must be a JSON array of strings")
        except ValueError as e:
            # a truncated last line is tolerated, anything earlier is not
            if final:
                logger.debug("Ignoring malformed key_sentences in final line: %s", e)
                return None
            raise InstaparserError(
                "Unable to generate key sentences",
                status_code=412,
                original_error=e,
                details={"line": line},
            ) from e

        return sentences
