# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: WordVectorReader
# -----------------------------------------------------------------------------
import logging
from typing import BinaryIO, Iterator, Optional, Tuple

import numpy as np

from utility.exceptions import ParseError
from utility.logging_utils import get_class_logger

# word2vec binary vectors are little-endian float32
_FLOAT_DTYPE = np.dtype("<f4")
_WORD_SEPARATOR = b" "
_LEADING_WHITESPACE = (b"\n", b"\r", b"\t")


class WordVectorReader:
    """
    Single-pass reader over a word2vec dump.

    The header line ``"<vocab_size> <dimension>"`` is parsed on construction;
    iterating then yields ``(word, raw_vector)`` pairs lazily until ``limit``
    records have been read or the declared vocabulary is exhausted.

    Supports the binary format (word, a space, then ``dimension`` little-endian
    float32 values) and the text format (one whitespace-separated line per word).
    The reader is an iterator: once consumed it cannot be restarted.
    """

    def __init__(
            self,
            stream: BinaryIO,
            *,
            limit: Optional[int] = None,
            binary: bool = True,
            logger: logging.Logger | None = None,
    ):
        self.stream = stream
        self.binary = binary
        self.logger = logger or get_class_logger(self.__class__)

        self.vocab_size, self.dimension = self._read_header()
        self.limit = limit
        self.expected = self.vocab_size if limit is None else min(limit, self.vocab_size)
        self.records_read = 0

        self.logger.info(
            "Vector header: vocab_size=%d, dimension=%d, format=%s (reading %d records)",
            self.vocab_size,
            self.dimension,
            "binary" if binary else "text",
            self.expected,
        )

    # -------------------------------------------------------------------------
    def __iter__(self) -> Iterator[Tuple[str, np.ndarray]]:
        return self

    def __next__(self) -> Tuple[str, np.ndarray]:
        if self.records_read >= self.expected:
            raise StopIteration

        record = self._read_binary_record() if self.binary else self._read_text_record()
        if record is None:
            raise ParseError(
                f"stream ended after {self.records_read} records, "
                f"header declared {self.vocab_size}",
                record=self.records_read,
            )

        self.records_read += 1
        if self.records_read % 50000 == 0:
            self.logger.debug("Read %d/%d records", self.records_read, self.expected)
        return record

    # -------------------------------------------------------------------------
    def _read_header(self) -> Tuple[int, int]:
        line = self.stream.readline()
        if not line:
            raise ParseError("missing header line")

        try:
            fields = line.decode("ascii").split()
        except UnicodeDecodeError as e:
            raise ParseError(f"header is not ASCII: {line[:64]!r}") from e

        if len(fields) != 2:
            raise ParseError(f"header must be '<vocab_size> <dimension>', got {line[:64]!r}")

        try:
            vocab_size, dimension = int(fields[0]), int(fields[1])
        except ValueError as e:
            raise ParseError(f"header values must be integers, got {line[:64]!r}") from e

        if vocab_size < 0 or dimension <= 0:
            raise ParseError(f"invalid header values: vocab_size={vocab_size}, dimension={dimension}")

        return vocab_size, dimension

    def _read_binary_record(self) -> Optional[Tuple[str, np.ndarray]]:
        word = self._read_word()
        if word is None:
            return None

        nbytes = self.dimension * _FLOAT_DTYPE.itemsize
        data = self.stream.read(nbytes)
        if len(data) != nbytes:
            raise ParseError(
                f"truncated vector for {word!r}: expected {nbytes} bytes, got {len(data)}",
                record=self.records_read,
            )

        vector = np.frombuffer(data, dtype=_FLOAT_DTYPE).astype(np.float32)
        return word, self._check_finite(word, vector)

    def _read_word(self) -> Optional[str]:
        """Read bytes up to the separating space, skipping leading newlines."""
        buf = bytearray()
        while True:
            ch = self.stream.read(1)
            if not ch:
                if buf:
                    raise ParseError(f"truncated record after word bytes {bytes(buf)!r}", record=self.records_read)
                return None
            if ch == _WORD_SEPARATOR:
                if buf:
                    return buf.decode("utf-8", errors="replace")
                continue
            if ch in _LEADING_WHITESPACE and not buf:
                continue
            buf += ch

    def _read_text_record(self) -> Optional[Tuple[str, np.ndarray]]:
        while True:
            line = self.stream.readline()
            if not line:
                return None
            fields = line.decode("utf-8", errors="replace").split()
            if fields:
                break

        word, values = fields[0], fields[1:]
        if len(values) != self.dimension:
            raise ParseError(
                f"vector for {word!r} has {len(values)} values, expected {self.dimension}",
                record=self.records_read,
            )

        try:
            vector = np.asarray([float(v) for v in values], dtype=np.float32)
        except ValueError as e:
            raise ParseError(f"non-numeric value in vector for {word!r}", record=self.records_read) from e

        return word, self._check_finite(word, vector)

    def _check_finite(self, word: str, vector: np.ndarray) -> np.ndarray:
        if not np.all(np.isfinite(vector)):
            raise ParseError(f"non-finite value in vector for {word!r}", record=self.records_read)
        return vector
