# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: VectorFileLoader
# -----------------------------------------------------------------------------
import gzip
import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from utility.exceptions import ParseError, VectorFileIOError
from utility.logging_utils import get_class_logger


class VectorFileLoader:
    """
    Opens embedding dumps from the local filesystem.

    Provides:
      - open_stream(): a binary stream, gunzipped when the file is compressed

    Read failures inside the ``with`` block surface as VectorFileIOError;
    a compressed stream that ends early surfaces as ParseError.
    """

    def __init__(self, *, logger: logging.Logger | None = None):
        self.logger = logger or get_class_logger(self.__class__)

    @contextmanager
    def open_stream(self, path: str, compressed: bool = False) -> Iterator[BinaryIO]:
        start_time = time.time()
        file_path = Path(path)

        try:
            raw = open(file_path, "rb")
        except OSError as e:
            self.logger.error("Cannot open vectors file '%s': %s", file_path, e)
            raise VectorFileIOError(f"cannot open vectors file '{file_path}': {e}", path=str(file_path)) from e

        self.logger.info(
            "Opened vectors file '%s' (%d bytes, compressed=%s)",
            file_path,
            file_path.stat().st_size,
            compressed,
        )

        stream: BinaryIO = gzip.GzipFile(fileobj=raw, mode="rb") if compressed else raw
        try:
            yield stream
        except EOFError as e:
            raise ParseError(f"compressed stream '{file_path}' ended unexpectedly: {e}") from e
        except VectorFileIOError:
            raise
        except OSError as e:
            self.logger.error("Failed reading vectors file '%s': %s", file_path, e)
            raise VectorFileIOError(f"failed reading vectors file '{file_path}': {e}", path=str(file_path)) from e
        finally:
            if stream is not raw:
                stream.close()
            raw.close()
            elapsed = (time.time() - start_time) * 1000.0
            self.logger.info("Closed vectors file '%s' (%.1f ms)", file_path, elapsed)
