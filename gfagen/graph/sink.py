"""Output sink selection: a file path or standard output."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

log = logging.getLogger(__name__)

STDOUT_SENTINEL = "-"


@contextmanager
def open_sink(destination: str | Path) -> Iterator[TextIO]:
    """Open the writable sink for a generation run.

    Only the literal "-" selects standard output, which is flushed but never
    closed. Any other value is a filesystem path, created or truncated, and
    written with "\\n" line endings on every platform.

    Raises:
        OSError: If the file cannot be created.
    """
    if str(destination) == STDOUT_SENTINEL:
        log.debug("Writing graph to stdout")
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    log.debug("Writing graph to %s", destination)
    with open(destination, "w", encoding="ascii", newline="") as f:
        yield f
