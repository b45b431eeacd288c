"""
dnapack - Sequence Files

Reading sequence text from disk.

Files are read whole and decoded as text; no format is assumed, so plain
runs of bases with arbitrary line wrapping load as one sequence. Storage
and decoding failures surface as SequenceLoadError.
"""

import os
import logging
from typing import Union

from .sequence import Sequence, SequenceLoadError

_LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

PathLike = Union[str, "os.PathLike[str]"]


def read_sequence_text(path: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Return the full decoded content of a file.

    Raises:
        SequenceLoadError: The file is missing, unreadable or not valid
            text in `encoding`.
    """
    try:
        with open(path, encoding=encoding) as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SequenceLoadError(os.fspath(path), exc) from exc

    _LOGGER.debug("Read %d characters from %s", len(content), path)
    return content


def load_sequence(path: PathLike, encoding: str = DEFAULT_ENCODING) -> Sequence:
    """Load a file and parse its content as a sequence."""
    sequence = Sequence.from_text_content(read_sequence_text(path, encoding))
    _LOGGER.debug("Loaded %d bases from %s", len(sequence), path)
    return sequence
