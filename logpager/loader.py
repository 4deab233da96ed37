"""Read plain-text files into memory for paging."""

from __future__ import annotations

import logging
import os

from .constants import PagerConstants

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Exception raised when a file cannot be read as text."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Error reading file {path}: {reason}")
        self.path = path
        self.reason = reason


def read_text_file(path: str, chunk_size: int = PagerConstants.READ_CHUNK_SIZE,
                   encoding: str = PagerConstants.FILE_ENCODING) -> str:
    """Read a whole file in chunks and return its decoded text.

    Either the complete content is returned or LoadError is raised; a
    partially read file is never handed to the caller.

    Args:
        path: Path of the file to read.
        chunk_size: Number of characters requested per read.
        encoding: Text encoding; undecodable bytes are an error.

    Raises:
        LoadError: If the file is missing, unreadable, a directory, or not
            valid text in the given encoding.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    chunks: list[str] = []
    try:
        with open(path, 'r', encoding=encoding, errors='strict', newline='') as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                chunks.append(chunk)
    except FileNotFoundError:
        raise LoadError(path, "no such file")
    except IsADirectoryError:
        raise LoadError(path, "is a directory")
    except PermissionError:
        raise LoadError(path, "permission denied")
    except UnicodeDecodeError as e:
        raise LoadError(path, f"not valid {encoding} text at byte {e.start}")
    except OSError as e:
        raise LoadError(path, e.strerror or str(e))

    text = ''.join(chunks)
    logger.debug(f"Read {len(text)} characters from {os.path.abspath(path)} "
                 f"in {len(chunks)} chunk(s)")
    return text
