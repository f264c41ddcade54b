"""Byte-buffer provider: reads candidate PDF files for the scanner"""

from pathlib import Path
from typing import Union

from pdfsigscan.core.constants import PDF_MAGIC, PDF_HEADER_PEEK
from pdfsigscan.core.exceptions import PDFNotFoundError, PDFReadError
from pdfsigscan.core.logging import get_logger

logger = get_logger()

PathLike = Union[str, Path]


def read_pdf_bytes(path: PathLike) -> bytes:
    """
    Read the full content of a file into memory

    Args:
        path: Path to the candidate PDF

    Returns:
        File content

    Raises:
        PDFNotFoundError: If the file does not exist
        PDFReadError: If the file exists but cannot be read
    """
    path = Path(path)

    if not path.exists():
        raise PDFNotFoundError(path=path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise PDFReadError(path=path, reason=e.strerror or str(e)) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data


def is_pdf(path: PathLike) -> bool:
    """Check the %PDF- magic number at the start of the file"""
    path = Path(path)

    if not path.is_file():
        return False

    try:
        with open(path, 'rb') as f:
            header = f.read(PDF_HEADER_PEEK)
    except OSError as e:
        logger.debug(f"Cannot read header of {path}: {e}")
        return False

    return header.startswith(PDF_MAGIC)
