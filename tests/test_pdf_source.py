import pytest

from pdfsigscan.core.exceptions import PDFNotFoundError, PDFReadError
from pdfsigscan.core.pdf_source import is_pdf, read_pdf_bytes

from .samples import SIGNED_PDF


def test_read_pdf_bytes(write_file):
    path = write_file("signed.pdf", SIGNED_PDF)
    assert read_pdf_bytes(path) == SIGNED_PDF
    assert read_pdf_bytes(str(path)) == SIGNED_PDF


def test_read_pdf_bytes_missing(tmp_path):
    with pytest.raises(PDFNotFoundError) as exc_info:
        read_pdf_bytes(tmp_path / "missing.pdf")
    assert str(exc_info.value).startswith("File not found")
    assert exc_info.value.path == tmp_path / "missing.pdf"


def test_read_pdf_bytes_directory(tmp_path):
    with pytest.raises(PDFReadError) as exc_info:
        read_pdf_bytes(tmp_path)
    assert str(exc_info.value).startswith("Cannot read file")


@pytest.mark.parametrize('content, expected', [
    (SIGNED_PDF, True),
    (b"%PDF-", True),
    (b"%PDF", False),
    (b"", False),
    (b" %PDF-1.7", False),
    (b"PK\x03\x04", False),
])
def test_is_pdf(write_file, content, expected):
    assert is_pdf(write_file("candidate.bin", content)) is expected


def test_is_pdf_missing_and_directory(tmp_path):
    assert not is_pdf(tmp_path / "missing.pdf")
    assert not is_pdf(tmp_path)
