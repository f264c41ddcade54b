"""
pdfsigscan - Structural PDF digital signature detection
"""

__version__ = "0.1.0"
__author__ = "pdfsigscan Contributors"

from pdfsigscan.analyze.signatures import (
    PDFSignatureDetector,
    DetectionResult,
    SignatureInfo,
    ByteRange,
    scan,
    extract_metadata,
    detect_signatures,
)
from pdfsigscan.core.decoding import ParsedDate, decode_pdf_string, parse_pdf_date
from pdfsigscan.core.exceptions import (
    PDFSigScanError,
    PDFNotFoundError,
    PDFReadError,
    ExtractionError,
    ConfigurationError,
    ValidationError,
)

__all__ = [
    "PDFSignatureDetector",
    "DetectionResult",
    "SignatureInfo",
    "ByteRange",
    "ParsedDate",
    "scan",
    "extract_metadata",
    "detect_signatures",
    "decode_pdf_string",
    "parse_pdf_date",
    "PDFSigScanError",
    "PDFNotFoundError",
    "PDFReadError",
    "ExtractionError",
    "ConfigurationError",
    "ValidationError",
]
