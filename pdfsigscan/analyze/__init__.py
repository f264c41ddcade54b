"""PDF signature analysis modules"""

from pdfsigscan.analyze.signatures import (
    PDFSignatureDetector,
    DetectionResult,
    SignatureInfo,
    ByteRange,
    scan,
    extract_metadata,
    detect_signatures,
)

__all__ = [
    'PDFSignatureDetector',
    'DetectionResult',
    'SignatureInfo',
    'ByteRange',
    'scan',
    'extract_metadata',
    'detect_signatures',
]
