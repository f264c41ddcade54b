"""
PDF Digital Signature Detection Module

Structural, best-effort signature detection over raw PDF bytes:
- Signature dictionary, signature field and PKCS#7 subfilter markers
- /ByteRange extraction (first occurrence only)
- Signer, signing date, issuer and OCSP hints for the first signature dictionary

No cryptographic verification and no object-graph parsing is performed.
A document signed several times is reported with at most one ByteRange and
one SignatureInfo.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Optional, Tuple, Union

from pdfsigscan.core.config import DetectionConfig, get_config
from pdfsigscan.core.constants import (
    SIGNATURE_DICT_MARKER,
    SIGNATURE_FIELD_MARKER,
    PKCS7_SUBFILTER_MARKER,
    UNKNOWN,
    MSG_FILE_NOT_FOUND,
    MSG_CANNOT_READ,
)
from pdfsigscan.core.decoding import ParsedDate, decode_pdf_string, parse_pdf_date
from pdfsigscan.core.exceptions import PDFNotFoundError, PDFReadError
from pdfsigscan.core.logging import get_logger
from pdfsigscan.core.patterns import (
    BYTE_RANGE,
    SIGNER_NAME,
    SIGNING_DATE,
    CERT_COMMON_NAME,
    first_group,
)
from pdfsigscan.core.pdf_source import read_pdf_bytes

logger = get_logger()

BufferLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class ByteRange:
    """The two byte spans covered by the signature digest"""
    start1: int
    length1: int
    start2: int
    length2: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SignatureInfo:
    """Attributes extracted from one signature dictionary"""
    type: str = UNKNOWN
    signer: str = UNKNOWN
    date: Optional[ParsedDate] = None
    certificate_issuer: str = UNKNOWN
    valid: Optional[bool] = None
    ocsp_validated: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'type': self.type,
            'signer': self.signer,
            'date': self.date.to_dict() if self.date else None,
            'certificate_issuer': self.certificate_issuer,
            'valid': self.valid,
        }
        if self.ocsp_validated is not None:
            result['ocsp_validated'] = self.ocsp_validated
        return result


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one scan; check success before trusting other fields"""
    success: bool
    error: Optional[str] = None
    has_signatures: bool = False
    signatures: Tuple[SignatureInfo, ...] = ()
    byte_range: Optional[ByteRange] = None

    @property
    def signature_count(self) -> int:
        return len(self.signatures)

    @classmethod
    def failure(cls, error: str) -> "DetectionResult":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {'success': False, 'error': self.error}

        return {
            'success': True,
            'has_signatures': self.has_signatures,
            'signatures': [s.to_dict() for s in self.signatures],
            'signature_count': self.signature_count,
            'byte_range': self.byte_range.to_dict() if self.byte_range else None,
        }


class PDFSignatureDetector:
    """
    Stateless signature detector.

    Holds only its DetectionConfig, so one instance can serve concurrent
    callers scanning independent buffers.
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.config = config or get_config().detection

    def scan(self, data: Optional[BufferLike]) -> DetectionResult:
        """
        Detect signature structures in a PDF byte buffer

        Args:
            data: Full file content, or None when the caller could not read it

        Returns:
            DetectionResult; never raises
        """
        if data is None:
            return DetectionResult.failure(MSG_CANNOT_READ)

        try:
            if not isinstance(data, bytes):
                data = bytes(data)

            signatures = []
            has_signatures = False

            if SIGNATURE_DICT_MARKER in data:
                has_signatures = True
                signatures.append(self.extract_metadata(data))

            if SIGNATURE_FIELD_MARKER in data:
                has_signatures = True

            if PKCS7_SUBFILTER_MARKER in data:
                has_signatures = True

            byte_range = self.find_byte_range(data)
            if byte_range is not None:
                has_signatures = True

            logger.debug(
                f"Scanned {len(data)} bytes: has_signatures={has_signatures}, "
                f"signatures={len(signatures)}, byte_range={byte_range}"
            )

            return DetectionResult(
                success=True,
                has_signatures=has_signatures,
                signatures=tuple(signatures),
                byte_range=byte_range,
            )

        except Exception as e:
            logger.error(f"Error scanning PDF for signatures: {e}")
            return DetectionResult.failure(str(e))

    def find_byte_range(self, data: bytes) -> Optional[ByteRange]:
        """First /ByteRange array in data, if any"""
        match = BYTE_RANGE.search(data)
        if match is None:
            return None

        start1, length1, start2, length2 = (int(g) for g in match.groups())
        return ByteRange(start1=start1, length1=length1, start2=start2, length2=length2)

    def extract_metadata(self, data: BufferLike) -> SignatureInfo:
        """
        Extract signer, date, issuer and OCSP hints

        Each attempt is independent; the CN= fallback only fills a signer the
        /Name field did not provide. Internal failures are logged and the
        fields gathered so far are returned.
        """
        fields: Dict[str, Any] = {}

        try:
            if not isinstance(data, bytes):
                data = bytes(data)

            raw_name = first_group(SIGNER_NAME, data)
            if raw_name is not None:
                fields['signer'] = decode_pdf_string(raw_name)

            raw_date = first_group(SIGNING_DATE, data)
            if raw_date is not None:
                fields['date'] = parse_pdf_date(raw_date, self.config.date_format)

            if self.config.issuer_marker.encode('utf-8') in data:
                fields['certificate_issuer'] = self.config.issuer_name
                fields['type'] = self.config.qualified_type

            raw_common_name = first_group(CERT_COMMON_NAME, data)
            if raw_common_name is not None:
                common_name = decode_pdf_string(raw_common_name)
                if common_name and fields.get('signer', UNKNOWN) == UNKNOWN:
                    fields['signer'] = common_name

            if self.config.ocsp_host.encode('utf-8') in data:
                fields['ocsp_validated'] = True

        except Exception as e:
            logger.warning(f"Error extracting signature info: {e}")

        return SignatureInfo(**fields)


def scan(data: Optional[BufferLike], config: Optional[DetectionConfig] = None) -> DetectionResult:
    """Convenience function: scan a byte buffer"""
    return PDFSignatureDetector(config).scan(data)


def extract_metadata(data: BufferLike, config: Optional[DetectionConfig] = None) -> SignatureInfo:
    """Convenience function: extract metadata of the first signature dictionary"""
    return PDFSignatureDetector(config).extract_metadata(data)


def detect_signatures(
    pdf_path: Union[str, Path],
    config: Optional[DetectionConfig] = None,
) -> DetectionResult:
    """
    Read a file and scan it

    Read failures become failed results rather than exceptions.
    """
    try:
        data = read_pdf_bytes(pdf_path)
    except PDFNotFoundError as e:
        logger.warning(str(e))
        return DetectionResult.failure(MSG_FILE_NOT_FOUND)
    except PDFReadError as e:
        logger.warning(str(e))
        return DetectionResult.failure(MSG_CANNOT_READ)

    return scan(data, config)
