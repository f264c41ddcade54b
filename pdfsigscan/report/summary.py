"""
Display-oriented summaries of detection results.

Maps DetectionResult/SignatureInfo to status strings and icon identifiers,
answers the basic structural validation question and batch-processes files.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, Any, Iterable, List, Optional, Union

from pdfsigscan.analyze.signatures import (
    DetectionResult,
    SignatureInfo,
    detect_signatures,
)
from pdfsigscan.core.config import Config, get_config
from pdfsigscan.core.constants import (
    ICON_QUALIFIED_ISSUER,
    ICON_QUALIFIED_TYPE,
    ICON_GENERIC,
    MSG_NO_SIGNATURES,
    SummaryStatus,
    ValidationMethod,
)
from pdfsigscan.core.logging import get_logger
from pdfsigscan.core.pdf_source import is_pdf

logger = get_logger()


@dataclass
class SignatureDisplay:
    signer: str
    type: str
    issuer: str
    date: str
    icon: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SignatureSummary:
    status: SummaryStatus
    message: str
    count: Optional[int] = None
    signatures: List[SignatureDisplay] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'status': self.status.value,
            'message': self.message,
        }
        if self.status == SummaryStatus.SIGNED:
            result['count'] = self.count
            result['signatures'] = [s.to_dict() for s in self.signatures]
        return result


@dataclass
class StructuralValidation:
    success: bool
    error: Optional[str] = None
    validation_method: Optional[ValidationMethod] = None
    signatures_valid: Optional[bool] = None
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {'success': False, 'error': self.error}

        return {
            'success': True,
            'validation_method': self.validation_method.value,
            'signatures_valid': self.signatures_valid,
            'note': self.note,
        }


def signature_icon(info: SignatureInfo, config: Optional[Config] = None) -> str:
    """Icon identifier for one signature"""
    config = config or get_config()

    if config.summary.icon_issuer_keyword in info.certificate_issuer:
        return ICON_QUALIFIED_ISSUER

    if info.type == config.detection.qualified_type:
        return ICON_QUALIFIED_TYPE

    return ICON_GENERIC


def summarize(result: DetectionResult, config: Optional[Config] = None) -> SignatureSummary:
    """Map a detection result to a display summary"""
    config = config or get_config()

    if not result.success:
        return SignatureSummary(status=SummaryStatus.ERROR, message=result.error or "")

    if not result.has_signatures:
        return SignatureSummary(
            status=SummaryStatus.UNSIGNED,
            message=config.summary.unsigned_message,
        )

    signatures = [
        SignatureDisplay(
            signer=sig.signer,
            type=sig.type,
            issuer=sig.certificate_issuer,
            date=sig.date.formatted if sig.date else config.summary.unknown_date,
            icon=signature_icon(sig, config),
        )
        for sig in result.signatures
    ]

    return SignatureSummary(
        status=SummaryStatus.SIGNED,
        message=config.summary.signed_message,
        count=result.signature_count,
        signatures=signatures,
    )


def get_signature_summary(
    pdf_path: Union[str, Path],
    config: Optional[Config] = None,
) -> SignatureSummary:
    """Detect and summarize signatures of one file"""
    config = config or get_config()
    return summarize(detect_signatures(pdf_path, config.detection), config)


def validate_signature(
    pdf_path: Union[str, Path],
    config: Optional[Config] = None,
) -> StructuralValidation:
    """
    Basic structural validation

    Reports signatures as valid whenever signature structures are present.
    This is an assumption, not a cryptographic check.
    """
    config = config or get_config()
    detection = detect_signatures(pdf_path, config.detection)

    if not detection.success or not detection.has_signatures:
        return StructuralValidation(success=False, error=MSG_NO_SIGNATURES)

    return StructuralValidation(
        success=True,
        validation_method=ValidationMethod.BASIC_STRUCTURE,
        signatures_valid=True,
        note=config.summary.validation_note,
    )


def batch_detect_signatures(
    pdf_paths: Iterable[Union[str, Path]],
    config: Optional[Config] = None,
) -> Dict[str, SignatureSummary]:
    """
    Summarize several files, keyed by file name

    Files without a %PDF- header are reported as skipped. Files sharing a
    name keep the last result.
    """
    config = config or get_config()
    results: Dict[str, SignatureSummary] = {}

    for pdf_path in pdf_paths:
        filename = Path(pdf_path).name

        if filename in results:
            logger.warning(f"Duplicate file name in batch, overwriting result: {filename}")

        if not is_pdf(pdf_path):
            results[filename] = SignatureSummary(
                status=SummaryStatus.SKIPPED,
                message=config.summary.not_pdf_message,
            )
            continue

        results[filename] = get_signature_summary(pdf_path, config)

    return results
