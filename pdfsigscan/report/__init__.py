"""Signature summaries, structural validation and batch processing"""

from pdfsigscan.report.summary import (
    SignatureSummary,
    SignatureDisplay,
    StructuralValidation,
    signature_icon,
    summarize,
    get_signature_summary,
    validate_signature,
    batch_detect_signatures,
)

__all__ = [
    'SignatureSummary',
    'SignatureDisplay',
    'StructuralValidation',
    'signature_icon',
    'summarize',
    'get_signature_summary',
    'validate_signature',
    'batch_detect_signatures',
]
