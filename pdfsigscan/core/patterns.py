"""
Named byte patterns for signature detection and metadata extraction.

Every pattern runs over the raw file content. None of them understands PDF
object structure; they are independently testable heuristics.
"""

import re
from typing import Dict, Optional, Pattern


# /ByteRange [ n n n n ], four unsigned decimal integers
BYTE_RANGE = re.compile(
    rb'/ByteRange\s*\[\s*(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s*\]'
)

# /Name (literal string); escaped characters may appear inside the parentheses
SIGNER_NAME = re.compile(rb'/Name\s*\(((?:\\[\s\S]|[^\\)])+)\)')

# /M (D:YYYYMMDDHHMMSS+HH'MM')
SIGNING_DATE = re.compile(rb"/M\s*\(D:(\d{14}[+-]\d{2}'\d{2}')\)")

# X.509 common name up to the next comma
CERT_COMMON_NAME = re.compile(rb'CN=([^,]+)')

# Full PDF date literal without the D: prefix
PDF_DATE = re.compile(
    r"(\d{4})(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})([+-])(\d{2})'(\d{2})'",
    re.ASCII,
)

# \uD800-\uDBFF followed by \uDC00-\uDFFF
UNICODE_SURROGATE_PAIR = re.compile(
    r'\\u([dD][89abAB][0-9a-fA-F]{2})\\u([dD][c-fC-F][0-9a-fA-F]{2})'
)

UNICODE_ESCAPE = re.compile(r'\\u([0-9a-fA-F]{4})')


EXTRACTION_PATTERNS: Dict[str, Pattern[bytes]] = {
    'byte_range': BYTE_RANGE,
    'signer_name': SIGNER_NAME,
    'signing_date': SIGNING_DATE,
    'cert_common_name': CERT_COMMON_NAME,
}


def pattern_hits(data: bytes) -> Dict[str, int]:
    """Count matches of every named extraction pattern in data"""
    return {
        name: sum(1 for _ in pattern.finditer(data))
        for name, pattern in EXTRACTION_PATTERNS.items()
    }


def first_group(pattern: Pattern[bytes], data: bytes) -> Optional[bytes]:
    """Return the first capture group of the first match, or None"""
    match = pattern.search(data)
    if match is None:
        return None
    return match.group(1)
