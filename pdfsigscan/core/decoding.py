"""
PDF literal-string and date decoding helpers.

Both helpers are pure. String decoding is total: malformed escapes pass
through unchanged. Date parsing returns None when the literal does not fit
the PDF date layout, and also when the wall-clock value cannot be rendered.
"""

import codecs
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional, Union

from pdfsigscan.core.constants import (
    DEFAULT_DATE_DISPLAY_FORMAT,
    PDF_STRING_TRIM_CHARS,
)
from pdfsigscan.core.exceptions import ExtractionError
from pdfsigscan.core.logging import get_logger
from pdfsigscan.core.patterns import (
    PDF_DATE,
    UNICODE_ESCAPE,
    UNICODE_SURROGATE_PAIR,
)

logger = get_logger()

ISO_LAYOUT = "%Y-%m-%d %H:%M:%S"

LITERAL_ESCAPES = (
    ("\\(", "("),
    ("\\)", ")"),
    ("\\\\", "\\"),
)


@dataclass(frozen=True)
class ParsedDate:
    """Signing date as declared in the document; the offset is never applied"""
    formatted: str
    iso: str
    timezone: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def pdf_bytes_to_text(raw: bytes) -> str:
    """Turn matched raw bytes into text: UTF-16BE with BOM, else UTF-8, else Latin-1"""
    if raw.startswith(codecs.BOM_UTF16_BE):
        return raw[len(codecs.BOM_UTF16_BE):].decode('utf-16-be', errors='replace')
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        return raw.decode('latin-1')


def _decode_code_units(*units: str) -> Optional[str]:
    try:
        return bytes.fromhex(''.join(units)).decode('utf-16-be')
    except UnicodeDecodeError:
        return None


def _replace_pair(match) -> str:
    decoded = _decode_code_units(match.group(1), match.group(2))
    return match.group(0) if decoded is None else decoded


def _replace_unit(match) -> str:
    decoded = _decode_code_units(match.group(1))
    return match.group(0) if decoded is None else decoded


def decode_pdf_string(raw: Union[str, bytes]) -> str:
    """
    Decode a PDF literal string body.

    Restores \\( \\) and \\\\ (in that order), replaces \\uXXXX tokens by the
    UTF-16BE code unit they name and trims surrounding whitespace.

    Args:
        raw: String body without the enclosing parentheses

    Returns:
        Decoded text
    """
    text = pdf_bytes_to_text(raw) if isinstance(raw, bytes) else raw

    for escaped, literal in LITERAL_ESCAPES:
        text = text.replace(escaped, literal)

    if "\\u" in text:
        text = UNICODE_SURROGATE_PAIR.sub(_replace_pair, text)
        text = UNICODE_ESCAPE.sub(_replace_unit, text)

    return text.strip(PDF_STRING_TRIM_CHARS)


def format_wall_clock(iso: str, date_format: str = DEFAULT_DATE_DISPLAY_FORMAT) -> str:
    """Render an ISO-like timestamp as local wall-clock time"""
    try:
        return datetime.strptime(iso, ISO_LAYOUT).strftime(date_format)
    except (ValueError, TypeError) as e:
        raise ExtractionError(str(e), field="date", value=iso) from e


def parse_pdf_date(
    literal: Union[str, bytes],
    date_format: str = DEFAULT_DATE_DISPLAY_FORMAT,
) -> Optional[ParsedDate]:
    """
    Parse a PDF date literal of the form YYYYMMDDHHMMSS+HH'MM'.

    Args:
        literal: Date literal without the leading D:
        date_format: strftime layout for the display string

    Returns:
        ParsedDate, or None when the literal does not match or cannot be rendered
    """
    if isinstance(literal, bytes):
        literal = literal.decode('latin-1')

    match = PDF_DATE.fullmatch(literal)
    if match is None:
        return None

    year, month, day, hour, minute, second, tz_sign, tz_hour, tz_minute = match.groups()
    iso = f"{year}-{month}-{day} {hour}:{minute}:{second}"
    timezone = f"{tz_sign}{tz_hour}:{tz_minute}"

    try:
        formatted = format_wall_clock(iso, date_format)
    except ExtractionError as e:
        logger.warning(f"Error parsing PDF date: {e}")
        return None

    return ParsedDate(formatted=formatted, iso=iso, timezone=timezone)
