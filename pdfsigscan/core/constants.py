"""Shared constants for pdfsigscan"""

from enum import Enum

PDF_MAGIC = b"%PDF-"
PDF_HEADER_PEEK = 8

# Raw-byte markers, matched as literal substrings
SIGNATURE_DICT_MARKER = b"/Type/Sig"
SIGNATURE_FIELD_MARKER = b"/FT/Sig"
PKCS7_SUBFILTER_MARKER = b"adbe.pkcs7"

UNKNOWN = "Unknown"

DEFAULT_ISSUER_MARKER = "Financijska agencija"
DEFAULT_ISSUER_NAME = "FINA (Financijska agencija)"
DEFAULT_QUALIFIED_TYPE = "Kvalificirani digitalni potpis"
DEFAULT_OCSP_HOST = "ocsp.fina.hr"
DEFAULT_ICON_ISSUER_KEYWORD = "FINA"

DEFAULT_DATE_DISPLAY_FORMAT = "%d.%m.%Y %H:%M:%S"

# PHP-style trim set
PDF_STRING_TRIM_CHARS = " \t\n\r\x00\x0b"

MSG_FILE_NOT_FOUND = "File not found"
MSG_CANNOT_READ = "Cannot read file"
MSG_NO_SIGNATURES = "No signatures found"

DEFAULT_UNSIGNED_MESSAGE = "Dokument nije digitalno potpisan"
DEFAULT_SIGNED_MESSAGE = "Dokument je digitalno potpisan"
DEFAULT_UNKNOWN_DATE = "Nepoznato"
DEFAULT_NOT_PDF_MESSAGE = "Nije PDF datoteka"
DEFAULT_VALIDATION_NOTE = "Full cryptographic validation requires external tools"

ICON_QUALIFIED_ISSUER = "fas fa-certificate text-success"
ICON_QUALIFIED_TYPE = "fas fa-award text-primary"
ICON_GENERIC = "fas fa-signature text-info"


class SummaryStatus(Enum):
    ERROR = "error"
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    SKIPPED = "skipped"


class ValidationMethod(Enum):
    BASIC_STRUCTURE = "basic_structure"
