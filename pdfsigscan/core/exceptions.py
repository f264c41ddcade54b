"""Custom exception hierarchy for pdfsigscan"""


class PDFSigScanError(Exception):
    """Base exception for all pdfsigscan errors"""
    pass


class PDFNotFoundError(PDFSigScanError):
    """Raised when a PDF file is not found"""

    def __init__(self, message="File not found", path=None):
        if path:
            message = f"{message}: {path}"
        super().__init__(message)
        self.path = path


class PDFReadError(PDFSigScanError):
    """Raised when a PDF file exists but its bytes cannot be read"""

    def __init__(self, message="Cannot read file", path=None, reason=None):
        if path:
            message = f"{message}: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason


class ExtractionError(PDFSigScanError):
    """Raised internally when a matched field cannot be decoded or formatted"""

    def __init__(self, message="Extraction failed", field=None, value=None):
        if field:
            message = f"{message} [{field}]"
        super().__init__(message)
        self.field = field
        self.value = value


class ConfigurationError(PDFSigScanError):
    """Raised when configuration is invalid"""
    pass


class ValidationError(PDFSigScanError):
    """Raised when input validation fails"""
    pass
