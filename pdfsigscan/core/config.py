"""Configuration management for pdfsigscan"""

import sys
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pdfsigscan.core.exceptions import ConfigurationError
from pdfsigscan.core.constants import (
    DEFAULT_ISSUER_MARKER,
    DEFAULT_ISSUER_NAME,
    DEFAULT_QUALIFIED_TYPE,
    DEFAULT_OCSP_HOST,
    DEFAULT_ICON_ISSUER_KEYWORD,
    DEFAULT_DATE_DISPLAY_FORMAT,
    DEFAULT_UNSIGNED_MESSAGE,
    DEFAULT_SIGNED_MESSAGE,
    DEFAULT_UNKNOWN_DATE,
    DEFAULT_NOT_PDF_MESSAGE,
    DEFAULT_VALIDATION_NOTE,
)


def _option(data: Dict[str, Any], section: str, key: str, default: Any) -> Any:
    """Read one option, rejecting values whose type differs from the default"""
    value = data.get(key, default)
    if not isinstance(value, type(default)):
        raise ConfigurationError(
            f"Option {section}.{key} must be {type(default).__name__}, "
            f"got {type(value).__name__}: {value!r}"
        )
    return value


@dataclass(frozen=True)
class DetectionConfig:
    """Issuer and responder heuristics used by the metadata extractor"""
    issuer_marker: str = DEFAULT_ISSUER_MARKER
    issuer_name: str = DEFAULT_ISSUER_NAME
    qualified_type: str = DEFAULT_QUALIFIED_TYPE
    ocsp_host: str = DEFAULT_OCSP_HOST
    date_format: str = DEFAULT_DATE_DISPLAY_FORMAT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DetectionConfig":
        return cls(
            issuer_marker=_option(data, "detection", "issuer_marker", DEFAULT_ISSUER_MARKER),
            issuer_name=_option(data, "detection", "issuer_name", DEFAULT_ISSUER_NAME),
            qualified_type=_option(data, "detection", "qualified_type", DEFAULT_QUALIFIED_TYPE),
            ocsp_host=_option(data, "detection", "ocsp_host", DEFAULT_OCSP_HOST),
            date_format=_option(data, "detection", "date_format", DEFAULT_DATE_DISPLAY_FORMAT),
        )


@dataclass(frozen=True)
class SummaryConfig:
    unsigned_message: str = DEFAULT_UNSIGNED_MESSAGE
    signed_message: str = DEFAULT_SIGNED_MESSAGE
    unknown_date: str = DEFAULT_UNKNOWN_DATE
    not_pdf_message: str = DEFAULT_NOT_PDF_MESSAGE
    validation_note: str = DEFAULT_VALIDATION_NOTE
    icon_issuer_keyword: str = DEFAULT_ICON_ISSUER_KEYWORD

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SummaryConfig":
        return cls(
            unsigned_message=_option(data, "summary", "unsigned_message", DEFAULT_UNSIGNED_MESSAGE),
            signed_message=_option(data, "summary", "signed_message", DEFAULT_SIGNED_MESSAGE),
            unknown_date=_option(data, "summary", "unknown_date", DEFAULT_UNKNOWN_DATE),
            not_pdf_message=_option(data, "summary", "not_pdf_message", DEFAULT_NOT_PDF_MESSAGE),
            validation_note=_option(data, "summary", "validation_note", DEFAULT_VALIDATION_NOTE),
            icon_issuer_keyword=_option(data, "summary", "icon_issuer_keyword", DEFAULT_ICON_ISSUER_KEYWORD),
        )


@dataclass
class Config:
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)
    verbose: bool = False
    debug: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        detection = data.get("detection", {})
        summary = data.get("summary", {})
        if not isinstance(detection, dict) or not isinstance(summary, dict):
            raise ConfigurationError(
                "Sections [detection] and [summary] must be tables"
            )

        return cls(
            detection=DetectionConfig.from_dict(detection),
            summary=SummaryConfig.from_dict(summary),
            verbose=_option(data, "pdfsigscan", "verbose", False),
            debug=_option(data, "pdfsigscan", "debug", False),
        )

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from TOML file"""
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        return cls.from_dict(data)

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration"""
        return cls()


_global_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create global configuration"""
    global _global_config
    if _global_config is None:
        _global_config = Config.default()
    return _global_config


def set_config(config: Config):
    """Set global configuration"""
    global _global_config
    _global_config = config


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from file or use default"""
    if path is None:
        default_paths = [
            Path.cwd() / "pdfsigscan.toml",
            Path.home() / ".config" / "pdfsigscan" / "config.toml",
            Path.home() / ".pdfsigscan.toml",
        ]

        for p in default_paths:
            if p.exists():
                path = p
                break

    if path and path.exists():
        config = Config.from_file(path)
    elif path:
        raise ConfigurationError(f"Configuration file not found: {path}")
    else:
        config = Config.default()

    set_config(config)
    return config
