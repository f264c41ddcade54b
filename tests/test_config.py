import pytest

from pdfsigscan.core.config import (
    Config,
    DetectionConfig,
    get_config,
    load_config,
)
from pdfsigscan.core.exceptions import ConfigurationError


CUSTOM_TOML = """
verbose = true

[detection]
issuer_marker = "Example Trust Services"
issuer_name = "Example TSP"
ocsp_host = "ocsp.example.test"
date_format = "%Y-%m-%d"

[summary]
unsigned_message = "Document is not signed"
"""


def test_defaults():
    config = Config.default()
    assert config.detection == DetectionConfig()
    assert config.detection.issuer_marker == "Financijska agencija"
    assert config.detection.ocsp_host == "ocsp.fina.hr"
    assert config.summary.unknown_date == "Nepoznato"
    assert not config.verbose
    assert not config.debug


def test_from_file(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text(CUSTOM_TOML)

    config = Config.from_file(path)
    assert config.verbose
    assert config.detection.issuer_name == "Example TSP"
    assert config.detection.date_format == "%Y-%m-%d"
    assert config.detection.qualified_type == "Kvalificirani digitalni potpis"
    assert config.summary.unsigned_message == "Document is not signed"
    assert config.summary.signed_message == "Dokument je digitalno potpisan"


def test_from_file_missing(tmp_path):
    with pytest.raises(ConfigurationError):
        Config.from_file(tmp_path / "missing.toml")


def test_from_file_invalid_toml(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[detection\nissuer_marker = ")
    with pytest.raises(ConfigurationError, match="Failed to load configuration"):
        Config.from_file(path)


def test_section_must_be_table():
    with pytest.raises(ConfigurationError):
        Config.from_dict({'detection': "FINA"})


def test_load_config_from_working_directory(tmp_path):
    (tmp_path / "pdfsigscan.toml").write_text(CUSTOM_TOML)

    config = load_config()
    assert config.detection.issuer_name == "Example TSP"
    assert get_config() is config


def test_load_config_defaults_without_files():
    config = load_config()
    assert config == Config.default()
    assert get_config() is config


def test_load_config_explicit_missing_path(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.toml")


@pytest.mark.parametrize('data, option', [
    ({'detection': {'issuer_marker': 5}}, "detection.issuer_marker"),
    ({'detection': {'date_format': ["%Y"]}}, "detection.date_format"),
    ({'summary': {'unknown_date': None}}, "summary.unknown_date"),
    ({'verbose': "yes"}, "pdfsigscan.verbose"),
])
def test_option_type_is_checked(data, option):
    with pytest.raises(ConfigurationError, match=option):
        Config.from_dict(data)


def test_wrong_option_type_in_file(tmp_path):
    path = tmp_path / "typed.toml"
    path.write_text("[detection]\nissuer_marker = 5\n")
    with pytest.raises(ConfigurationError, match="must be str, got int"):
        Config.from_file(path)
