import json

import pytest
from click.testing import CliRunner

from pdfsigscan import __version__
from pdfsigscan.cli.main import cli

from .samples import FINA_SIGNED_PDF, SIGNED_PDF, UNSIGNED_PDF


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_scan_json(runner, write_file):
    path = write_file("signed.pdf", SIGNED_PDF)
    result = runner.invoke(cli, ['scan', str(path), '--format', 'json'])
    assert result.exit_code == 0

    payload = json.loads(result.stdout)
    assert payload['success']
    assert payload['has_signatures']
    assert payload['signature_count'] == 1
    assert payload['byte_range'] == {
        'start1': 0, 'length1': 100, 'start2': 200, 'length2': 50,
    }
    assert payload['signatures'][0]['signer'] == "John Doe"
    assert payload['signatures'][0]['date']['timezone'] == "+02:00"


def test_scan_json_to_file(runner, write_file, tmp_path):
    path = write_file("signed.pdf", FINA_SIGNED_PDF)
    report = tmp_path / "report.json"
    result = runner.invoke(cli, ['scan', str(path), '-f', 'json', '-o', str(report)])
    assert result.exit_code == 0

    payload = json.loads(report.read_text(encoding='utf-8'))
    assert payload['signatures'][0]['certificate_issuer'] == "FINA (Financijska agencija)"
    assert payload['signatures'][0]['ocsp_validated'] is True


def test_scan_text(runner, write_file, tmp_path):
    path = write_file("signed.pdf", FINA_SIGNED_PDF)
    report = tmp_path / "report.txt"
    result = runner.invoke(cli, ['scan', str(path), '--output', str(report), '--verbose'])
    assert result.exit_code == 0
    assert "Signature structures found" in result.output
    assert "John Doe" in result.output
    assert "signer_name" in result.output

    text = report.read_text(encoding='utf-8')
    assert "PDF SIGNATURE DETECTION REPORT" in text
    assert "Signer: John Doe" in text
    assert "ByteRange: [0 100 200 50]" in text
    assert "OCSP: validated" in text


def test_scan_unsigned_text(runner, write_file):
    path = write_file("plain.pdf", UNSIGNED_PDF)
    result = runner.invoke(cli, ['scan', str(path)])
    assert result.exit_code == 0
    assert "No signature structures found" in result.output


def test_scan_refuses_to_overwrite_input(runner, write_file):
    path = write_file("signed.pdf", SIGNED_PDF)
    result = runner.invoke(cli, ['scan', str(path), '--output', str(path)])
    assert result.exit_code == 1
    assert path.read_bytes() == SIGNED_PDF


def test_scan_missing_file_is_rejected(runner, tmp_path):
    result = runner.invoke(cli, ['scan', str(tmp_path / "missing.pdf")])
    assert result.exit_code == 2


def test_summary_json(runner, write_file):
    path = write_file("signed.pdf", FINA_SIGNED_PDF)
    result = runner.invoke(cli, ['summary', str(path), '--format', 'json'])
    assert result.exit_code == 0

    payload = json.loads(result.stdout)
    assert payload['status'] == "signed"
    assert payload['message'] == "Dokument je digitalno potpisan"
    assert payload['signatures'][0]['icon'] == "fas fa-certificate text-success"


def test_summary_text_unsigned(runner, write_file):
    path = write_file("plain.pdf", UNSIGNED_PDF)
    result = runner.invoke(cli, ['summary', str(path)])
    assert result.exit_code == 0
    assert "Status: UNSIGNED" in result.output
    assert "Dokument nije digitalno potpisan" in result.output


def test_validate_signed_json(runner, write_file):
    path = write_file("signed.pdf", SIGNED_PDF)
    result = runner.invoke(cli, ['validate', str(path), '-f', 'json'])
    assert result.exit_code == 0
    assert json.loads(result.stdout)['validation_method'] == "basic_structure"


def test_validate_unsigned_exits_nonzero(runner, write_file):
    path = write_file("plain.pdf", UNSIGNED_PDF)
    result = runner.invoke(cli, ['validate', str(path)])
    assert result.exit_code == 1
    assert "No signatures found" in result.output


def test_batch_json(runner, write_file, tmp_path):
    signed = write_file("signed.pdf", SIGNED_PDF)
    notes = write_file("notes.txt", b"hello")
    missing = tmp_path / "missing.pdf"

    result = runner.invoke(cli, ['batch', str(signed), str(notes), str(missing), '-f', 'json'])
    assert result.exit_code == 0

    payload = json.loads(result.stdout)
    assert payload['signed.pdf']['status'] == "signed"
    assert payload['signed.pdf']['count'] == 1
    assert payload['notes.txt'] == {'status': 'skipped', 'message': "Nije PDF datoteka"}
    assert payload['missing.pdf']['status'] == "skipped"


def test_batch_text(runner, write_file):
    signed = write_file("signed.pdf", SIGNED_PDF)
    plain = write_file("plain.pdf", UNSIGNED_PDF)
    result = runner.invoke(cli, ['batch', str(signed), str(plain)])
    assert result.exit_code == 0
    assert "signed.pdf" in result.output
    assert "unsigned" in result.output


def test_check(runner, write_file):
    assert runner.invoke(cli, ['check', str(write_file("a.pdf", SIGNED_PDF))]).exit_code == 0
    assert runner.invoke(cli, ['check', str(write_file("a.txt", b"text"))]).exit_code == 1


def test_invalid_config_file(runner, write_file, tmp_path):
    config = tmp_path / "broken.toml"
    config.write_text("[detection\n")
    path = write_file("signed.pdf", SIGNED_PDF)

    result = runner.invoke(cli, ['--config', str(config), 'scan', str(path)])
    assert result.exit_code == 1


def test_config_file_changes_messages(runner, write_file, tmp_path):
    config = tmp_path / "custom.toml"
    config.write_text('[summary]\nunsigned_message = "Document is not signed"\n')
    path = write_file("plain.pdf", UNSIGNED_PDF)

    result = runner.invoke(cli, ['--config', str(config), 'summary', str(path), '-f', 'json'])
    assert result.exit_code == 0
    assert json.loads(result.stdout)['message'] == "Document is not signed"


def test_config_option_with_wrong_type(runner, write_file, tmp_path):
    config = tmp_path / "typed.toml"
    config.write_text("[detection]\nissuer_marker = 5\n")
    path = write_file("signed.pdf", FINA_SIGNED_PDF)

    result = runner.invoke(cli, ['--config', str(config), 'scan', str(path)])
    assert result.exit_code == 1
    assert "Unexpected error" not in result.output
