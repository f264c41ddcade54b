"""Main CLI entry point using Click"""

import sys
import json
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.markup import escape

from pdfsigscan import __version__
from pdfsigscan.core.logging import setup_logger, get_logger
from pdfsigscan.core.config import load_config, get_config
from pdfsigscan.core.exceptions import ConfigurationError, ValidationError
from pdfsigscan.core.error_handler import explain_error, ErrorContext
from pdfsigscan.core.constants import SummaryStatus
from pdfsigscan.core.patterns import pattern_hits
from pdfsigscan.core.pdf_source import read_pdf_bytes, is_pdf
from pdfsigscan.cli.ui import (
    print_error,
    print_success,
    print_info,
    print_header,
    print_warning,
    print_dict,
    print_table,
    print_verbose,
)
from pdfsigscan.cli.decorators import handle_errors, log_command
from pdfsigscan.analyze.signatures import DetectionResult, detect_signatures
from pdfsigscan.report.summary import (
    summarize,
    validate_signature,
    batch_detect_signatures,
)

STATUS_COLORS = {
    SummaryStatus.SIGNED: 'green',
    SummaryStatus.UNSIGNED: 'yellow',
    SummaryStatus.ERROR: 'red',
    SummaryStatus.SKIPPED: 'white',
}


@click.group()
@click.version_option(version=__version__, prog_name="pdfsigscan")
@click.option('--config', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--debug', '-d', is_flag=True, help='Debug output')
@click.pass_context
def cli(ctx, config: Optional[Path], verbose: bool, debug: bool):
    """
    pdfsigscan - Structural PDF digital signature detection

    Detects signature dictionaries, signature fields, PKCS#7 subfilters and
    ByteRange arrays in raw PDF bytes, and extracts signer, date and issuer
    hints. No cryptographic verification is performed.
    """
    ctx.ensure_object(dict)

    setup_logger(verbose=verbose, debug=debug)

    try:
        load_config(config)
    except ConfigurationError as e:
        explain_error(e, ErrorContext("Loading configuration", input_file=config), debug)
        sys.exit(1)

    cfg = get_config()
    cfg.verbose = verbose or cfg.verbose
    cfg.debug = debug or cfg.debug

    ctx.obj['config'] = cfg
    ctx.obj['logger'] = get_logger()


def _write_or_echo(text: str, output: Optional[Path]):
    if output:
        output.write_text(text, encoding='utf-8')
        print_success(f"Report saved to: {output}")
    else:
        click.echo(text)


@cli.command('scan')
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file for report')
@click.option('--format', '-f', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.option('--verbose', '-v', is_flag=True, help='Show pattern hit counts')
@handle_errors("Signature Detection")
@log_command
def scan_cmd(input_pdf: Path, output: Optional[Path], format: str, verbose: bool):
    """
    Detect signature structures and extract signer metadata

    Examples:
        pdfsigscan scan signed.pdf
        pdfsigscan scan signed.pdf --format json --output report.json
    """
    if output and output.resolve() == input_pdf.resolve():
        raise ValidationError(f"Output file would overwrite the input PDF: {output}")

    config = get_config()
    verbose = verbose or config.verbose
    result = detect_signatures(input_pdf, config.detection)

    if format == 'json':
        _write_or_echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), output)
        if not result.success:
            sys.exit(1)
        return

    print_header("PDF Signature Detection", str(input_pdf))

    if not result.success:
        print_error(f"Detection failed: {result.error}")
        sys.exit(1)

    if result.has_signatures:
        print_success("Signature structures found")
    else:
        print_info("No signature structures found")

    print_info(f"Extracted signatures: {result.signature_count}")

    if result.byte_range:
        br = result.byte_range
        print_info(
            f"ByteRange: [{br.start1} {br.length1} {br.start2} {br.length2}]"
        )

    for i, sig in enumerate(result.signatures, 1):
        details = {
            'Signer': escape(sig.signer),
            'Type': escape(sig.type),
            'Issuer': escape(sig.certificate_issuer),
            'Date': f"{sig.date.formatted} ({sig.date.timezone})" if sig.date else "-",
        }
        if sig.ocsp_validated:
            details['OCSP'] = "validated"
        print_dict(details, f"Signature #{i}")

    if verbose:
        hits = pattern_hits(read_pdf_bytes(input_pdf))
        print_table(
            "Pattern hits",
            ["Pattern", "Matches"],
            [[name, count] for name, count in hits.items()],
        )

    if output:
        output.write_text(_format_detection_report(result, input_pdf), encoding='utf-8')
        print_success(f"Report saved to: {output}")


@cli.command('summary')
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--format', '-f', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@handle_errors("Signature Summary")
@log_command
def summary_cmd(input_pdf: Path, format: str):
    """
    Show a display-oriented signature summary

    Examples:
        pdfsigscan summary contract.pdf
    """
    config = get_config()
    summary = summarize(detect_signatures(input_pdf, config.detection), config)

    if format == 'json':
        click.echo(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_header("Signature Summary", str(input_pdf))
        color = STATUS_COLORS[summary.status]
        click.secho(f"Status: {summary.status.value.upper()}", fg=color, bold=True)
        click.echo(summary.message)

        if summary.signatures:
            print_table(
                f"Signatures ({summary.count})",
                ["Signer", "Type", "Issuer", "Date", "Icon"],
                [[escape(s.signer), escape(s.type), escape(s.issuer), s.date, s.icon]
                 for s in summary.signatures],
            )

    if summary.status == SummaryStatus.ERROR:
        sys.exit(1)


@cli.command('validate')
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--format', '-f', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@handle_errors("Structural Validation")
@log_command
def validate_cmd(input_pdf: Path, format: str):
    """
    Basic structural validation (no cryptographic checks)

    Examples:
        pdfsigscan validate contract.pdf
    """
    validation = validate_signature(input_pdf, get_config())

    if format == 'json':
        click.echo(json.dumps(validation.to_dict(), indent=2, ensure_ascii=False))
    elif validation.success:
        print_success(f"Signatures present ({validation.validation_method.value})")
        print_warning(validation.note)
    else:
        print_error(validation.error)

    if not validation.success:
        sys.exit(1)


@cli.command('batch')
@click.argument('paths', nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option('--format', '-f', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@handle_errors("Batch Detection")
@log_command
def batch_cmd(paths: Tuple[Path, ...], format: str):
    """
    Summarize signatures of several files

    Files without a PDF header are skipped.

    Examples:
        pdfsigscan batch inbox/*.pdf
        pdfsigscan batch a.pdf b.pdf --format json
    """
    results = batch_detect_signatures(paths, get_config())

    if format == 'json':
        payload = {name: summary.to_dict() for name, summary in results.items()}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    rows = []
    for name, summary in results.items():
        count = summary.count if summary.count is not None else "-"
        rows.append([escape(name), summary.status.value, summary.message, count])

    print_table("Batch Signature Detection", ["File", "Status", "Message", "Signatures"], rows)

    signed = sum(1 for s in results.values() if s.status == SummaryStatus.SIGNED)
    print_verbose(f"{signed} of {len(results)} files signed", get_config().verbose)


@cli.command('check')
@click.argument('input_pdf', type=click.Path(path_type=Path))
@log_command
def check_cmd(input_pdf: Path):
    """Check the %PDF- header of a file"""
    if is_pdf(input_pdf):
        print_success(f"PDF header found: {input_pdf}")
    else:
        print_error(f"Not a PDF file: {input_pdf}")
        sys.exit(1)


def _format_detection_report(result: DetectionResult, input_pdf: Path) -> str:
    """Format detection result for text output"""
    lines = []
    lines.append("=" * 80)
    lines.append("PDF SIGNATURE DETECTION REPORT")
    lines.append("=" * 80)
    lines.append(f"File: {input_pdf}")
    lines.append(f"Signature structures: {'yes' if result.has_signatures else 'no'}")
    lines.append(f"Extracted signatures: {result.signature_count}")

    if result.byte_range:
        br = result.byte_range
        lines.append(f"ByteRange: [{br.start1} {br.length1} {br.start2} {br.length2}]")
    lines.append("")

    for i, sig in enumerate(result.signatures, 1):
        lines.append(f"SIGNATURE #{i}")
        lines.append("-" * 80)
        lines.append(f"Signer: {sig.signer}")
        lines.append(f"Type: {sig.type}")
        lines.append(f"Issuer: {sig.certificate_issuer}")
        if sig.date:
            lines.append(f"Date: {sig.date.formatted} ({sig.date.timezone})")
        if sig.ocsp_validated:
            lines.append("OCSP: validated")
        lines.append("")

    return '\n'.join(lines)


if __name__ == '__main__':
    cli()
