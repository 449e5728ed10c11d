from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from cuetext.core.cue import parse_cue
from cuetext.core.errors import CueParseError
from cuetext.core.subtitle import (
    ReadResult,
    cue_to_payload,
    cues_to_payload,
    format_timestamp,
    read_cues,
    render_srt,
    render_text,
    render_vtt,
    write_srt,
    write_vtt,
)
from cuetext.infra.config import AppConfig, build_app_config
from cuetext.infra.storage import write_json, write_text

app = typer.Typer(
    name="cuetext",
    add_completion=False,
    help="Extract plain text and timing from SRT/WebVTT cues.",
)


def _build_config(
    *,
    encoding: str | None,
    output_format: str = "text",
    error_policy: str | None = None,
) -> AppConfig:
    try:
        return build_app_config(
            encoding=encoding,
            output_format=output_format,
            error_policy=error_policy,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_document(input_path: Path, config: AppConfig) -> ReadResult:
    if not input_path.exists() or not input_path.is_file():
        raise typer.BadParameter(f"Input not found: {input_path}")
    try:
        return read_cues(input_path, config)
    except CueParseError as exc:
        typer.echo(f"[failed] {exc.kind}: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    except UnicodeDecodeError as exc:
        typer.echo(
            f"[failed] Could not decode {input_path} as {config.encoding}: {exc}",
            err=True,
        )
        raise typer.Exit(code=2) from exc


def _render(result: ReadResult, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(cues_to_payload(result), ensure_ascii=False, indent=2)
    if output_format == "srt":
        return render_srt(result.cues)
    if output_format == "vtt":
        return render_vtt(result.cues)
    return render_text(result.cues)


@app.command("cue")
def cue_command(
    block: str | None = typer.Argument(
        None, help="Cue block text. Reads stdin when omitted or '-'."
    ),
) -> None:
    """Parse a single cue block and print it as JSON."""
    if block is None or block == "-":
        block = sys.stdin.read()
    try:
        cue = parse_cue(block)
    except CueParseError as exc:
        typer.echo(f"[failed] {exc.kind}: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(json.dumps(cue_to_payload(cue), ensure_ascii=False, indent=2))


@app.command("extract")
def extract_command(
    input_path: Path = typer.Argument(..., help="Input SRT or WebVTT file path."),
    output_format: str = typer.Option(
        "text", "--format", "-f", help="text|json|srt|vtt"
    ),
    output_path: Path | None = typer.Option(
        None, "--output", "-o", help="Output file path (default: stdout)."
    ),
    error_policy: str | None = typer.Option(
        None,
        "--on-error",
        help="skip|abort (default: CUETEXT_ON_ERROR or skip).",
    ),
    encoding: str | None = typer.Option(
        None, "--encoding", help="Input encoding (default: CUETEXT_ENCODING or utf-8)."
    ),
    report_path: Path | None = typer.Option(
        None, "--report", help="Write a JSON run report to this path."
    ),
) -> None:
    """Extract cues from a whole subtitle document."""
    config = _build_config(
        encoding=encoding,
        output_format=output_format,
        error_policy=error_policy,
    )
    result = _load_document(input_path, config)

    if output_path is None:
        typer.echo(_render(result, config.output_format))
    elif config.output_format == "srt":
        write_srt(result.cues, output_path)
    elif config.output_format == "vtt":
        write_vtt(result.cues, output_path)
    else:
        write_text(output_path, _render(result, config.output_format))

    if report_path is not None:
        write_json(
            report_path,
            {
                "input_path": str(input_path),
                "output_path": str(output_path) if output_path else None,
                "format": config.output_format,
                "encoding": config.encoding,
                "error_policy": config.error_policy,
                **cues_to_payload(result),
            },
        )

    lines = [
        f"[{result.status}] Extracted {len(result.cues)} cues from {input_path}.",
        f"- failed blocks: {len(result.failures)}",
    ]
    lines.extend(
        f"- block {failure.index}: {failure.kind}: {failure.message}"
        for failure in result.failures
    )
    if output_path is not None:
        lines.append(f"- output: {output_path}")
    if report_path is not None:
        lines.append(f"- report: {report_path}")
    typer.echo("\n".join(lines), err=output_path is None)
    if result.status == "failed":
        raise typer.Exit(code=2)


@app.command("inspect")
def inspect_command(
    input_path: Path = typer.Argument(..., help="Input SRT or WebVTT file path."),
    encoding: str | None = typer.Option(
        None, "--encoding", help="Input encoding (default: CUETEXT_ENCODING or utf-8)."
    ),
) -> None:
    """Show the cues of a document as a table."""
    config = _build_config(encoding=encoding, error_policy="skip")
    result = _load_document(input_path, config)

    table = Table(title=str(input_path))
    table.add_column("#", justify="right")
    table.add_column("Identifier")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Text")
    for index, cue in enumerate(result.cues, start=1):
        table.add_row(
            str(index),
            cue.identifier or "",
            format_timestamp(cue.start, "."),
            format_timestamp(cue.end, "."),
            cue.text,
        )
    console = Console()
    console.print(table)
    console.print(
        f"[{result.status}] cues={len(result.cues)} failed={len(result.failures)}",
        markup=False,
    )


def run() -> None:
    """Console-script entrypoint."""
    app()
