"""contractdesk CLI: render contract templates and talk to the workflow service."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from contractdesk.config import Config
from contractdesk.services.assembly_service import EXPORT_FORMATS, AssemblyService
from contractdesk.services.catalog_service import UnknownTemplateError, get_template, list_templates
from contractdesk.services.validation_service import validate_submission
from contractdesk.services.workflow_service import WorkflowClient, WorkflowError
from contractdesk.utils.docx_utils import build_docx
from contractdesk.utils.html_utils import to_word_html
from contractdesk.utils.ids import export_filename
from contractdesk.utils.markdown_blocks import parse_markdown

app = typer.Typer(
    name="contractdesk",
    help="Draft music-industry contracts from templates and review them.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True, style="red")

_SEVERITY_STYLE = {"critical": "bold red", "high": "red", "medium": "yellow", "low": "green"}
_STATUS_STYLE = {"pass": "green", "warning": "yellow", "critical": "bold red", "pending": "dim"}


def _abort(msg: str) -> None:
    err_console.print(f"[bold red]error:[/] {escape(msg)}")
    raise typer.Exit(1)


def _success(msg: str) -> None:
    console.print(f"[bold green]ok:[/] {msg}")


def _parse_vars(pairs: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            _abort(f"Invalid --var '{pair}', expected key=value")
        out[key.strip()] = value
    return out


def _load_vars_file(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        _abort(f"Could not read {path}: {exc}")
    if not isinstance(data, dict):
        _abort(f"{path} must contain a JSON object of variables")
    return data


def _write(output: Path, content) -> None:
    if isinstance(content, bytes):
        output.write_bytes(content)
    else:
        output.write_text(content, encoding="utf-8")
    _success(f"Wrote [bold]{output}[/]")


@app.callback()
def main(
    log_level: Annotated[str, typer.Option("--log-level", help="Logging level")] = Config.LOG_LEVEL,
) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


@app.command()
def templates() -> None:
    """List available contract templates."""
    table = Table(title="Templates", show_header=True)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Fields", justify="right")
    table.add_column("Attachments", justify="right")
    for tpl in list_templates():
        table.add_row(tpl.key.value, tpl.name, str(len(tpl.fields)), str(len(tpl.attachments)))
    console.print(table)


@app.command()
def fields(
    template: Annotated[str, typer.Argument(help="Template id")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the fields a template expects."""
    try:
        tpl = get_template(template)
    except UnknownTemplateError as exc:
        _abort(str(exc))

    if json_output:
        rows = [
            {"name": f.name, "label": f.label, "section": f.section, "required": f.required,
             "default": f.default, "kind": f.kind}
            for f in tpl.fields
        ]
        typer.echo(json.dumps(rows, indent=2))
        return

    table = Table(title=tpl.name, show_header=True)
    table.add_column("Section", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Label")
    table.add_column("Required")
    table.add_column("Default")
    for f in tpl.fields:
        table.add_row(f.section, f.name, f.label, "yes" if f.required else "", escape(f.default or ""))
    console.print(table)


@app.command()
def render(
    template: Annotated[str, typer.Argument(help="Template id")],
    var: Annotated[Optional[List[str]], typer.Option("--var", "-v", help="Variable as key=value")] = None,
    vars_file: Annotated[Optional[Path], typer.Option("--vars-file", help="JSON file of variables")] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="text, html or docx")] = "text",
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to this path")] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Fail on missing required fields")] = False,
) -> None:
    """Render a contract from a template and variables."""
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        _abort(f"Unsupported format '{fmt}'. Choose one of: {', '.join(EXPORT_FORMATS)}")

    values: Dict[str, Any] = {}
    if vars_file is not None:
        values.update(_load_vars_file(vars_file))
    values.update(_parse_vars(var or []))

    try:
        get_template(template)
    except UnknownTemplateError as exc:
        _abort(str(exc))

    if strict:
        problems = validate_submission(template, values)
        if problems:
            for name, message in problems.items():
                err_console.print(f"  {name}: {escape(message)}")
            _abort(f"{len(problems)} required field(s) missing or invalid")

    content = AssemblyService().export(template, values, fmt=fmt)

    if fmt == "docx" and output is None:
        output = Path(export_filename(template, "docx"))
    if output is not None:
        _write(output, content)
    else:
        typer.echo(content)


# ---------------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------------


@app.command()
def review(
    file: Annotated[Path, typer.Argument(help="Contract file (.pdf, .docx, .txt)")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    report_path: Annotated[Optional[Path], typer.Option("--report", help="Save the markdown report here")] = None,
) -> None:
    """Send a contract for risk review and summarise the result."""
    try:
        data = file.read_bytes()
    except OSError as exc:
        _abort(f"Could not read {file}: {exc}")

    try:
        result = WorkflowClient().request_review(file.name, data)
    except (ValueError, WorkflowError) as exc:
        _abort(str(exc))

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
        return

    risk_style = "bold red" if result.overall_risk in ("HIGH", "CRITICAL") else "yellow"
    counts = result.severity_counts()
    summary = "  ".join(f"{k}: {v}" for k, v in counts.items())
    console.print(Panel(f"[{risk_style}]Overall risk: {escape(result.overall_risk)}[/]\n{summary}", title=file.name))

    if result.top_concerns:
        table = Table(title="Top concerns", show_header=True)
        table.add_column("Severity")
        table.add_column("Title", style="bold")
        table.add_column("Section", style="dim")
        table.add_column("Recommendation")
        for c in result.top_concerns:
            style = _SEVERITY_STYLE.get(c.severity, "")
            table.add_row(f"[{style}]{c.severity}[/]", escape(c.title), escape(c.section), escape(c.recommendation))
        console.print(table)

    if result.checklist_status:
        table = Table(title="Checklist", show_header=True)
        table.add_column("Category")
        table.add_column("Status")
        for item in result.checklist_status:
            style = _STATUS_STYLE.get(item.status, "")
            table.add_row(escape(item.category), f"[{style}]{item.status}[/]")
        console.print(table)

    if report_path is not None:
        _write(report_path, result.report)


@app.command()
def draft(
    client_name: Annotated[str, typer.Option("--client-name", help="Client name")],
    contract_type: Annotated[str, typer.Option("--contract-type", help="e.g. Mutual NDA")],
    industry: Annotated[str, typer.Option("--industry")] = "",
    purpose: Annotated[str, typer.Option("--purpose")] = "",
    party1: Annotated[str, typer.Option("--party1")] = "",
    party2: Annotated[str, typer.Option("--party2")] = "",
    term: Annotated[str, typer.Option("--term", help="Term in years")] = "",
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the draft here")] = None,
) -> None:
    """Request a contract draft from the workflow service."""
    if not client_name.strip() or not contract_type.strip():
        _abort("Missing required fields: --client-name and --contract-type are required")

    params = {
        "clientName": client_name,
        "contractType": contract_type,
        "industry": industry,
        "purpose": purpose,
        "party1": party1,
        "party2": party2,
        "term": term,
    }
    try:
        result = WorkflowClient().request_draft(params)
    except WorkflowError as exc:
        _abort(str(exc))

    if result.matched_contracts:
        table = Table(title="Matched contracts", show_header=True)
        table.add_column("Client", style="cyan")
        table.add_column("Type")
        table.add_column("Why")
        for m in result.matched_contracts:
            table.add_row(escape(m.client), escape(m.type), escape(m.match_reason))
        console.print(table)

    if output is None:
        typer.echo(result.draft)
        return

    suffix = output.suffix.lower()
    if suffix == ".docx":
        _write(output, build_docx(parse_markdown(result.draft), title=contract_type))
    elif suffix in (".html", ".htm"):
        _write(output, to_word_html(result.draft, title=contract_type))
    else:
        _write(output, result.draft)


if __name__ == "__main__":
    app()
