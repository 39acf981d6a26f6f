"""
Command-line interface for pdfworks.
"""

import json
import logging
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdfworks.core.config import EngineConfig
from pdfworks.core.exceptions import PdfWorksError
from pdfworks.core.utils import set_log_level
from pdfworks.fields.types import SignerDetails
from pdfworks.tools import load_builtin_plugins
from pdfworks.tools.common.interfaces import OperationContext
from pdfworks.tools.common.pipeline import registry
from pdfworks.transform.numbering import PageNumberPosition
from pdfworks.transform.rotate import VALID_ANGLES

console = Console()


def _run_tool(ctx, tool_name, context):
    """Run a registered tool, reporting engine errors and exiting with status 1."""
    try:
        return registry.run(tool_name, context)
    except (PdfWorksError, ValueError) as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        ctx.exit(1)


def _context(ctx, **kwargs):
    return OperationContext(engine=ctx.obj["engine"], **kwargs)


def _done(message, output):
    console.print(f"[bold green]✓ {message}[/bold green]")
    console.print(f"[dim]Output: {os.path.abspath(str(output))}[/dim]")


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """
    pdfworks - sign, transform and assemble PDF documents.
    """
    load_builtin_plugins()
    if verbose:
        set_log_level(logging.DEBUG)
    try:
        engine = EngineConfig.from_env()
    except ValueError as e:
        console.print(f"[bold red]✗ Configuration error:[/bold red] {escape(str(e))}")
        sys.exit(1)
    ctx.ensure_object(dict)
    ctx.obj["engine"] = engine


@cli.command(name="tools")
def tools():
    """
    List the available tools.
    """
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, summary in registry.summaries():
        table.add_row(name, summary)
    console.print(table)


@cli.command(name="validate")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--password', default=None, help='Password for encrypted documents')
@click.pass_context
def validate(ctx, input_pdf, password):
    """
    Check that a file is a readable PDF document.

    Example:

        pdfworks validate input.pdf
    """
    context = _context(ctx, input_path=input_pdf, config={"password": password})
    if _run_tool(ctx, "validate", context):
        console.print(f"[bold green]✓ {os.path.basename(input_pdf)} is a valid PDF[/bold green]")
    else:
        console.print(f"[bold red]✗ {os.path.basename(input_pdf)} is not a valid PDF[/bold red]")
        ctx.exit(1)


@cli.command(name="sign")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.argument('placements_json', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.option('--name', 'full_name', default='', help='Signer full name for empty fields')
@click.option('--initials', default='', help='Signer initials for empty fields')
@click.pass_context
def sign(ctx, input_pdf, placements_json, output, full_name, initials):
    """
    Embed signatures and form fields described in a JSON file.

    The JSON file holds a list of placements, for example:

        [{"pageNumber": 1, "x": 10, "y": 80, "fieldType": "name", "value": "Ada"}]
    """
    try:
        with open(placements_json, encoding='utf-8') as handle:
            placements = json.load(handle)
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] Cannot read placements: {escape(str(e))}")
        ctx.exit(1)
    if not isinstance(placements, list):
        console.print("[bold red]✗ Error:[/bold red] Placements JSON must be a list")
        ctx.exit(1)

    signer = SignerDetails(full_name=full_name, initials=initials) if (full_name or initials) else None
    context = _context(
        ctx,
        input_path=input_pdf,
        output_path=output,
        config={"placements": placements, "signer": signer},
    )
    result = _run_tool(ctx, "sign", context)
    report = context.resources["report"]

    table = Table(title="Placements")
    table.add_column("#", style="cyan")
    table.add_column("Page", style="cyan")
    table.add_column("Kind")
    table.add_column("Status", style="green")
    table.add_column("Detail", style="dim")
    for outcome in report.outcomes:
        kind = outcome.placement.kind
        table.add_row(
            str(outcome.index + 1),
            str(outcome.placement.page_number),
            getattr(kind, "value", kind) or "-",
            outcome.status.value,
            escape(outcome.detail or ""),
        )
    console.print(table)
    _done(f"Embedded {len(report.outcomes)} placement(s)", result)


@cli.command(name="rotate")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.option(
    '--angle', '-a',
    default='90',
    type=click.Choice([str(angle) for angle in VALID_ANGLES]),
    help='Rotation applied to every page, in degrees clockwise'
)
@click.pass_context
def rotate(ctx, input_pdf, output, angle):
    """
    Rotate every page of a PDF.

    Example:

        pdfworks rotate input.pdf -o rotated.pdf --angle 180
    """
    context = _context(ctx, input_path=input_pdf, output_path=output, config={"angle": int(angle)})
    result = _run_tool(ctx, "rotate", context)
    _done(f"All pages rotated {angle}°", result)


@cli.command(name="page-numbers")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.option(
    '--position', '-p',
    default=PageNumberPosition.BOTTOM_CENTER.value,
    type=click.Choice([position.value for position in PageNumberPosition]),
    help='Where to place the numbers'
)
@click.option('--font-size', default=12.0, type=float, help='Font size in points')
@click.option('--start', 'start_page', default=1, type=int, help='Number of the first page')
@click.pass_context
def page_numbers(ctx, input_pdf, output, position, font_size, start_page):
    """
    Add running page numbers to a PDF.

    Example:

        pdfworks page-numbers input.pdf -o numbered.pdf -p top-right --start 5
    """
    context = _context(
        ctx,
        input_path=input_pdf,
        output_path=output,
        config={"position": position, "font_size": font_size, "start_page": start_page},
    )
    result = _run_tool(ctx, "page-numbers", context)
    _done(f"Page numbers added at {position.replace('-', ' ')}", result)


@cli.command(name="watermark")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.argument('text')
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.option('--opacity', default=0.3, type=click.FloatRange(0, 1), help='Opacity between 0 and 1')
@click.option('--font-size', default=50.0, type=float, help='Font size in points')
@click.option('--rotation', default=-45.0, type=float, help='Rotation in degrees')
@click.option(
    '--color',
    default=(0.7, 0.7, 0.7),
    type=(float, float, float),
    help='RGB color, each channel between 0 and 1'
)
@click.pass_context
def watermark(ctx, input_pdf, text, output, opacity, font_size, rotation, color):
    """
    Add a centered text watermark to every page.

    Example:

        pdfworks watermark input.pdf CONFIDENTIAL -o marked.pdf --opacity 0.2
    """
    context = _context(
        ctx,
        input_path=input_pdf,
        output_path=output,
        config={
            "text": text,
            "opacity": opacity,
            "font_size": font_size,
            "rotation": rotation,
            "color": color,
        },
    )
    result = _run_tool(ctx, "watermark", context)
    _done("Watermark added", result)


@cli.command(name="protect")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True, help='User password')
@click.pass_context
def protect(ctx, input_pdf, output, password):
    """
    Protect a PDF with a password.
    """
    context = _context(ctx, input_path=input_pdf, output_path=output, config={"password": password})
    result = _run_tool(ctx, "protect", context)
    _done("PDF protected", result)


@cli.command(name="unprotect")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.option('--password', prompt=True, hide_input=True, help='Document password')
@click.pass_context
def unprotect(ctx, input_pdf, output, password):
    """
    Remove password protection from a PDF.
    """
    context = _context(ctx, input_path=input_pdf, output_path=output, config={"password": password})
    result = _run_tool(ctx, "unprotect", context)
    _done("PDF unprotected", result)


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output-dir', '-o',
    default='./output',
    help='Output directory for split documents',
    type=click.Path(file_okay=False)
)
@click.option('--ranges', '-r', default=None, help='Page ranges, e.g. "1-3, 5-7, 10"')
@click.pass_context
def split(ctx, input_pdf, output_dir, ranges):
    """
    Split a PDF into single pages, or into page ranges with --ranges.

    Examples:

        pdfworks split input.pdf -o pages

        pdfworks split input.pdf -o parts --ranges "1-3, 5-7, 10"
    """
    mode = "range" if ranges else "pages"
    context = _context(
        ctx,
        input_path=input_pdf,
        output_path=output_dir,
        config={"mode": mode, "ranges": ranges},
    )
    created_files = _run_tool(ctx, "split", context)

    console.print(f"\n[bold green]✓ Successfully split into {len(created_files)} files[/bold green]")
    console.print(f"[dim]Output directory: {os.path.abspath(output_dir)}[/dim]")
    sample_size = min(5, len(created_files))
    for file_path in created_files[:sample_size]:
        console.print(f"  • {os.path.basename(file_path)}")
    if len(created_files) > sample_size:
        console.print(f"  ... and {len(created_files) - sample_size} more")


@cli.command(name="merge")
@click.argument('inputs', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.option('--bookmark', 'bookmarks', multiple=True, help='Bookmark title for each input, in order')
@click.option('--no-metadata', is_flag=True, help='Do not copy metadata from the first document')
@click.pass_context
def merge(ctx, inputs, output, bookmarks, no_metadata):
    """
    Merge PDFs in the given order.

    Example:

        pdfworks merge a.pdf b.pdf c.pdf -o merged.pdf
    """
    context = _context(
        ctx,
        output_path=output,
        config={
            "inputs": list(inputs),
            "bookmarks": list(bookmarks) or None,
            "metadata": not no_metadata,
        },
    )
    result = _run_tool(ctx, "merge", context)
    _done(f"Merged {len(inputs)} documents", result)


@cli.command(name="images")
@click.argument('inputs', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
@click.pass_context
def images(ctx, inputs, output):
    """
    Create a PDF with one page per PNG or JPEG image.

    Example:

        pdfworks images scan1.jpg scan2.png -o scans.pdf
    """
    context = _context(ctx, output_path=output, config={"inputs": list(inputs)})
    result = _run_tool(ctx, "images", context)
    _done(f"Created PDF from {len(inputs)} image(s)", result)


if __name__ == '__main__':  # pragma: no cover
    cli()
