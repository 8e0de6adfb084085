"""Rich display functions for detection results and the detector catalogue."""

import json

from rich.markup import escape
from rich.table import Table

from whichpm.detectors.base import Detector
from whichpm.models.detection import Confidence, DetectionResult
from whichpm.utils.formatting import console

# Theme style per confidence level
CONFIDENCE_STYLES: dict[Confidence, str] = {
    Confidence.HIGH: "confidence_high",
    Confidence.MEDIUM: "confidence_medium",
    Confidence.LOW: "confidence_low",
    Confidence.UNCERTAIN: "confidence_uncertain",
}


def format_confidence(confidence: Confidence) -> str:
    """Format a confidence level as styled ``(label)`` markup."""
    style = CONFIDENCE_STYLES[confidence]
    return f"[{style}]({confidence.label})[/{style}]"


def print_text_result(result: DetectionResult) -> None:
    """Print a detection result as human-readable lines.

    The headline names the manager and confidence; package, version, and
    location follow, indented, for whatever is known.

    Args:
        result: Result to print.
    """
    console.print(
        f"[bold]{escape(result.command)}[/bold] was installed by: "
        f"[manager]{escape(result.manager_name)}[/manager] "
        f"{format_confidence(result.confidence)}",
        soft_wrap=True,
    )

    if result.package_name is not None:
        console.print(
            f"  [muted]Package:[/muted] [package]{escape(result.package_name)}[/package]",
            soft_wrap=True,
        )
    if result.version is not None:
        console.print(f"  [muted]Version:[/muted] {escape(result.version)}", soft_wrap=True)
    console.print(f"  [muted]Location:[/muted] {escape(str(result.resolved_path))}", soft_wrap=True)


def print_json_result(result: DetectionResult) -> None:
    """Print a detection result as pretty JSON."""
    console.print_json(json.dumps(result.to_dict()))


def print_short_result(result: DetectionResult) -> None:
    """Print only the manager id."""
    console.print(result.manager_id, markup=False, highlight=False)


def create_detectors_table(detectors: tuple[Detector, ...], title: str) -> Table:
    """Create a table listing detectors in evaluation order.

    Args:
        detectors: Detectors in registry order.
        title: Table title.

    Returns:
        Rich Table with order, priority, id, and name columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Priority", justify="right", style="info")
    table.add_column("ID", no_wrap=True, style="manager")
    table.add_column("Name", style="text")

    for position, detector in enumerate(detectors, start=1):
        table.add_row(str(position), str(detector.priority), detector.id, detector.name)

    return table
