import json
from typing import Any, Dict, Iterable, Optional, Union

from rich.box import ROUNDED
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from complexity_cli.analysis.matchers import Matcher
from complexity_cli.analysis.models import AnalysisResult
from complexity_cli.core.formatting import COMPLEXITY_STYLES, format_complexity, format_time

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console()

BOLD_STYLE = Style(bold=True)
DIM_STYLE = Style(dim=True)
CYAN_STYLE = Style(color="cyan")

PROMPT = "Enter your code (type '{sentinel}' on a new line to finish):"

# ==============================================================================
# Private Helper Functions
# ==============================================================================


def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple[int, int] = (1, 2),
    box: Any = ROUNDED,
    **kwargs: Any,
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=box,
        **kwargs,
    )


def _create_table(
    title: Optional[str] = None,
    box: Any = ROUNDED,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any,
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=box,
        show_header=show_header,
        header_style=header_style,
        **kwargs,
    )


# ==============================================================================
# General UI Elements
# ==============================================================================


def print_banner():
    banner_content = Text.assemble(
        ("Time Complexity Analyzer", BOLD_STYLE + CYAN_STYLE),
        "\n",
        ("Line-by-line big-O hints for brace-delimited code", DIM_STYLE),
    )
    console.print(_create_panel(banner_content, border_style="cyan", padding=(0, 2)))


def print_prompt(sentinel: Optional[str]):
    if sentinel:
        console.print(f"[bold]{PROMPT.format(sentinel=sentinel)}[/bold]\n")
    else:
        console.print("[bold]Enter your code (end of input to finish):[/bold]\n")


# ==============================================================================
# Analysis Results
# ==============================================================================


def print_results(result: AnalysisResult, show_reasons: bool = True):
    """Print the per-line classification table."""
    table = _create_table(title="[bold blue]Line-by-Line Complexity Analysis[/bold blue]")
    table.add_column("Line", justify="right", style="bold")
    table.add_column("Code", style="white", overflow="fold")
    table.add_column("Complexity", no_wrap=True)
    if show_reasons:
        table.add_column("Reason", style="dim")

    for record in result.records:
        # Source text may contain brackets that Rich would read as markup
        row = [
            str(record.line_number),
            Text(record.text),
            format_complexity(record.complexity),
        ]
        if show_reasons:
            row.append(record.reason)
        table.add_row(*row)

    console.print(table)


def print_summary(result: AnalysisResult):
    """Print line counts per complexity class and the detected functions."""
    table = _create_table(title="[bold]Summary[/bold]")
    table.add_column("Complexity", no_wrap=True)
    table.add_column("Lines", justify="right")
    for complexity, count in result.summary().items():
        table.add_row(format_complexity(complexity), str(count))
    console.print(table)

    if result.functions:
        functions = _create_table(title="[bold]Detected Functions[/bold]")
        functions.add_column("Function")
        functions.add_column("Occurrences", justify="right")
        for name, count in sorted(result.functions.items()):
            functions.add_row(name, str(count))
        console.print(functions)

    if result.recursive_lines:
        lines = ", ".join(str(n) for n in result.recursive_lines)
        console.print(f"[cyan]Recursive pattern on line(s):[/cyan] {lines}")


def print_final_complexity(result: AnalysisResult, duration: Optional[float] = None):
    """Print the program-wide verdict."""
    style = COMPLEXITY_STYLES[result.overall]
    content = Text.assemble(
        ("Final Complexity: ", BOLD_STYLE),
        (result.overall.notation, Style(color=style, bold=True)),
        "\n",
        (f"Maximum loop nesting: {result.max_depth}", DIM_STYLE),
    )
    if duration is not None:
        content.append(f"\nAnalyzed {len(result.records)} lines in {format_time(duration)}", DIM_STYLE)
    console.print(_create_panel(content, border_style=style, padding=(0, 2)))


def build_json_payload(result: AnalysisResult, source: Optional[str] = None) -> Dict[str, Any]:
    payload = result.to_dict()
    if source:
        payload["source"] = source
    return payload


def render_json(result: AnalysisResult, source: Optional[str] = None) -> str:
    return json.dumps(build_json_payload(result, source), indent=2, ensure_ascii=False)


def print_matchers(matchers: Iterable[Matcher]):
    table = _create_table(title="[bold]Pattern Matchers[/bold]")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Matches")
    for matcher in matchers:
        table.add_row(matcher.name, Text(matcher.description))
    console.print(table)
