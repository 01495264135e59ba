"""Rich renderers for library listings, game boards, and validation reports."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jeopardy_tool.game.domain.answer import Answer, TextAnswer, answer_payload
from jeopardy_tool.game.domain.game import Game
from jeopardy_tool.game.domain.validation import ValidationReport
from jeopardy_tool.library.domain.entry import LibraryEntry

_DJ_MARK = "[bold yellow]★ DJ[/]"


def render_library(console: Console, entries: list[LibraryEntry]) -> None:
    """Print one row per library category: name, answer count, validity, file."""
    table = Table(title="Categories", title_justify="left")
    table.add_column("Name", style="cyan")
    table.add_column("Answers", justify="right")
    table.add_column("Valid")
    table.add_column("File", style="dim")

    for entry in entries:
        valid = "[green]yes[/]" if entry.is_valid else "[red]no[/]"
        table.add_row(
            escape(entry.name),
            str(len(entry.category.answers)),
            valid,
            escape(entry.path.name),
        )
    console.print(table)


def render_board(console: Console, game: Game) -> None:
    """Print the board: one column per category, one row per answer slot."""
    table = Table(title="Board", title_justify="left", show_lines=True)
    for category in game.categories:
        table.add_column(escape(category.name), style="white")

    rows = max((len(category.answers) for category in game.categories), default=0)
    for row in range(rows):
        cells: list[str] = []
        for category in game.categories:
            if row < len(category.answers):
                cells.append(_cell(category.answers[row]))
            else:
                cells.append("[dim]-[/]")
        table.add_row(*cells)
    console.print(table)


def render_report(console: Console, report: ValidationReport) -> None:
    """Print the validity verdict followed by every issue."""
    if report.is_valid:
        console.print("[green]Valid[/]")
    else:
        console.print(f"[red]Invalid[/] ({len(report.errors)} error(s))")

    for issue in report.issues:
        color = "red" if issue.severity == "error" else "yellow"
        console.print(f"  [{color}]{issue.severity}[/] {escape(str(issue))}")


def _cell(answer: Answer) -> str:
    text = escape(answer_payload(answer))
    if not isinstance(answer, TextAnswer):
        text = f"[dim]{answer.type}:[/] {text}"
    if answer.double_jeopardy:
        text = f"{text}\n{_DJ_MARK}"
    return text
