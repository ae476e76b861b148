"""Command Line Interface (CLI) for user interaction."""

from typing import Any, List, Sequence, Type

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import FloatPrompt, IntPrompt, Prompt, PromptBase
from rich.table import Table

import config
from core.gradebook import GradeReport, StudentRecord, validate_grade, validate_subject_count
from utils.logger import get_logger
from utils.error_handler import UserCancelledError, ValidationError
from utils.retry import reprompt_on_exception

def make_console(**kwargs: Any) -> Console:
    """Creates a console that prints names and chat text as typed (no :emoji: codes)."""
    kwargs.setdefault("emoji", False)
    return Console(**kwargs)

logger = get_logger()
console = make_console()

REPORT_WIDTH = 55
MENU_ADD, MENU_REPORT, MENU_EXIT = 1, 2, 3

def display_welcome(title: str, message: str):
    """Displays a welcome banner."""
    console.print(Panel(
        f"[bold green]{escape(title)}[/bold green]",
        title="Welcome",
        border_style="blue"
    ))
    console.print(message)
    console.rule()

def display_farewell(message: str):
    """Displays a farewell message."""
    console.rule()
    console.print(f"[bold cyan]{escape(message)}[/bold cyan]")

def display_error(message: str):
    """Displays an error message in a standard format."""
    console.print(Panel(f"[bold red]Error:[/bold red] {escape(message)}", title="Error", border_style="red"))

def display_warning(message: str):
    """Displays a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

def display_success(message: str):
    """Displays a success message."""
    console.print(f"[green]Success:[/green] {escape(message)}")

def _show_rejection(error: Exception):
    display_warning(str(error))

def _ask(prompt_type: Type[PromptBase], prompt: str, **kwargs: Any) -> Any:
    """Runs a rich prompt, turning Ctrl+C and end of input into UserCancelledError."""
    try:
        return prompt_type.ask(prompt, console=console, **kwargs)
    except (EOFError, KeyboardInterrupt) as e:
        raise UserCancelledError("Input closed by user.") from e

def prompt_program(programs: Sequence[str]) -> str:
    """Asks which program to run."""
    return _ask(Prompt, "Which program do you want to run?", choices=list(programs), default=programs[0])

# --- Chat ---

def display_chat_welcome(bot_name: str):
    display_welcome(
        f"{bot_name} - AI Chatbot",
        f"Hello! I am {bot_name}. Ask me about Java, or try keywords like 'weather' or 'capabilities'.\n"
        "Type 'bye' or 'exit' to end the conversation."
    )

def prompt_chat_message() -> str:
    """Reads one line of chat input. An empty line is returned as ''."""
    return _ask(Prompt, "[bold green]You[/bold green]")

def display_bot_reply(bot_name: str, reply: str):
    console.print(f"[bold cyan]{escape(bot_name)}:[/bold cyan] {escape(reply)}")

# --- Grade tracker ---

def display_menu():
    console.rule()
    console.print("1. Add New Student and Grades")
    console.print("2. View Summary Report")
    console.print("3. Exit")

def prompt_menu_choice() -> int:
    """Asks for a menu option. rich re-asks on anything other than 1, 2 or 3."""
    choices = [str(c) for c in (MENU_ADD, MENU_REPORT, MENU_EXIT)]
    return _ask(IntPrompt, "Enter your choice", choices=choices)

def prompt_student_name() -> str:
    return _ask(Prompt, "Enter student name").strip()

@reprompt_on_exception((ValidationError,), on_error=_show_rejection)
def prompt_subject_count() -> int:
    """Asks how many grades will be entered, until a positive whole number is given."""
    return validate_subject_count(_ask(IntPrompt, "Enter number of subjects/grades (e.g., 3)"))

@reprompt_on_exception((ValidationError,), on_error=_show_rejection)
def prompt_grade(number: int) -> float:
    """Asks for one grade, until a number in [0, 100] is given."""
    return validate_grade(_ask(FloatPrompt, f"Grade {number}"))

def prompt_grades(name: str, count: int) -> List[float]:
    console.print(f"Please enter grades ({config.MIN_GRADE:g}-{config.MAX_GRADE:g}) for {escape(name)}:")
    return [prompt_grade(i) for i in range(1, count + 1)]

def display_student_added(record: StudentRecord):
    display_success(
        f"Successfully added {record.name}. "
        f"Average Score: {record.average:.2f} (Grade: {record.letter_grade})"
    )

def format_report_lines(report: GradeReport) -> List[str]:
    """Formats the report as fixed-width text lines.

    Columns are No. (5), Name (30), Average (8, two decimals) and Grade (5),
    separated by ' | '.
    """
    lines = [
        "=" * REPORT_WIDTH,
        "                STUDENT GRADE SUMMARY REPORT             ",
        "=" * REPORT_WIDTH,
        f"{'No.':<5} | {'Name':<30} | {'Average':<8} | {'Grade':<5}",
        "-" * REPORT_WIDTH,
    ]
    for row in report.rows:
        lines.append(f"{row.index:<5d} | {row.name:<30} | {row.average:<8.2f} | {row.letter_grade:<5}")
    lines.extend([
        "=" * REPORT_WIDTH,
        f"OVERALL CLASS AVERAGE: {report.class_average:.2f}",
        f"Total Students Processed: {report.student_count}",
        "=" * REPORT_WIDTH,
    ])
    return lines

def display_report(report: GradeReport, style: str = config.REPORT_STYLE):
    """Displays the summary report.

    Args:
        report: The report to show.
        style: "table" for a rich table, "plain" for the fixed-width text layout.
    """
    if style == "plain":
        console.print()
        for line in format_report_lines(report):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        return

    table = Table(title="Student Grade Summary Report", show_header=True, header_style="bold magenta")
    table.add_column("No.", style="dim", width=5)
    table.add_column("Name", style="cyan")
    table.add_column("Average", justify="right")
    table.add_column("Grade", justify="center")

    for row in report.rows:
        grade_style = "red" if row.letter_grade == config.FAILING_GRADE else "green"
        table.add_row(
            str(row.index),
            escape(row.name),
            f"{row.average:.2f}",
            f"[{grade_style}]{row.letter_grade}[/{grade_style}]",
        )

    console.print(table)
    console.print(f"[bold]Overall class average:[/bold] {report.class_average:.2f}")
    console.print(f"Total students processed: {report.student_count}")

def display_no_data(message: str):
    console.print("\n[bold]--- Report ---[/bold]")
    console.print(f"[yellow]{escape(message)}[/yellow]")
