"""Tests for the console display and prompt helpers."""

import io

import pytest

import ui.cli as cli
from core.gradebook import GradeBook
from utils.error_handler import UserCancelledError


def sample_report():
    book = GradeBook()
    book.add_student("Alice", [80, 90, 100])
    book.add_student("Bob", [55, 60])
    return book.report()


class TestFormatReportLines:
    def test_fixed_width_layout(self) -> None:
        lines = cli.format_report_lines(sample_report())
        assert lines == [
            "=" * 55,
            "                STUDENT GRADE SUMMARY REPORT             ",
            "=" * 55,
            "No.   | Name                           | Average  | Grade",
            "-" * 55,
            "1     | Alice                          | 90.00    | A    ",
            "2     | Bob                            | 57.50    | F    ",
            "=" * 55,
            "OVERALL CLASS AVERAGE: 73.75",
            "Total Students Processed: 2",
            "=" * 55,
        ]

    def test_long_names_are_not_truncated(self) -> None:
        book = GradeBook()
        name = "Bartholomew Maximilian Fitzgerald-Smythe"
        book.add_student(name, [70])
        assert any(name in line for line in cli.format_report_lines(book.report()))


class TestDisplayReport:
    def test_plain_style_prints_layout(self, recording_console) -> None:
        cli.display_report(sample_report(), style="plain")
        output = recording_console.file.getvalue()
        assert "1     | Alice                          | 90.00    | A" in output
        assert "OVERALL CLASS AVERAGE: 73.75" in output

    def test_table_style(self, recording_console) -> None:
        cli.display_report(sample_report(), style="table")
        output = recording_console.file.getvalue()
        assert "Student Grade Summary Report" in output
        assert "Alice" in output
        assert "90.00" in output
        assert "57.50" in output
        assert "Overall class average: 73.75" in output
        assert "Total students processed: 2" in output


class TestMessages:
    def test_markup_in_user_text_is_escaped(self, recording_console) -> None:
        cli.display_bot_reply("PyBot", "[bold]not markup[/bold]")
        assert "[bold]not markup[/bold]" in recording_console.file.getvalue()

    def test_student_added_message(self, recording_console) -> None:
        record = GradeBook().add_student("Alice", [80, 90, 100])
        cli.display_student_added(record)
        assert "Successfully added Alice. Average Score: 90.00 (Grade: A)" in recording_console.file.getvalue()


class TestPrompts:
    def test_grade_reprompts_until_in_range(self, recording_console, scripted_input) -> None:
        scripted_input("150", "abc", "-1", "85.5")
        assert cli.prompt_grade(1) == 85.5
        output = recording_console.file.getvalue()
        assert output.count("Grade must be between 0 and 100") == 2
        assert "Please enter a number" in output

    def test_subject_count_reprompts_until_positive(self, recording_console, scripted_input) -> None:
        scripted_input("0", "-3", "two", "2")
        assert cli.prompt_subject_count() == 2
        assert "Number of grades must be positive." in recording_console.file.getvalue()

    def test_prompt_grades_collects_count(self, recording_console, scripted_input) -> None:
        scripted_input("70", "80", "90")
        assert cli.prompt_grades("Alice", 3) == [70.0, 80.0, 90.0]

    def test_menu_choice_rejects_unknown_option(self, recording_console, scripted_input) -> None:
        scripted_input("7", "2")
        assert cli.prompt_menu_choice() == cli.MENU_REPORT

    def test_student_name_is_stripped(self, recording_console, scripted_input) -> None:
        scripted_input("  Alice  ")
        assert cli.prompt_student_name() == "Alice"

    def test_empty_chat_line(self, recording_console, scripted_input) -> None:
        scripted_input("")
        assert cli.prompt_chat_message() == ""

    def test_end_of_input_cancels(self, recording_console, scripted_input) -> None:
        with pytest.raises(UserCancelledError):
            cli.prompt_chat_message()

    def test_program_choice_default(self, recording_console, scripted_input) -> None:
        scripted_input("")
        assert cli.prompt_program(["chat", "grades"]) == "chat"


class TestEmojiCodesKept:
    def report_with(self, name):
        book = GradeBook()
        book.add_student(name, [80, 90, 100])
        return book.report()

    def test_plain_report_keeps_name(self, recording_console) -> None:
        cli.display_report(self.report_with("Ann :smile:"), style="plain")
        assert "1     | Ann :smile:                    | 90.00    | A" in recording_console.file.getvalue()

    def test_table_report_keeps_name(self, recording_console) -> None:
        cli.display_report(self.report_with("Ann :smile:"), style="table")
        assert "Ann :smile:" in recording_console.file.getvalue()

    def test_student_added_keeps_name(self, recording_console) -> None:
        record = GradeBook().add_student("Ann :smile:", [70])
        cli.display_student_added(record)
        assert "Successfully added Ann :smile:." in recording_console.file.getvalue()

    def test_chat_reply_keeps_codes(self, recording_console) -> None:
        cli.display_bot_reply("PyBot", "see :thumbs_up: there")
        assert "see :thumbs_up: there" in recording_console.file.getvalue()

    def test_default_console_does_not_replace_codes(self) -> None:
        buffer = io.StringIO()
        console = cli.make_console(file=buffer, width=80, color_system=None)
        console.print("Ann :smile:")
        assert buffer.getvalue() == "Ann :smile:\n"
