"""Main execution script for the console chat responder and grade tracker."""

import sys
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv() # Load variables from .env into environment before config is read

# Ensure the project root directory is in the Python path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import config
from utils.logger import setup_logger
from utils.error_handler import (BaseAppException, CapacityExceededError, EmptyStateError,
                                 UserCancelledError, ValidationError)
from core.responder import ResponseMatcher
from core.gradebook import GradeBook
import ui.cli as cli

# Initialize logger as early as possible after config is loaded
logger = setup_logger()

PROGRAM_CHAT = "chat"
PROGRAM_GRADES = "grades"

def run_chat(matcher: Optional[ResponseMatcher] = None) -> None:
    """Runs one chat session until the bot says goodbye or input ends."""
    if matcher is None:
        matcher = ResponseMatcher()
    logger.info("Chat session started.")
    cli.display_chat_welcome(config.BOT_NAME)

    turns = 0
    try:
        while True:
            reply = matcher.respond(cli.prompt_chat_message())
            turns += 1
            cli.display_bot_reply(config.BOT_NAME, reply)
            if matcher.is_farewell(reply):
                break
    except UserCancelledError as e:
        logger.info(f"Chat session cancelled: {e}")
        cli.display_farewell("Session closed.")
    logger.info(f"Chat session ended after {turns} turns.")

def _add_student(gradebook: GradeBook) -> None:
    """Collects one student's name and grades and stores them."""
    try:
        gradebook.ensure_capacity()
    except CapacityExceededError as e:
        cli.display_warning(str(e))
        return

    name = cli.prompt_student_name()
    if not name:
        cli.display_warning("Student name cannot be empty. Returning to menu.")
        return

    count = cli.prompt_subject_count()
    grades = cli.prompt_grades(name, count)
    try:
        record = gradebook.add_student(name, grades)
    except ValidationError as e:
        logger.warning(f"Student '{name}' rejected: {e}")
        cli.display_warning(str(e))
        return
    cli.display_student_added(record)

def _show_report(gradebook: GradeBook) -> None:
    try:
        report = gradebook.report()
    except EmptyStateError as e:
        logger.info("Report requested with no students recorded.")
        cli.display_no_data(str(e))
        return
    cli.display_report(report)

def run_grade_tracker(gradebook: Optional[GradeBook] = None) -> None:
    """Runs the grade tracker menu until the user chooses Exit or input ends."""
    if gradebook is None:
        gradebook = GradeBook()
    logger.info("Grade tracker started.")
    cli.display_welcome("Student Grade Tracker", "Add students with their grades, then view the summary report.")

    try:
        while True:
            cli.display_menu()
            choice = cli.prompt_menu_choice()
            if choice == cli.MENU_ADD:
                _add_student(gradebook)
            elif choice == cli.MENU_REPORT:
                _show_report(gradebook)
            elif choice == cli.MENU_EXIT:
                break
    except UserCancelledError as e:
        logger.info(f"Grade tracker cancelled: {e}")

    logger.info(f"Grade tracker ended with {len(gradebook)} students recorded.")
    cli.display_farewell("Thank you for using the Grade Tracker. Goodbye!")

PROGRAMS = {
    PROGRAM_CHAT: run_chat,
    PROGRAM_GRADES: run_grade_tracker,
}

def main(argv: Optional[List[str]] = None) -> int:
    """Runs the program named in argv[0], or asks which one to run.

    Returns:
        Process exit code: 0 on normal termination, 2 for an unknown program name,
        1 if an unexpected error stopped the program.
    """
    args = sys.argv[1:] if argv is None else argv
    logger.info(f"Starting with arguments: {args}")

    try:
        program = args[0].strip().lower() if args else cli.prompt_program(list(PROGRAMS))
        if program not in PROGRAMS:
            cli.display_error(f"Unknown program '{program}'. Choose one of: {', '.join(PROGRAMS)}.")
            return 2
        PROGRAMS[program]()
    except UserCancelledError as e:
        logger.info(f"Operation cancelled by user: {e}")
    except BaseAppException as e:
        logger.error(f"Application error: {e}", exc_info=config.DEBUG)
        cli.display_error(str(e))
        return 1
    except Exception as e:
        # Catch-all for unexpected errors
        logger.critical(f"An unexpected error occurred: {e}", exc_info=True)
        cli.display_error(f"An unexpected error occurred: {e}. Check logs for details.")
        return 1
    return 0

def chat_entry() -> int:
    """Console script entry point for the chat responder."""
    return main([PROGRAM_CHAT])

def grades_entry() -> int:
    """Console script entry point for the grade tracker."""
    return main([PROGRAM_GRADES])

if __name__ == "__main__":
    sys.exit(main())
