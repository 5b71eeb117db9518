"""
Command-Line Interface for the AURA assistant.

This module provides the interactive CLI over a saved attendance record.
It handles user input and hands results to the TerminalDisplay.

MODES:
------
1. ASK AURA: Free-text questions (local answers, generative fallback)
2. PROJECTIONS: How many classes to skip or attend per subject
3. TIME TABLE: Weekly timetable and daily attendance
4. ACTIVITY POINTS: Classify certificates and track the points total

Run with:
    python -m aura [record.json]
"""

import logging
import os
import sys

from .assistant import AcademicAssistant, UploadRejected
from .config import get_settings
from .data import RecordLoader
from .ui import TerminalDisplay


def _run_chat(assistant: AcademicAssistant):
    """Question loop; an empty line or 'exit' returns to the menu."""
    print(f"\n  {TerminalDisplay.DIM}Ask about your timetable or attendance. "
          f"Empty line to go back.{TerminalDisplay.RESET}")
    while True:
        try:
            query = input(f"\n  {TerminalDisplay.BOLD}You>{TerminalDisplay.RESET} ").strip()
        except EOFError:
            return
        if not query or query.lower() in ("exit", "quit"):
            return
        TerminalDisplay.print_answer(assistant.ask(query))


def _run_certificates(assistant: AcademicAssistant):
    """Upload or remove certificates by path until the user is done."""
    while True:
        TerminalDisplay.print_profile(assistant.profile)
        try:
            choice = input("\n  File path to upload, 'rm <id>' to remove, "
                           "or Enter to go back: ").strip()
        except EOFError:
            return
        if not choice:
            return

        if choice.startswith("rm "):
            cert_id = choice[3:].strip()
            if not assistant.remove_certificate(cert_id):
                TerminalDisplay.print_error(f"No certificate with id {cert_id}")
            continue

        try:
            size = os.path.getsize(choice)
        except OSError:
            TerminalDisplay.print_error(f"Cannot read {choice}")
            continue

        try:
            certificate = assistant.upload_certificate(os.path.basename(choice), size)
        except UploadRejected as e:
            TerminalDisplay.print_error(str(e))
            continue
        TerminalDisplay.print_certificate(certificate)


def main(argv=None):
    """
    Command-line interface for the assistant.

    The record comes from the first argument, AURA_RECORD_PATH, or the
    bundled example record, in that order.
    """
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    record_path = argv[0] if argv else settings.record_path
    try:
        record = RecordLoader().load(record_path)
    except (FileNotFoundError, ValueError) as e:
        TerminalDisplay.print_error(str(e))
        return 1

    assistant = AcademicAssistant(record, username=settings.username)

    # Welcome banner with mode selection
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         AURA                                                     ║")
    print("║         Academic Utility and Resource Allocator                  ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. Ask AURA          - Questions about timetable & attendance   ║")
    print("║  2. Projections       - Classes to skip or attend per subject    ║")
    print("║  3. Time Table        - Weekly timetable and daily attendance    ║")
    print("║  4. Activity Points   - Upload certificates, track points        ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    today = assistant.todays_schedule()
    if today:
        TerminalDisplay.print_subheader("Today's Schedule")
        for i, subject in enumerate(today, 1):
            print(f"    Period {i}  {subject}")

    while True:
        try:
            mode = input(f"\n{TerminalDisplay.BOLD}Select mode (1-4, q to quit): "
                         f"{TerminalDisplay.RESET}").strip().lower()
        except EOFError:
            mode = "q"

        if mode == "1":
            _run_chat(assistant)
        elif mode == "2":
            TerminalDisplay.print_projections(assistant.attendance_projections())
        elif mode == "3":
            TerminalDisplay.print_timetable(record.timetable)
            TerminalDisplay.print_daily_attendance(record.daily_attendance)
        elif mode == "4":
            _run_certificates(assistant)
        elif mode in ("q", "quit", "exit"):
            return 0
        else:
            TerminalDisplay.print_error("Please choose 1, 2, 3, 4 or q")


if __name__ == "__main__":
    sys.exit(main())
