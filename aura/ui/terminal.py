"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the aura package.

To create a different UI (web, chat widget, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..data.parser import TimetableParser
from ..config import NO_CLASS
from ..models import Certificate, UserProfile


class TerminalDisplay:
    """
    Pretty terminal output for assistant results.

    All methods are classmethods taking plain data from the engines, so
    the display never has to know how a result was computed.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def projection_badge(cls, projection) -> str:
        """Colored summary of one ThresholdProjection."""
        if projection.achieved:
            return f"{cls.BG_YELLOW}{cls.WHITE} TARGET ACHIEVED {cls.RESET}"
        if projection.can_skip:
            return f"{cls.BG_GREEN}{cls.WHITE} CAN SKIP {projection.can_skip} {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ATTEND {projection.must_attend} MORE {cls.RESET}"

    @classmethod
    def print_answer(cls, text: str):
        """Print an assistant reply, one line per line of text."""
        for line in (text or "").split("\n"):
            print(f"  {cls.CYAN}AURA>{cls.RESET} {line}")

    @classmethod
    def print_projections(cls, projections: list):
        """Print SubjectProjection results as a table."""
        cls.print_header("ATTENDANCE PROJECTIONS")
        if not projections:
            print(f"\n  {cls.DIM}No subjects with projectable attendance.{cls.RESET}")
            return

        for item in projections:
            print(f"\n  {cls.BOLD}{item.code}{cls.RESET} {item.name}")
            print(f"  {cls.DIM}Attended {item.count} ({item.percentage}){cls.RESET}")
            for label, projection in item.projection.items():
                print(f"    {label:<5} {cls.projection_badge(projection)}")

    @classmethod
    def print_timetable(cls, timetable: dict):
        """Print the weekly timetable in week order."""
        cls.print_header("TIME TABLE")
        if not timetable:
            print(f"\n  {cls.DIM}No timetable available.{cls.RESET}")
            return

        for day in TimetableParser.ordered_days(timetable):
            cls.print_subheader(day)
            for i, slot in enumerate(timetable[day], 1):
                subject = TimetableParser.display_subject(slot)
                color = cls.DIM if subject == NO_CLASS else cls.RESET
                print(f"    {cls.BOLD}Period {i}{cls.RESET}  {color}{subject}{cls.RESET}")

    @classmethod
    def print_daily_attendance(cls, daily_attendance: dict):
        """Print each date's period statuses, Present in green and Absent in red."""
        cls.print_subheader("Daily Attendance")
        for day in TimetableParser.ordered_dates(daily_attendance):
            statuses = []
            for status in daily_attendance[day]:
                if status == "Present":
                    statuses.append(f"{cls.GREEN}{status}{cls.RESET}")
                elif status == "Absent":
                    statuses.append(f"{cls.RED}{status}{cls.RESET}")
                else:
                    statuses.append(f"{cls.DIM}{status or '-'}{cls.RESET}")
            print(f"  {day:<20} {', '.join(statuses)}")

    @classmethod
    def print_certificate(cls, certificate: Certificate):
        print(f"  {cls.GREEN}✓ {certificate.type} Processed! "
              f"{certificate.points} points awarded.{cls.RESET}")

    @classmethod
    def print_profile(cls, profile: UserProfile):
        """Print the activity-points total and the uploaded certificates."""
        cls.print_header("ACTIVITY POINTS")
        print(f"  {cls.BOLD}Total Points:{cls.RESET} {profile.total_points}")

        if not profile.certificates:
            print(f"\n  {cls.DIM}No certificates uploaded yet{cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'ID':<20} {'NAME':<30} {'TYPE':<26} {'POINTS':>6}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 85}{cls.RESET}")
        for cert in profile.certificates:
            print(f"  {cert.id:<20} {cert.name[:30]:<30} {cert.type[:26]:<26} "
                  f"{cls.YELLOW}+{cert.points:>5}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"  {cls.RED}✗ {message}{cls.RESET}")
