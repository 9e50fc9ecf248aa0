"""Rich CLI output utilities for authsetup.

Renders the setup and validation reports with TTY-awareness: styled panels
on a terminal, plain emoji-marked text when piped or captured.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from .settings import SETUP_GUIDE_PATH, TEMPLATE_FILENAME

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import ValidationReport, ValidationResult

__all__ = [
    "console",
    "header",
    "render_checklist",
    "render_report",
    "render_verdict",
    "sanitize_for_terminal",
    "NEXT_STEPS",
    "COMMON_FIXES",
]

ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")

AUTHSETUP_THEME = Theme(
    {
        "info": "dim cyan",
        "warning": "yellow",
        "danger": "bold red",
        "success": "bold green",
        "header": "bold white",
        "muted": "dim white",
        "brand": "bold cyan",
    }
)

console = Console(theme=AUTHSETUP_THEME)

NEXT_STEPS: tuple[str, ...] = (
    "1. Start your Medusa backend: bun run dev",
    "2. Start your storefront: cd ../joyjunction-storefront && bun run dev",
    "3. Visit http://localhost:8000/account and test Google Sign-In",
)

COMMON_FIXES: tuple[str, ...] = (
    f"- Copy {TEMPLATE_FILENAME} to .env and fill in your Google OAuth credentials",
    "- Ensure GOOGLE_CALLBACK_URL ends with /auth/callback",
    "- Get Google OAuth credentials from Google Cloud Console",
)


def _capture(renderable: object) -> str:
    with console.capture() as capture:
        console.print(renderable)
    result: str = capture.get()
    return result.rstrip("\n")


def _plain(force_plain: bool) -> bool:
    return force_plain or not console.is_terminal


def header(title: str, *, force_plain: bool = False) -> str:
    """Render a tool banner such as ``🔍 Validating Google Auth Integration...``."""
    if _plain(force_plain):
        return f"{title}\n"
    return _capture(Panel(Text(title, style="brand"), border_style="blue", padding=(0, 2)))


def render_checklist(
    title: str,
    lines: Sequence[str],
    *,
    style: str = "green",
    force_plain: bool = False,
) -> str:
    """Render a titled list of instructions (next steps, common fixes)."""
    if _plain(force_plain):
        return "\n".join([f"\n{title}:", *lines])

    content = Text("\n".join(lines))
    panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=style, padding=(1, 2))
    return "\n" + _capture(panel)


def _section_lines(title: str, results: Sequence[ValidationResult]) -> list[str]:
    return [f"{title}:", *(f"  {result.message}" for result in results)]


def render_report(report: ValidationReport, *, force_plain: bool = False) -> str:
    """Render the three grouped sections of a validation report."""
    sections = [
        ("Environment Variables", report.environment),
        ("Callback URL", [report.callback]),
        ("Configuration", [report.configuration]),
    ]
    if _plain(force_plain):
        return "\n\n".join("\n".join(_section_lines(title, results)) for title, results in sections)

    blocks: list[Text] = []
    for index, (title, results) in enumerate(sections):
        block = Text()
        if index:
            block.append("\n")
        block.append(f"{title}:", style="header")
        for result in results:
            block.append("\n  ")
            block.append(result.message, style="success" if result.success else "danger")
        blocks.append(block)
    return _capture(Group(*blocks))


def render_verdict(report: ValidationReport, *, force_plain: bool = False) -> str:
    """Render the success banner or failure summary that closes a report."""
    if report.passed:
        banner = "🎉 All validations passed! Google Auth integration is properly configured."
        steps = render_checklist("Next steps", NEXT_STEPS, force_plain=force_plain)
        if _plain(force_plain):
            return f"\n{banner}\n{steps}"
        return "\n" + _capture(Text(banner, style="success")) + "\n" + steps

    count = len(report.failures)
    summary = f"❌ {count} validation(s) failed. Please fix the issues above."
    fixes = render_checklist("Common fixes", COMMON_FIXES, style="red", force_plain=force_plain)
    guide = f"\nFor detailed setup instructions, see: {SETUP_GUIDE_PATH}"
    if _plain(force_plain):
        return f"\n{summary}\n{fixes}\n{guide}"
    return "\n" + _capture(Text(summary, style="danger")) + "\n" + fixes + "\n" + guide


def sanitize_for_terminal(text: str) -> str:
    """Strip ANSI escape sequences from untrusted content.

    Values read from the environment, `.env` or the project config are
    echoed back in reports; escapes in them must not rewrite the terminal.
    """
    return ANSI_ESCAPE_PATTERN.sub("", text)
