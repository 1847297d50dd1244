"""
Funciones que imprimen directamente a la consola.
"""

from vozform.commands.feedback import Feedback
from vozform.cli.theme.palette import get_console, get_palette
from vozform.cli.theme.styled import (
    styled_header, styled_label, styled_success, styled_warning,
    styled_info, styled_feedback,
)


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Imprime un campo con valor."""
    console = get_console()
    prefix = " " * indent
    console.print(prefix, styled_label(label, value, unit))


def print_success(text: str) -> None:
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    get_console().print(styled_warning(text))


def print_info(text: str) -> None:
    get_console().print(styled_info(text))


def print_feedback(feedback: Feedback) -> None:
    """Imprime el feedback de una transcripción."""
    get_console().print(styled_feedback(feedback))


def print_section(title: str) -> None:
    """Imprime título de sección."""
    console = get_console()
    p = get_palette()
    console.print()
    console.print(f"-- {title} --", style=f"bold {p.secondary}")
