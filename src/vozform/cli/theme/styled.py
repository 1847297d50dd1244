"""
Funciones para crear objetos Text estilizados (no imprimen directamente).
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from vozform.commands.feedback import Feedback, FeedbackKind
from vozform.cli.theme.icons import get_icons
from vozform.cli.theme.palette import get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Crea un encabezado estilizado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_label(label: str, value, unit: str = None) -> Text:
    """Formatea una etiqueta con valor."""
    p = get_palette()
    text = Text()
    text.append(f"{label}: ", style=p.label)
    text.append(str(value), style=f"bold {p.value}")
    if unit:
        text.append(f" {unit}", style=p.muted)
    return text


def styled_success(text: str) -> Text:
    p = get_palette()
    return Text(f"{get_icons().success} {text}", style=p.success)


def styled_warning(text: str) -> Text:
    p = get_palette()
    return Text(f"{get_icons().warning} {text}", style=p.warning)


def styled_error(text: str) -> Text:
    p = get_palette()
    return Text(f"{get_icons().error} {text}", style=p.error)


def styled_info(text: str) -> Text:
    p = get_palette()
    return Text(f"{get_icons().info} {text}", style=p.info)


def styled_feedback(feedback: Feedback) -> Text:
    """Feedback del intérprete con el estilo de su tipo."""
    if feedback.kind == FeedbackKind.SUCCESS:
        return styled_success(feedback.message)
    if feedback.kind == FeedbackKind.PROMPT:
        p = get_palette()
        return Text(f"{get_icons().prompt} {feedback.message}", style=f"bold {p.prompt}")
    if feedback.kind in (FeedbackKind.DUPLICATE_SKILL, FeedbackKind.NO_ACTIVE_FIELD):
        return styled_warning(feedback.message)
    return styled_error(feedback.message)
