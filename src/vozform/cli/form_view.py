"""
Funciones para construir componentes visuales del formulario.
"""

from typing import Optional

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from vozform.cli.theme import get_icons, get_palette, styled_feedback
from vozform.commands.interpreter import CommandInterpreter, InterpreterMode, InterpretResult
from vozform.core.fields import CHOICE_TYPES, FieldType
from vozform.core.schema import FormSchema
from vozform.core.validators import format_field_value


SECTION_TITLES = {
    "personalInfo": "Personal Info",
    "preferences": "Preferences",
    "details": "Details",
    "contact": "Contact",
}


def section_title(section: str) -> str:
    return SECTION_TITLES.get(section, section)


def build_form_table(interp: CommandInterpreter, title: str = "Voice Form") -> Table:
    """Construye la tabla del formulario con el campo activo resaltado."""
    p = get_palette()
    icons = get_icons()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
        expand=False,
    )

    table.add_column("#", justify="right", width=3)
    table.add_column("Section", justify="left", width=14)
    table.add_column("Field", justify="left", width=22)
    table.add_column("Value", justify="left", width=32)
    table.add_column("", justify="center", width=4)

    for idx, spec in enumerate(interp.schema):
        is_active = spec.id == interp.active_field
        value = interp.store.value_of(spec.id)
        value_str = format_field_value(spec, value)
        filled = interp.store.is_filled(spec.id)

        if is_active:
            row_style = f"bold reverse {p.accent}"
            table.add_row(
                Text(f"{icons.pointer}{idx + 1}", style=row_style),
                Text(section_title(spec.section), style=row_style),
                Text(spec.label, style=row_style),
                Text(value_str, style=row_style),
                Text(icons.check if filled else icons.empty, style=row_style),
            )
            continue

        table.add_row(
            Text(str(idx + 1), style=p.muted),
            Text(section_title(spec.section), style=p.muted),
            Text(spec.label, style="bold"),
            Text(value_str, style=f"bold {p.value}" if filled else p.muted),
            Text(icons.check if filled else icons.empty, style=p.success if filled else p.muted),
        )

    return table


def build_hint_text(interp: CommandInterpreter) -> Text:
    """Indicación hablada del campo activo."""
    p = get_palette()
    spec = interp.active_spec

    hint = Text()
    if interp.mode == InterpreterMode.AWAITING_SKILL_ADD:
        hint.append("  Listening for a skill to add...", style=f"bold {p.prompt}")
        return hint
    if interp.mode == InterpreterMode.AWAITING_SKILL_REMOVE:
        hint.append("  Listening for a skill to remove...", style=f"bold {p.prompt}")
        return hint

    if spec is None:
        hint.append('  Say "first field" or "go to <field>" to start', style=p.info)
        return hint

    if spec.hint:
        hint.append(f"  {spec.hint}", style=p.info)

    if spec.field_type == FieldType.SLIDER:
        r = spec.value_range
        hint.append(f"  (min: {r.min_value:,.0f}, max: {r.max_value:,.0f}, step: {r.step:,.0f})", style=p.muted)
    elif spec.field_type in CHOICE_TYPES:
        hint.append(f"  ({', '.join(spec.option_values)})", style=p.muted)

    return hint


def build_progress_text(interp: CommandInterpreter, width: int = 30) -> Text:
    """Barra de progreso de campos con valor."""
    p = get_palette()
    icons = get_icons()
    progress = interp.store.progress()
    filled_width = int(progress * width)

    text = Text()
    text.append("  Progress: ", style=p.muted)
    text.append(icons.bar_full * filled_width, style=p.progress)
    text.append(icons.bar_empty * (width - filled_width), style=p.muted)
    text.append(f"  {round(progress * 100)}%", style=f"bold {p.accent}")
    text.append(f"  |  theme: {interp.theme.mode.value}", style=p.muted)

    if interp.completed:
        text.append("  |  ", style=p.muted)
        text.append(f"{icons.success} Submitted", style=f"bold {p.success}")

    return text


def build_display(
    interp: CommandInterpreter,
    last: Optional[InterpretResult] = None,
    transcript: str = "",
) -> Group:
    """Construye la vista completa: tabla, progreso, último feedback."""
    p = get_palette()
    parts = [build_form_table(interp), build_progress_text(interp), build_hint_text(interp)]

    if last is not None:
        body = Text()
        if transcript:
            body.append(f'Heard: "{transcript}"\n', style=p.muted)
        body.append_text(styled_feedback(last.feedback))
        parts.append(Panel(body, border_style=p.border, padding=(0, 1)))

    return Group(*parts)


def build_schema_table(schema: FormSchema) -> Table:
    """Tabla con la definición de los campos del esquema."""
    p = get_palette()

    table = Table(
        title="Form fields",
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("#", justify="right")
    table.add_column("Id")
    table.add_column("Label")
    table.add_column("Section")
    table.add_column("Type")
    table.add_column("Default / options")

    for idx, spec in enumerate(schema):
        if spec.field_type in CHOICE_TYPES:
            detail = " | ".join(spec.option_values)
        elif spec.field_type == FieldType.SLIDER:
            r = spec.value_range
            detail = f"{r.min_value:,.0f}-{r.max_value:,.0f} (default {r.initial:,.0f})"
        else:
            detail = format_field_value(spec, spec.default_value())

        table.add_row(
            str(idx + 1), spec.id, spec.label, section_title(spec.section),
            spec.field_type.value, detail,
        )

    return table
