"""
Comando 'commands' - Lista los comandos de voz disponibles.
"""

from rich.table import Table
from rich import box

from vozform.cli.theme import get_console, get_palette, print_header
from vozform.commands.registry import (
    FIELD_SYNONYMS,
    TERMINATOR_PHRASES,
    CommandGroup,
    default_registry,
)


def build_commands_table() -> Table:
    """Tabla de comandos globales agrupados."""
    p = get_palette()
    registry = default_registry()

    table = Table(
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("Group")
    table.add_column("Say")
    table.add_column("Effect")

    for group in CommandGroup:
        entries = [e for e in registry if e.group == group]
        for idx, entry in enumerate(entries):
            table.add_row(
                group.value if idx == 0 else "",
                f'"{entry.keyword}"',
                entry.description,
            )
        if entries:
            table.add_section()

    return table


def show_commands() -> None:
    """
    Muestra todos los comandos disponibles con ejemplos.
    """
    console = get_console()
    p = get_palette()

    print_header("VOZFORM - Voice commands", "Commands are matched anywhere in what you say")
    console.print(build_commands_table())

    console.print()
    console.print("Jump to a field by saying its name:", style=f"bold {p.secondary}")
    by_field: dict[str, list[str]] = {}
    for phrase, field_id in FIELD_SYNONYMS:
        by_field.setdefault(field_id, []).append(f'"{phrase}"')
    for field_id, phrases in by_field.items():
        console.print(f"  {field_id:<14} {', '.join(phrases)}", style=p.label)

    console.print()
    console.print("Filling a field:", style=f"bold {p.secondary}")
    console.print('  "go to email"             select a field by label', style=p.label)
    console.print('  "john smith done"         set the value and move on', style=p.label)
    console.print(f'  {" / ".join(TERMINATOR_PHRASES):<25}finish the active field', style=p.label)
    console.print('  "start" / "first field"   begin at the first field', style=p.label)
