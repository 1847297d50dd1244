"""
Comandos básicos de envíos: list, show, delete.
"""

from typing import Annotated, Optional

import typer
from rich.table import Table
from rich import box

from vozform.cli.theme import (
    get_console,
    get_palette,
    print_field,
    print_header,
    print_section,
    print_success,
    print_warning,
)
from vozform.cli.form_view import section_title
from vozform.core.schema import default_schema
from vozform.core.validators import format_field_value
from vozform.submissions import SubmissionManager

# Instancia global del gestor de envíos
_submission_manager: Optional[SubmissionManager] = None


def get_submission_manager() -> SubmissionManager:
    """Obtiene o crea el gestor de envíos según la configuración activa."""
    global _submission_manager
    if _submission_manager is None:
        from vozform.cli import get_settings
        _submission_manager = SubmissionManager(get_settings().storage.submissions_dir)
    return _submission_manager


def reset_submission_manager() -> None:
    global _submission_manager
    _submission_manager = None


def submissions_list():
    """Lista los formularios enviados."""
    manager = get_submission_manager()
    submissions = manager.list_submissions()

    if not submissions:
        typer.echo("\nNo hay formularios enviados.")
        typer.echo("Usa 'vozform listen' y di \"submit form\" para enviar uno.\n")
        return

    p = get_palette()
    table = Table(
        title="Submissions",
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("ID")
    table.add_column("Submitted")
    table.add_column("Full Name")
    table.add_column("Warnings", justify="right")

    for s in submissions:
        table.add_row(s["id"], s["submitted_at"][:19], s["name"] or "-", str(s["n_issues"]))

    get_console().print(table)


def submissions_show(
    submission_id: Annotated[str, typer.Argument(help="ID (o prefijo) del envío")],
):
    """Muestra los valores de un formulario enviado."""
    manager = get_submission_manager()
    submission = manager.get_submission(submission_id)

    if submission is None:
        typer.echo(f"Error: Envío '{submission_id}' no encontrado.")
        raise typer.Exit(1)

    schema = default_schema()
    print_header(f"SUBMISSION {submission.id}", submission.submitted_at)

    for section, values in submission.values.items():
        print_section(section_title(section))
        for field_id, value in values.items():
            spec = schema.get(field_id)
            if spec is None:
                print_field(field_id, value)
            else:
                print_field(spec.label, format_field_value(spec, value))

    if submission.issues:
        print_section("Warnings")
        for issue in submission.issues:
            print_warning(issue.message)


def submissions_delete(
    submission_id: Annotated[str, typer.Argument(help="ID del envío")],
    force: Annotated[bool, typer.Option("--force", "-f", help="No pedir confirmación")] = False,
):
    """Elimina un formulario enviado."""
    manager = get_submission_manager()
    submission = manager.get_submission(submission_id)

    if submission is None:
        typer.echo(f"Error: Envío '{submission_id}' no encontrado.")
        raise typer.Exit(1)

    if not force and not typer.confirm(f"¿Eliminar el envío {submission.id}?"):
        raise typer.Exit()

    manager.delete(submission.id)
    print_success(f"Deleted submission {submission.id}")
