"""
Comandos CLI para gestión de formularios enviados.
"""

import typer

from vozform.cli.submissions.base import (
    get_submission_manager,
    submissions_delete,
    submissions_list,
    submissions_show,
)
from vozform.cli.submissions.export import submissions_export

# Crear sub-aplicación
submissions_app = typer.Typer(help="Gestión de formularios enviados")

# Registrar comandos
submissions_app.command("list")(submissions_list)
submissions_app.command("show")(submissions_show)
submissions_app.command("delete")(submissions_delete)
submissions_app.command("export")(submissions_export)

__all__ = ["submissions_app", "get_submission_manager"]
