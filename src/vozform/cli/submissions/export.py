"""
Exportación de formularios enviados a CSV o Excel.
"""

from pathlib import Path
from typing import Annotated, Optional

import pandas as pd
import typer

from vozform.cli.submissions.base import get_submission_manager
from vozform.submissions import FormSubmission


def submissions_export(
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo de salida")] = None,
    format: Annotated[str, typer.Option("--format", "-f", help="Formato: csv, xlsx")] = "csv",
) -> None:
    """
    Exporta todos los formularios enviados a una tabla.

    Una fila por envío, una columna por campo.
    """
    manager = get_submission_manager()
    submissions = [manager.load(s["id"]) for s in manager.list_submissions()]

    if not submissions:
        typer.echo("No hay formularios enviados para exportar.")
        raise typer.Exit(1)

    if output is None:
        output = "submissions"

    # Agregar extensión si no tiene
    if not output.endswith(f".{format}"):
        output = f"{output}.{format}"

    output_path = Path(output)
    df = submissions_dataframe(submissions)

    if format == "csv":
        df.to_csv(output_path, index=False)
    elif format == "xlsx":
        df.to_excel(output_path, index=False, sheet_name="Submissions", engine="openpyxl")
    else:
        typer.echo(f"Error: Formato '{format}' no soportado. Use 'csv' o 'xlsx'.")
        raise typer.Exit(1)

    typer.echo(f"Exportado: {output_path.absolute()}")


def submissions_dataframe(submissions: list[FormSubmission]) -> pd.DataFrame:
    """Genera un DataFrame con los valores planos de cada envío."""
    rows = []
    for submission in submissions:
        row = {"id": submission.id, "submitted_at": submission.submitted_at}
        for field_id, value in submission.flat_values().items():
            # Las listas (skills) van en una sola celda
            row[field_id] = "; ".join(value) if isinstance(value, list) else value
        row["warnings"] = len(submission.issues)
        rows.append(row)
    return pd.DataFrame(rows)
