"""
CLI de vozform - Formularios llenados por voz.

Comandos:
- listen: Sesión interactiva (cada línea escrita es una transcripción)
- replay: Reproduce un archivo de transcripciones
- fields: Lista los campos del formulario
- commands: Lista los comandos de voz disponibles
- submissions: Gestión de formularios enviados
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from vozform import __version__
from vozform.config import VozformSettings, load_settings

# Crear aplicación principal
app = typer.Typer(
    name="vozform",
    help="Llenado de formularios por comandos de voz.",
    no_args_is_help=True,
)

# Configuración activa (se carga en el callback)
_settings: Optional[VozformSettings] = None


def get_settings() -> VozformSettings:
    """Obtiene la configuración activa (defaults si no se cargó)."""
    global _settings
    if _settings is None:
        _settings = VozformSettings()
    return _settings


def set_settings(settings: Optional[VozformSettings]) -> None:
    global _settings
    _settings = settings


def _register_subapps():
    """Registra sub-aplicaciones de forma diferida."""
    from vozform.cli.submissions import submissions_app

    app.add_typer(submissions_app, name="submissions")


def _version_callback(value: bool):
    if value:
        typer.echo(f"vozform {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Archivo de configuración JSON")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Muestra el log de clasificación")] = False,
    version: Annotated[bool, typer.Option("--version", callback=_version_callback, is_eager=True,
                                          help="Muestra la versión")] = False,
):
    """
    VozForm - Formularios por voz.

    Cada transcripción se clasifica como comando global, navegación a un
    campo o valor para el campo activo.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )

    from vozform.cli.submissions.base import reset_submission_manager

    reset_submission_manager()
    try:
        set_settings(load_settings(config))
    except FileNotFoundError:
        typer.echo(f"Error: archivo de configuración no encontrado: {config}")
        raise typer.Exit(1)
    except ValidationError as exc:
        typer.echo(f"Error: configuración inválida:\n{exc}")
        raise typer.Exit(1)


@app.command()
def fields():
    """Lista los campos del formulario en orden de navegación."""
    from vozform.cli.theme import get_console
    from vozform.cli.form_view import build_schema_table
    from vozform.core.schema import default_schema

    get_console().print(build_schema_table(default_schema()))


@app.command()
def commands():
    """Muestra todos los comandos de voz disponibles."""
    from vozform.cli.commands import show_commands
    show_commands()


@app.command()
def listen(
    save: Annotated[bool, typer.Option("--save/--no-save", help="Guarda el formulario al enviarlo")] = True,
):
    """
    Sesión interactiva: escribe lo que dirías en voz alta.

    Escribe ':quit' (o Ctrl+C) para terminar.
    """
    from vozform.cli.listen import run_listen
    run_listen(get_settings(), save=save)


@app.command()
def replay(
    transcript: Annotated[Path, typer.Argument(help="Archivo de transcripciones (.txt o .jsonl)")],
    save: Annotated[bool, typer.Option("--save/--no-save", help="Guarda el formulario al enviarlo")] = False,
    show_form: Annotated[bool, typer.Option("--form/--no-form", help="Muestra el formulario al final")] = True,
):
    """
    Reproduce un archivo de transcripciones.

    Texto plano: una frase por línea. JSON lines: {"text", "confidence", "is_final"}.
    """
    from vozform.cli.replay import run_replay
    run_replay(transcript, get_settings(), save=save, show_form=show_form)


_register_subapps()


__all__ = [
    "app",
    "get_settings",
    "set_settings",
]
