"""
Comando 'replay' - Reproduce un archivo de transcripciones.
"""

import json
from pathlib import Path
from typing import Iterator

import typer
from pydantic import ValidationError

from vozform.cli.form_view import build_form_table
from vozform.cli.theme import apply_theme, get_console, get_palette, print_feedback, print_success
from vozform.commands.interpreter import CommandInterpreter
from vozform.config import VozformSettings
from vozform.core.theme import ThemeSwitch
from vozform.session import RecognitionSession, TranscriptEvent
from vozform.submissions import SubmissionManager


def read_transcript(path: Path) -> Iterator[TranscriptEvent]:
    """
    Lee eventos de un archivo.

    Las líneas vacías y las que empiezan con '#' se ignoran. En archivos
    .jsonl cada línea es un TranscriptEvent.
    """
    jsonl = path.suffix.lower() in (".jsonl", ".ndjson")
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if jsonl:
                try:
                    yield TranscriptEvent.model_validate_json(line)
                except ValidationError as exc:
                    raise ValueError(f"Línea {line_no} inválida: {exc}") from exc
            else:
                yield TranscriptEvent(text=line)


def build_interpreter(settings: VozformSettings, save: bool) -> CommandInterpreter:
    """Intérprete con el tema conectado a la consola y guardado opcional."""
    theme = ThemeSwitch(settings.ui.theme)
    theme.subscribe(apply_theme)
    apply_theme(theme.mode)

    on_submit = None
    if save:
        manager = SubmissionManager(settings.storage.submissions_dir)

        def on_submit(submission):
            path = manager.save(submission)
            print_success(f"Saved submission {submission.id} to {path}")

    return CommandInterpreter(
        settings=settings.interpreter,
        theme=theme,
        on_submit=on_submit,
    )


def run_replay(path: Path, settings: VozformSettings, save: bool = False, show_form: bool = True) -> None:
    if not path.exists():
        typer.echo(f"Error: archivo no encontrado: {path}")
        raise typer.Exit(1)

    interp = build_interpreter(settings, save)
    session = RecognitionSession(interp, settings.session)

    try:
        events = list(read_transcript(path))
    except (ValueError, json.JSONDecodeError) as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(1)

    processed = 0
    for event in events:
        result = session.handle(event)
        console = get_console()
        p = get_palette()
        if result is None:
            console.print(f"  (skipped) {event.text}", style=p.muted)
            continue
        processed += 1
        console.print(f"> {event.text}", style=f"bold {p.secondary}")
        print_feedback(result.feedback)

    console = get_console()
    console.print()
    console.print(f"{processed} of {len(events)} transcripts processed", style=get_palette().muted)
    if show_form:
        console.print(build_form_table(interp))
