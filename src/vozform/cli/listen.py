"""
Comando 'listen' - Sesión interactiva por teclado.

Cada línea escrita hace de transcripción final del reconocedor.
"""

from typing import Iterator

import questionary

from vozform.cli.form_view import build_display
from vozform.cli.replay import build_interpreter
from vozform.cli.theme import get_console, print_info
from vozform.config import VozformSettings
from vozform.session import RecognitionSession, TranscriptEvent


QUIT_WORDS = (":quit", ":q", ":exit")


def run_listen(settings: VozformSettings, save: bool = True) -> None:
    interp = build_interpreter(settings, save)

    def show(event, result):
        console = get_console()
        console.clear()
        console.print(build_display(interp, result, event.text))

    session = RecognitionSession(interp, settings.session, on_result=show)

    def keyboard() -> Iterator[TranscriptEvent]:
        while True:
            text = questionary.text("Say:").ask()
            if text is None or text.strip().lower() in QUIT_WORDS:
                session.stop()
                return
            yield TranscriptEvent(text=text)

    console = get_console()
    console.clear()
    console.print(build_display(interp))
    session.run(keyboard)
    print_info("Stopped listening")
