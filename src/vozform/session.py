"""
Sesión de reconocimiento de voz.

Recibe eventos del reconocedor externo, descarta los parciales y los de
baja confianza, y los entrega de a uno al intérprete. Si el reconocedor
se corta sin que se haya pedido detenerlo, se reinicia tras una espera
corta.
"""

import logging
import queue
import time
from enum import Enum
from typing import Callable, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from vozform.commands.interpreter import CommandInterpreter, InterpretResult
from vozform.config import SessionSettings

logger = logging.getLogger(__name__)


class TranscriptEvent(BaseModel):
    """Evento del reconocedor de voz."""
    text: str
    confidence: float = Field(default=1.0, ge=0, le=1)
    is_final: bool = True


EventLike = Union[TranscriptEvent, str]
# Fábrica de fuentes: se vuelve a llamar en cada reinicio
SourceFactory = Callable[[], Iterable[EventLike]]


class SessionStatus(Enum):
    IDLE = "idle"
    LISTENING = "listening"
    STOPPED = "stopped"


def as_event(item: EventLike) -> TranscriptEvent:
    if isinstance(item, TranscriptEvent):
        return item
    return TranscriptEvent(text=str(item))


class RecognitionSession:
    """Serializa los eventos del reconocedor hacia un único intérprete."""

    def __init__(
        self,
        interpreter: CommandInterpreter,
        settings: Optional[SessionSettings] = None,
        on_result: Optional[Callable[[TranscriptEvent, InterpretResult], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.interpreter = interpreter
        self.settings = settings if settings is not None else SessionSettings()
        self.on_result = on_result
        self.sleep = sleep

        self.status = SessionStatus.IDLE
        self.restarts = 0
        self._queue: "queue.Queue[TranscriptEvent]" = queue.Queue()

    def accepts(self, event: TranscriptEvent) -> bool:
        """Solo los eventos finales con confianza suficiente llegan al intérprete."""
        return event.is_final and event.confidence >= self.settings.min_confidence

    def handle(self, item: EventLike) -> Optional[InterpretResult]:
        """Procesa un evento en el hilo actual. Retorna None si se descarta."""
        event = as_event(item)
        if not self.accepts(event):
            logger.debug(f"Evento descartado: {event.text!r} (final={event.is_final}, conf={event.confidence:.2f})")
            return None

        result = self.interpreter.interpret(event.text)
        if self.on_result is not None:
            self.on_result(event, result)
        return result

    # ------------------------------------------------------------------
    # Cola para productores en otros hilos
    # ------------------------------------------------------------------

    def feed(self, item: EventLike) -> None:
        """Encola un evento (seguro desde cualquier hilo)."""
        self._queue.put(as_event(item))

    def pending(self) -> int:
        return self._queue.qsize()

    def process_pending(self) -> List[InterpretResult]:
        """Vacía la cola procesando los eventos en orden de llegada."""
        results = []
        while True:
            try:
                event = self._queue.get_nowait()
            except queue.Empty:
                break
            result = self.handle(event)
            if result is not None:
                results.append(result)
        return results

    # ------------------------------------------------------------------
    # Ciclo de escucha
    # ------------------------------------------------------------------

    def stop(self) -> None:
        """Detiene la entrega de eventos. El estado del formulario se conserva."""
        self.status = SessionStatus.STOPPED

    def run(self, source: SourceFactory) -> List[InterpretResult]:
        """
        Escucha una fuente de eventos hasta que se agote o se detenga.

        Un corte inesperado de la fuente (fin o error) provoca un reinicio
        tras restart_delay_s / error_restart_delay_s, hasta max_restarts.

        Args:
            source: Fábrica que retorna un iterable de eventos

        Returns:
            Resultados de los eventos procesados
        """
        results = []
        self.status = SessionStatus.LISTENING
        self.restarts = 0

        while self.status == SessionStatus.LISTENING:
            delay = self.settings.restart_delay_s
            try:
                for item in source():
                    if self.status != SessionStatus.LISTENING:
                        break
                    result = self.handle(item)
                    if result is not None:
                        results.append(result)
            except (OSError, RuntimeError) as exc:
                logger.warning(f"Error del reconocedor: {exc}")
                delay = self.settings.error_restart_delay_s

            if self.status != SessionStatus.LISTENING:
                break
            if self.restarts >= self.settings.max_restarts:
                logger.info("Reconocedor agotado, fin de la sesión")
                break

            self.restarts += 1
            logger.warning(f"Reconocedor cortado, reinicio {self.restarts} en {delay:.1f}s")
            self.sleep(delay)

        self.status = SessionStatus.STOPPED
        return results
