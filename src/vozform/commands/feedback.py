"""
Mensajes de feedback del intérprete.

Cada transcripción procesada produce exactamente un Feedback.
"""

from dataclasses import dataclass
from enum import Enum


class FeedbackKind(Enum):
    """Clasificación del resultado de una transcripción."""
    SUCCESS = "success"
    PROMPT = "prompt"  # Se espera una respuesta (ej: nombre de la habilidad)
    NAVIGATION_NOT_FOUND = "navigation_not_found"
    NO_ACTIVE_FIELD = "no_active_field"
    COMMAND_UNRECOGNIZED = "command_unrecognized"
    DUPLICATE_SKILL = "duplicate_skill"
    SKILL_NOT_FOUND = "skill_not_found"
    FAILURE = "failure"


@dataclass(frozen=True)
class Feedback:
    message: str
    kind: FeedbackKind = FeedbackKind.SUCCESS

    @property
    def ok(self) -> bool:
        return self.kind in (FeedbackKind.SUCCESS, FeedbackKind.PROMPT)

    def __str__(self) -> str:
        return self.message


def success(message: str) -> Feedback:
    return Feedback(message, FeedbackKind.SUCCESS)


def prompt(message: str) -> Feedback:
    return Feedback(message, FeedbackKind.PROMPT)


NO_ACTIVE_FIELD = Feedback(
    'No active field. Say "first field" or "go to [field name]" to start.',
    FeedbackKind.NO_ACTIVE_FIELD,
)

NO_FIELD_SELECTED = Feedback(
    'No field selected. Say "first field" or "go to full name" to start.',
    FeedbackKind.NO_ACTIVE_FIELD,
)
