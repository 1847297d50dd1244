"""
Intérprete de comandos de voz.

Clasifica cada transcripción con una cascada fija de reglas; la primera
que coincide gana y no se prueba ninguna otra:

    1. RELOCATE        "go to <campo>"
    2. SYNONYM         tabla de sinónimos de campos
    3. KEYWORD         "first field"/"start", "next field", "previous field" (exactos)
    4. TERMINATOR      "done" (y "do one"/"do on") exactos
    5. GLOBAL_COMMAND  palabra clave global contenida en el texto
    6. COMBINED_VALUE  "<valor> done"
    7. FREE_TEXT       valor para el campo activo
    8. EMPTY           texto sin campo activo
    9. RESIDUAL        segunda pasada sobre toda la tabla de comandos
   10. FALLBACK        comando no reconocido

Antes de la cascada se atiende el modo de espera de habilidad armado por
"add skill"/"remove skill": la siguiente transcripción se consume como
texto de la habilidad.
"""

import logging
import re
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional

from vozform.commands.feedback import (
    Feedback,
    FeedbackKind,
    NO_ACTIVE_FIELD,
    NO_FIELD_SELECTED,
    prompt,
    success,
)
from vozform.commands.registry import (
    FIELD_SYNONYMS,
    TERMINATOR_PHRASES,
    CommandKind,
    CommandRegistry,
    default_registry,
)
from vozform.config import InterpreterSettings
from vozform.core.fields import FieldSpec, FieldType
from vozform.core.navigation import NavigationController
from vozform.core.schema import FormSchema, default_schema
from vozform.core.skills import SkillEditResult, SkillListEditor, SkillOutcome
from vozform.core.state import FormStore
from vozform.core.theme import ThemeSwitch
from vozform.core.validators import validate_values
from vozform.submissions import FormSubmission, SubmissionIssue

logger = logging.getLogger(__name__)


class InterpreterMode(Enum):
    """Modo del intérprete."""
    NORMAL = "normal"
    AWAITING_SKILL_ADD = "awaiting_skill_add"
    AWAITING_SKILL_REMOVE = "awaiting_skill_remove"


class RuleKind(Enum):
    """Regla que resolvió una transcripción."""
    SKILL_PROMPT = "skill_prompt"
    RELOCATE = "relocate"
    SYNONYM = "synonym"
    KEYWORD = "keyword"
    TERMINATOR = "terminator"
    GLOBAL_COMMAND = "global_command"
    COMBINED_VALUE = "combined_value"
    FREE_TEXT = "free_text"
    EMPTY = "empty"
    RESIDUAL = "residual"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Utterance:
    """Transcripción con su copia normalizada."""
    original: str
    normalized: str

    @classmethod
    def from_text(cls, text: str) -> "Utterance":
        original = (text or "").strip()
        return cls(original=original, normalized=original.lower())


@dataclass(frozen=True)
class Rule:
    """Regla de la cascada: predicado + handler."""
    kind: RuleKind
    predicate: Callable[[Utterance], bool]
    handler: Callable[[Utterance], Feedback]


@dataclass(frozen=True)
class InterpretResult:
    """Resultado de procesar una transcripción."""
    feedback: Feedback
    rule: RuleKind
    active_field: Optional[str]
    mode: InterpreterMode

    @property
    def message(self) -> str:
        return self.feedback.message

    @property
    def kind(self) -> FeedbackKind:
        return self.feedback.kind


_DONE_WORD = re.compile(r"\bdone\b", re.IGNORECASE)


def strip_done(text: str) -> str:
    """Quita todas las apariciones de "done" y normaliza espacios."""
    return " ".join(_DONE_WORD.sub(" ", text).split())


class CommandInterpreter:
    """
    Convierte transcripciones en cambios del formulario.

    Es el único que modifica el estado del formulario, el campo activo y
    el modo. Procesa una transcripción por vez de forma síncrona.
    """

    def __init__(
        self,
        schema: Optional[FormSchema] = None,
        registry: Optional[CommandRegistry] = None,
        settings: Optional[InterpreterSettings] = None,
        theme: Optional[ThemeSwitch] = None,
        clock: Callable[[], float] = time.monotonic,
        on_submit: Optional[Callable[[FormSubmission], Any]] = None,
    ):
        self.schema = schema if schema is not None else default_schema()
        self.registry = registry if registry is not None else default_registry()
        self.settings = settings if settings is not None else InterpreterSettings()
        self.theme = theme if theme is not None else ThemeSwitch()
        self.clock = clock
        self.on_submit = on_submit

        self.store = FormStore(self.schema)
        self.navigation = NavigationController(self.schema)
        self.skills = self._build_skill_editor()

        self.mode = InterpreterMode.NORMAL
        self._mode_armed_at: Optional[float] = None
        self.completed = False
        self.submission: Optional[FormSubmission] = None

        # Sinónimos cuyo campo existe en este esquema
        self.synonyms = [(phrase, fid) for phrase, fid in FIELD_SYNONYMS if fid in self.schema]
        self.rules = self._build_rules()

    def _build_skill_editor(self) -> Optional[SkillListEditor]:
        """Editor del primer campo TAGS del esquema (None si no hay)."""
        for spec in self.schema:
            if spec.field_type == FieldType.TAGS:
                return SkillListEditor(self.store, spec.id)
        return None

    def _build_rules(self) -> List[Rule]:
        return [
            Rule(RuleKind.RELOCATE, self._is_relocate, self._relocate),
            Rule(RuleKind.SYNONYM, self._is_synonym, self._synonym),
            Rule(RuleKind.KEYWORD, self._is_keyword, self._keyword),
            Rule(RuleKind.TERMINATOR, self._is_terminator, self._terminator),
            Rule(RuleKind.GLOBAL_COMMAND, self._is_global_command, self._global_command),
            Rule(RuleKind.COMBINED_VALUE, self._is_combined_value, self._combined_value),
            Rule(RuleKind.FREE_TEXT, self._is_free_text, self._free_text),
            Rule(RuleKind.EMPTY, self._is_empty, lambda u: NO_FIELD_SELECTED),
            Rule(RuleKind.RESIDUAL, self._is_residual, self._residual),
            Rule(RuleKind.FALLBACK, lambda u: True, self._fallback),
        ]

    # ------------------------------------------------------------------
    # Estado visible
    # ------------------------------------------------------------------

    @property
    def active_field(self) -> Optional[str]:
        return self.navigation.active_field

    @property
    def active_spec(self) -> Optional[FieldSpec]:
        return self.navigation.current()

    # ------------------------------------------------------------------
    # Entrada principal
    # ------------------------------------------------------------------

    def interpret(self, text: str) -> InterpretResult:
        """
        Procesa una transcripción final.

        Nunca lanza excepciones: cualquier error termina en un feedback
        de tipo FAILURE.

        Args:
            text: Texto reconocido (se conserva el uso de mayúsculas para valores)

        Returns:
            InterpretResult con el feedback y el campo activo resultante
        """
        utterance = Utterance.from_text(text)
        logger.debug(f"Transcript: {utterance.original!r} (active={self.active_field}, mode={self.mode.value})")

        try:
            if self._mode_pending():
                rule = RuleKind.SKILL_PROMPT
                feedback = self._consume_skill(utterance)
            else:
                rule, feedback = self._cascade(utterance)
        except Exception:
            logger.exception(f"Error procesando {utterance.original!r}")
            rule = RuleKind.FALLBACK
            feedback = Feedback(f'Could not process "{utterance.original}"', FeedbackKind.FAILURE)

        logger.debug(f"Rule {rule.value}: {feedback.kind.value} - {feedback.message}")
        return InterpretResult(
            feedback=feedback,
            rule=rule,
            active_field=self.active_field,
            mode=self.mode,
        )

    def classify(self, text: str) -> RuleKind:
        """Regla que resolvería el texto en el estado actual, sin ejecutarla."""
        utterance = Utterance.from_text(text)
        if self._mode_pending(expire=False):
            return RuleKind.SKILL_PROMPT
        for rule in self.rules:
            if rule.predicate(utterance):
                return rule.kind
        return RuleKind.FALLBACK

    def _cascade(self, utterance: Utterance) -> tuple[RuleKind, Feedback]:
        for rule in self.rules:
            if rule.predicate(utterance):
                return rule.kind, rule.handler(utterance)
        # La regla FALLBACK siempre coincide
        raise AssertionError("cascada sin regla final")

    # ------------------------------------------------------------------
    # Modo de espera de habilidad
    # ------------------------------------------------------------------

    def await_skill(self, adding: bool) -> Feedback:
        """Arma el modo que consume la próxima transcripción como habilidad."""
        if self.skills is None:
            return Feedback("This form has no skills field", FeedbackKind.FAILURE)

        self.mode = InterpreterMode.AWAITING_SKILL_ADD if adding else InterpreterMode.AWAITING_SKILL_REMOVE
        self._mode_armed_at = self.clock()
        if adding:
            return prompt("Please say the skill you want to add")
        return prompt("Please say which skill to remove")

    def _clear_mode(self) -> None:
        self.mode = InterpreterMode.NORMAL
        self._mode_armed_at = None

    def _mode_pending(self, expire: bool = True) -> bool:
        if self.mode == InterpreterMode.NORMAL:
            return False
        elapsed = self.clock() - (self._mode_armed_at or 0.0)
        if elapsed > self.settings.skill_prompt_timeout_s:
            if expire:
                logger.debug(f"Modo {self.mode.value} expirado tras {elapsed:.1f}s")
                self._clear_mode()
            return False
        return True

    def _consume_skill(self, utterance: Utterance) -> Feedback:
        adding = self.mode == InterpreterMode.AWAITING_SKILL_ADD
        self._clear_mode()
        if adding:
            result = self.skills.add(utterance.original)
        else:
            result = self.skills.remove(utterance.original)
        return self._skill_feedback(result)

    @staticmethod
    def _skill_feedback(result: SkillEditResult) -> Feedback:
        if result.outcome == SkillOutcome.DUPLICATE:
            return Feedback(result.message, FeedbackKind.DUPLICATE_SKILL)
        if result.outcome == SkillOutcome.NOT_FOUND:
            return Feedback(result.message, FeedbackKind.SKILL_NOT_FOUND)
        if result.outcome == SkillOutcome.EMPTY:
            return Feedback(result.message, FeedbackKind.FAILURE)
        return success(result.message)

    # ------------------------------------------------------------------
    # Reglas
    # ------------------------------------------------------------------

    def _navigated(self, spec: FieldSpec) -> Feedback:
        return success(f"Navigated to {spec.label}. You can now speak your {spec.label.lower()}.")

    def _is_relocate(self, u: Utterance) -> bool:
        return "go to" in u.normalized

    def _relocate(self, u: Utterance) -> Feedback:
        name = u.normalized.replace("go to", "", 1).strip()
        # Sin nombre coincide con el primer campo (contención de "")
        spec = self.schema.find_by_label_or_id(name)
        if spec is None:
            return Feedback(
                f'Field "{name}" not found. Try "full name", "email", etc.',
                FeedbackKind.NAVIGATION_NOT_FOUND,
            )
        self.navigation.go_to(spec.id)
        return self._navigated(spec)

    def _match_synonym(self, text: str) -> Optional[str]:
        for phrase, field_id in self.synonyms:
            if text == phrase or phrase in text:
                return field_id
        return None

    def _is_synonym(self, u: Utterance) -> bool:
        return self._match_synonym(u.normalized) is not None

    def _synonym(self, u: Utterance) -> Feedback:
        spec = self.navigation.go_to(self._match_synonym(u.normalized))
        return self._navigated(spec)

    def _is_keyword(self, u: Utterance) -> bool:
        return u.normalized in ("first field", "start", "next field", "previous field")

    def _keyword(self, u: Utterance) -> Feedback:
        if u.normalized == "next field":
            spec = self.navigation.next()
        elif u.normalized == "previous field":
            spec = self.navigation.previous()
        else:
            spec = self.navigation.first()
            return success(f"Started at {spec.label}. Speak your {spec.label.lower()}.")
        return success(f"Moved to {spec.label}")

    def _is_terminator(self, u: Utterance) -> bool:
        return u.normalized in TERMINATOR_PHRASES

    def _terminator(self, u: Utterance) -> Feedback:
        return self.complete_field()

    def _is_global_command(self, u: Utterance) -> bool:
        return self.registry.is_command(u.normalized, CommandKind.GLOBAL)

    def _global_command(self, u: Utterance) -> Feedback:
        entry = self.registry.match(u.normalized, CommandKind.GLOBAL)
        logger.debug(f"Comando global: {entry.keyword}")
        return entry.action(self)

    def _is_combined_value(self, u: Utterance) -> bool:
        return " done" in u.normalized

    def _combined_value(self, u: Utterance) -> Feedback:
        value = strip_done(u.original)
        spec = self.active_spec
        if spec is None:
            return NO_ACTIVE_FIELD
        if not value:
            return Feedback(f"No value heard for {spec.label}", FeedbackKind.FAILURE)

        result = self._write_value(spec, value)
        if result is not None and not result.changed:
            # Habilidad repetida: no se modifica ni se avanza
            return self._skill_feedback(result)

        nxt = self.navigation.next()
        return success(f'Updated {spec.label} with "{value}" and moving to {nxt.label}')

    def _is_free_text(self, u: Utterance) -> bool:
        return (
            self.active_field is not None
            and bool(u.original)
            and not self.registry.is_command(u.normalized, CommandKind.GLOBAL)
        )

    def _free_text(self, u: Utterance) -> Feedback:
        spec = self.active_spec
        if spec.field_type == FieldType.TAGS:
            editor = self.skills if self.skills.field_id == spec.id else SkillListEditor(self.store, spec.id)
            return self._skill_feedback(editor.add(u.original))

        self.store.assign(spec.id, u.original)
        return success(f'Updated {spec.label} with "{u.original}". Say "done" to continue.')

    def _is_empty(self, u: Utterance) -> bool:
        return self.active_field is None and bool(u.original)

    def _is_residual(self, u: Utterance) -> bool:
        return self.registry.is_command(u.normalized)

    def _residual(self, u: Utterance) -> Feedback:
        return self.registry.match(u.normalized).action(self)

    def _fallback(self, u: Utterance) -> Feedback:
        return Feedback(
            f'Command not recognized: "{u.original}". Say "first field" to start.',
            FeedbackKind.COMMAND_UNRECOGNIZED,
        )

    # ------------------------------------------------------------------
    # Efectos usados por la tabla de comandos
    # ------------------------------------------------------------------

    def _write_value(self, spec: FieldSpec, value: str) -> Optional[SkillEditResult]:
        """Escribe el valor dictado. En campos TAGS retorna el resultado de la edición."""
        if spec.field_type == FieldType.TAGS:
            return SkillListEditor(self.store, spec.id).add(value)
        self.store.assign(spec.id, value)
        return None

    def complete_field(self) -> Feedback:
        """Termina el campo activo y avanza al siguiente (con vuelta)."""
        spec = self.active_spec
        if spec is None:
            return NO_ACTIVE_FIELD
        nxt = self.navigation.next()
        return success(f"Moving to next field from {spec.label}: {nxt.label}")

    def clear_active_field(self) -> Feedback:
        spec = self.active_spec
        if spec is None:
            return NO_ACTIVE_FIELD
        self.store.clear_field(spec.id)
        return success(f"Cleared {spec.label}")

    def set_preference(self, field_id: str, value: Any) -> Feedback:
        spec = self.schema.get(field_id)
        if spec is None:
            return Feedback(f"This form has no {field_id} field", FeedbackKind.FAILURE)
        self.store.assign(field_id, value)
        if spec.field_type == FieldType.TOGGLE:
            shown = "on" if value else "off"
        else:
            shown = spec.option_label(value) or str(value)
        return success(f"{spec.label} set to {shown}")

    def submit(self) -> Feedback:
        """
        Congela el formulario en un envío y marca la sesión como completa.

        La validación es informativa: los avisos se registran en el envío
        pero no impiden enviarlo.
        """
        issues = [
            SubmissionIssue(field_id=i.field_id, label=i.label, message=i.message)
            for i in validate_values(self.schema, self.store.values())
        ]
        self.submission = FormSubmission(values=self.store.snapshot(), issues=issues)
        self.completed = True
        logger.info(f"Formulario enviado: {self.submission.id} ({len(issues)} avisos)")

        if self.on_submit is not None:
            self.on_submit(self.submission)

        if issues:
            fields = ", ".join(i.label for i in issues)
            return success(f"Form submitted successfully! Please double-check: {fields}")
        return success("Form submitted successfully!")

    def reset(self) -> Feedback:
        """Restaura los defaults, limpia campo activo, modo y envío."""
        self.store.reset()
        self.navigation.clear()
        self._clear_mode()
        self.completed = False
        self.submission = None
        logger.info("Formulario reiniciado")
        return success("Form reset successfully")
