"""
Registro de comandos globales y tabla de sinónimos de campos.

El orden de las tablas importa: se usa la primera coincidencia.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from vozform.commands.feedback import Feedback, prompt, success
from vozform.core.theme import ThemeMode

if TYPE_CHECKING:
    from vozform.commands.interpreter import CommandInterpreter


class CommandKind(Enum):
    """Tipo de comando."""
    GLOBAL = "global"
    TERMINATOR = "terminator"  # "done": se resuelve antes por el intérprete


class CommandGroup(Enum):
    """Agrupación para listados de ayuda."""
    NAVIGATION = "Navigation"
    FORM = "Form"
    THEME = "Theme"
    FIELD = "Field"
    PREFERENCES = "Preferences"


Action = Callable[["CommandInterpreter"], Feedback]


@dataclass(frozen=True)
class CommandEntry:
    """Palabra clave hablada y su efecto."""
    keyword: str
    action: Action
    kind: CommandKind = CommandKind.GLOBAL
    group: CommandGroup = CommandGroup.FIELD
    description: str = ""

    def matches(self, text: str) -> bool:
        """Coincidencia por contención (text ya normalizado)."""
        return self.keyword in text


class CommandRegistry:
    """Tabla ordenada de comandos."""

    def __init__(self, entries: Iterable[CommandEntry]):
        self._entries: tuple[CommandEntry, ...] = tuple(entries)
        keywords = [e.keyword for e in self._entries]
        if len(set(keywords)) != len(keywords):
            raise ValueError("Palabras clave de comando duplicadas")
        for kw in keywords:
            if kw != kw.lower().strip() or not kw:
                raise ValueError(f"Palabra clave no normalizada: {kw!r}")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def entries(self, kind: Optional[CommandKind] = None) -> list[CommandEntry]:
        return [e for e in self._entries if kind is None or e.kind == kind]

    def keywords(self, kind: Optional[CommandKind] = None) -> list[str]:
        return [e.keyword for e in self.entries(kind)]

    def get(self, keyword: str) -> Optional[CommandEntry]:
        for entry in self._entries:
            if entry.keyword == keyword:
                return entry
        return None

    def match(self, text: str, kind: Optional[CommandKind] = None) -> Optional[CommandEntry]:
        """Primer comando (en orden de tabla) cuya palabra clave está en text."""
        for entry in self.entries(kind):
            if entry.matches(text):
                return entry
        return None

    def is_command(self, text: str, kind: Optional[CommandKind] = None) -> bool:
        return self.match(text, kind) is not None


# ============================================================================
# Acciones
# ============================================================================

def _moved(interp: "CommandInterpreter", move: str) -> Feedback:
    spec = getattr(interp.navigation, move)()
    return success(f"Moved to {spec.label}")


def _theme(mode: ThemeMode) -> Action:
    def action(interp: "CommandInterpreter") -> Feedback:
        interp.theme.set(mode)
        return success(f"Switched to {mode.value} mode")
    return action


def _toggle_theme(interp: "CommandInterpreter") -> Feedback:
    mode = interp.theme.toggle()
    return success(f"Switched to {mode.value} mode")


def _preference(field_id: str, value) -> Action:
    def action(interp: "CommandInterpreter") -> Feedback:
        return interp.set_preference(field_id, value)
    return action


def _arm_skill_add(interp: "CommandInterpreter") -> Feedback:
    return interp.await_skill(adding=True)


def _arm_skill_remove(interp: "CommandInterpreter") -> Feedback:
    return interp.await_skill(adding=False)


def _entry(keyword: str, action: Action, group: CommandGroup, description: str,
           kind: CommandKind = CommandKind.GLOBAL) -> CommandEntry:
    return CommandEntry(
        keyword=keyword, action=action, kind=kind, group=group, description=description,
    )


NAV = CommandGroup.NAVIGATION
FORM = CommandGroup.FORM
THEME = CommandGroup.THEME
FIELD = CommandGroup.FIELD
PREFS = CommandGroup.PREFERENCES


DEFAULT_COMMANDS = [
    _entry("next field", lambda i: _moved(i, "next"), NAV, "Move to the next field"),
    _entry("previous field", lambda i: _moved(i, "previous"), NAV, "Move to the previous field"),
    _entry("first field", lambda i: _moved(i, "first"), NAV, "Move to the first field"),
    _entry("last field", lambda i: _moved(i, "last"), NAV, "Move to the last field"),

    _entry("submit form", lambda i: i.submit(), FORM, "Submit the form"),
    _entry("reset form", lambda i: i.reset(), FORM, "Restore every field to its default"),
    _entry("complete form", lambda i: i.submit(), FORM, "Submit the form"),

    _entry("dark mode", _theme(ThemeMode.DARK), THEME, "Switch to the dark theme"),
    _entry("light mode", _theme(ThemeMode.LIGHT), THEME, "Switch to the light theme"),
    _entry("toggle theme", _toggle_theme, THEME, "Swap light and dark themes"),

    _entry("done", lambda i: i.complete_field(), FIELD, "Finish the active field",
           kind=CommandKind.TERMINATOR),
    _entry("clear field", lambda i: i.clear_active_field(), FIELD, "Empty the active field"),
    _entry("go to", lambda i: prompt("Say which field you want to go to"), NAV,
           "Jump to a field by name"),
    _entry("add skill", _arm_skill_add, FIELD, "Add the next thing you say as a skill"),
    _entry("remove skill", _arm_skill_remove, FIELD, "Remove the next skill you say"),

    _entry("enable notifications", _preference("notifications", True), PREFS, "Turn notifications on"),
    _entry("disable notifications", _preference("notifications", False), PREFS, "Turn notifications off"),
    _entry("basic plan", _preference("subscription", "basic"), PREFS, "Choose the basic plan"),
    _entry("premium plan", _preference("subscription", "premium"), PREFS, "Choose the premium plan"),
    _entry("enterprise plan", _preference("subscription", "enterprise"), PREFS, "Choose the enterprise plan"),

    _entry("english", _preference("language", "english"), PREFS, "Set language to English"),
    _entry("spanish", _preference("language", "spanish"), PREFS, "Set language to Spanish"),
    _entry("french", _preference("language", "french"), PREFS, "Set language to French"),
    _entry("german", _preference("language", "german"), PREFS, "Set language to German"),

    _entry("beginner", _preference("experience", "beginner"), PREFS, "Set experience to beginner"),
    _entry("intermediate", _preference("experience", "intermediate"), PREFS, "Set experience to intermediate"),
    _entry("advanced", _preference("experience", "advanced"), PREFS, "Set experience to advanced"),
    _entry("expert", _preference("experience", "expert"), PREFS, "Set experience to expert"),
]


def default_registry() -> CommandRegistry:
    return CommandRegistry(DEFAULT_COMMANDS)


# ============================================================================
# Sinónimos de campos
# ============================================================================

# Frase hablada -> id de campo, en orden de prioridad
FIELD_SYNONYMS: list[tuple[str, str]] = [
    ("full name", "fullName"),
    ("name", "fullName"),
    ("email", "email"),
    ("phone", "phone"),
    ("birth date", "birthDate"),
    ("birthday", "birthDate"),
    ("date of birth", "birthDate"),
    ("subscription", "subscription"),
    ("notifications", "notifications"),
    ("language", "language"),
    ("bio", "bio"),
    ("skills", "skills"),
    ("experience", "experience"),
    ("salary", "salary"),
    ("address", "address"),
    ("city", "city"),
    ("country", "country"),
    ("zip code", "zipCode"),
    ("zip", "zipCode"),
]

# Terminadores exactos ("do one"/"do on" son errores típicos del reconocedor)
TERMINATOR_PHRASES = ("done", "do one", "do on")
