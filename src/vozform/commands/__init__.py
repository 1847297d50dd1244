"""
Interpretación de comandos de voz.
"""

from vozform.commands.feedback import Feedback, FeedbackKind
from vozform.commands.registry import (
    CommandEntry,
    CommandGroup,
    CommandKind,
    CommandRegistry,
    DEFAULT_COMMANDS,
    FIELD_SYNONYMS,
    TERMINATOR_PHRASES,
    default_registry,
)
from vozform.commands.interpreter import (
    CommandInterpreter,
    InterpretResult,
    InterpreterMode,
    Rule,
    RuleKind,
    Utterance,
    strip_done,
)

__all__ = [
    "Feedback",
    "FeedbackKind",
    "CommandEntry",
    "CommandGroup",
    "CommandKind",
    "CommandRegistry",
    "DEFAULT_COMMANDS",
    "FIELD_SYNONYMS",
    "TERMINATOR_PHRASES",
    "default_registry",
    "CommandInterpreter",
    "InterpretResult",
    "InterpreterMode",
    "Rule",
    "RuleKind",
    "Utterance",
    "strip_done",
]
