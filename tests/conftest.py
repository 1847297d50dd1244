"""Configuración de pytest para tests de vozform."""

import pytest

from vozform.commands.interpreter import CommandInterpreter
from vozform.config import InterpreterSettings
from vozform.core.fields import FieldSpec, FieldType
from vozform.core.schema import FormSchema, default_schema
from vozform.core.state import FormStore


class FakeClock:
    """Reloj controlable para el modo de espera de habilidades."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def schema():
    """Esquema por defecto (15 campos, 4 secciones)."""
    return default_schema()


@pytest.fixture
def store(schema):
    return FormStore(schema)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def interp(schema, clock):
    """Intérprete con reloj falso y timeout de 10 s."""
    return CommandInterpreter(
        schema=schema,
        settings=InterpreterSettings(skill_prompt_timeout_s=10),
        clock=clock,
    )


def _text_schema(n: int) -> FormSchema:
    """Esquema de n campos de texto en una sección."""
    return FormSchema([
        FieldSpec(id=f"f{i}", label=f"Field {i}", section="main", field_type=FieldType.TEXT)
        for i in range(n)
    ])


@pytest.fixture
def text_schema():
    """Fábrica de esquemas de texto de n campos."""
    return _text_schema
