"""
Definición de campos del formulario.

Cada campo tiene un tipo cerrado (FieldType) y un payload específico
según el tipo: opciones para los enumerados, rango numérico para los
sliders. La coherencia tipo/payload se verifica al construir el campo.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from vozform.core.errors import SchemaError


class FieldType(Enum):
    """Tipos de campo disponibles."""
    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    SELECT = "select"
    TOGGLE = "toggle"
    RADIO_ENUM = "radio"
    TEXT_AREA = "textarea"
    TAGS = "tags"
    RANGE_ENUM = "range"
    SLIDER = "slider"


# Tipos que se llenan con texto libre
TEXT_TYPES = frozenset({
    FieldType.TEXT,
    FieldType.EMAIL,
    FieldType.PHONE,
    FieldType.TEXT_AREA,
})

# Tipos con lista cerrada de opciones
CHOICE_TYPES = frozenset({
    FieldType.SELECT,
    FieldType.RADIO_ENUM,
    FieldType.RANGE_ENUM,
})


@dataclass(frozen=True)
class FieldOption:
    """Una opción de un campo enumerado."""
    value: str
    label: str = ""

    @property
    def display(self) -> str:
        return self.label or self.value.capitalize()


@dataclass(frozen=True)
class NumericRange:
    """Rango de un campo SLIDER."""
    min_value: float
    max_value: float
    step: float = 1
    default: Optional[float] = None

    def __post_init__(self):
        if self.min_value >= self.max_value:
            raise SchemaError(
                f"Rango inválido: min={self.min_value} debe ser menor que max={self.max_value}"
            )
        if self.step <= 0:
            raise SchemaError(f"Paso inválido: {self.step}")
        if self.default is not None and not (self.min_value <= self.default <= self.max_value):
            raise SchemaError(f"Default {self.default} fuera del rango")

    @property
    def initial(self) -> float:
        """Valor inicial del slider."""
        return self.default if self.default is not None else self.min_value


@dataclass(frozen=True)
class FieldSpec:
    """Definición inmutable de un campo del formulario."""
    id: str
    label: str
    section: str
    field_type: FieldType = FieldType.TEXT
    options: tuple[FieldOption, ...] = ()
    value_range: Optional[NumericRange] = None
    default: Any = None
    hint: str = ""  # Indicación hablada para el usuario
    # Validador informativo: no se aplica al asignar valores
    validator: Optional[Callable[[Any], bool]] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.id:
            raise SchemaError("El campo necesita un id")
        if not self.label:
            raise SchemaError(f"El campo '{self.id}' necesita un label")

        if self.field_type in CHOICE_TYPES:
            if not self.options:
                raise SchemaError(f"El campo '{self.id}' ({self.field_type.value}) requiere opciones")
            if self.value_range is not None:
                raise SchemaError(f"El campo '{self.id}' no admite rango numérico")
            if self.default is not None and self.default not in self.option_values:
                raise SchemaError(f"Default '{self.default}' no es una opción de '{self.id}'")
        elif self.field_type == FieldType.SLIDER:
            if self.value_range is None:
                raise SchemaError(f"El campo '{self.id}' (slider) requiere un rango")
            if self.options:
                raise SchemaError(f"El campo '{self.id}' no admite opciones")
        else:
            if self.options or self.value_range is not None:
                raise SchemaError(
                    f"El campo '{self.id}' ({self.field_type.value}) no admite opciones ni rango"
                )

    @property
    def option_values(self) -> list[str]:
        return [opt.value for opt in self.options]

    def option_label(self, value: Any) -> Optional[str]:
        """Retorna el label de una opción, o None si no existe."""
        for opt in self.options:
            if opt.value == value:
                return opt.display
        return None

    def default_value(self) -> Any:
        """Valor por defecto según el tipo del campo."""
        if self.field_type == FieldType.TAGS:
            return list(self.default) if self.default else []
        if self.field_type == FieldType.TOGGLE:
            return bool(self.default) if self.default is not None else False
        if self.field_type in CHOICE_TYPES:
            return self.default if self.default is not None else self.options[0].value
        if self.field_type == FieldType.SLIDER:
            return self.value_range.initial
        return self.default if self.default is not None else ""

    def empty_value(self) -> Any:
        """Valor de un campo vaciado por voz ("clear field")."""
        if self.field_type == FieldType.TAGS:
            return []
        return ""

    def is_valid(self, value: Any) -> bool:
        """Evalúa el validador informativo. Sin validador, todo valor es válido."""
        if self.validator is None:
            return True
        try:
            return bool(self.validator(value))
        except (TypeError, ValueError, AttributeError):
            return False


def choices(*values: str) -> tuple[FieldOption, ...]:
    """Construye opciones a partir de valores simples."""
    return tuple(FieldOption(value=v) for v in values)
