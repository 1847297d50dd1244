"""
Validación y formateo de valores de campos.

La validación es solo informativa: se usa para mostrar avisos en la
interfaz y en el envío, nunca para rechazar un valor dictado.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from vozform.core.fields import FieldSpec, FieldType, CHOICE_TYPES


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def valid_full_name(value: Any) -> bool:
    """Nombre con al menos 2 caracteres."""
    return len(str(value)) >= 2


def valid_email(value: Any) -> bool:
    return bool(EMAIL_PATTERN.match(str(value)))


def valid_phone(value: Any) -> bool:
    """Teléfono con al menos 10 dígitos (se ignoran espacios y símbolos)."""
    digits = re.sub(r"\D", "", str(value))
    return len(digits) >= 10


@dataclass(frozen=True)
class ValidationIssue:
    """Un campo cuyo valor no pasa su validador."""
    field_id: str
    label: str
    value: Any

    @property
    def message(self) -> str:
        return f"{self.label} looks invalid: {self.value!r}"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, set)):
        return len(value) == 0
    return str(value).strip() == ""


def validate_values(
    fields: Iterable[FieldSpec],
    values: Mapping[str, Any],
) -> list[ValidationIssue]:
    """
    Evalúa los validadores de cada campo con valor.

    Los campos vacíos no se reportan: el formulario no tiene campos
    obligatorios.

    Args:
        fields: Campos del esquema
        values: Diccionario plano field_id -> valor

    Returns:
        Lista de ValidationIssue (vacía si todo es válido)
    """
    issues = []
    for spec in fields:
        value = values.get(spec.id)
        if _is_blank(value):
            continue
        if not spec.is_valid(value):
            issues.append(ValidationIssue(field_id=spec.id, label=spec.label, value=value))
    return issues


def format_field_value(spec: FieldSpec, value: Any) -> str:
    """Formatea el valor de un campo para mostrar."""
    if spec.field_type == FieldType.TOGGLE:
        return "on" if value else "off"

    if _is_blank(value):
        return "-"

    if spec.field_type == FieldType.TAGS:
        return ", ".join(str(v) for v in value)

    if spec.field_type in CHOICE_TYPES:
        label = spec.option_label(value)
        return label if label is not None else str(value)

    if spec.field_type == FieldType.SLIDER:
        try:
            return f"{float(value):,.0f}"
        except (TypeError, ValueError):
            # Valor dictado como texto libre
            return str(value)

    return str(value)
