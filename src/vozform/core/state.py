"""
Almacén del estado del formulario.

Guarda los valores anidados sección -> campo -> valor. Cada campo del
esquema tiene exactamente una entrada. No valida los valores.
"""

import copy
from typing import Any

from vozform.core.errors import FieldNotFoundError
from vozform.core.fields import FieldType
from vozform.core.schema import FormSchema


class FormStore:
    """Valores del formulario inicializados desde los defaults del esquema."""

    def __init__(self, schema: FormSchema):
        self.schema = schema
        self._data: dict[str, dict[str, Any]] = {}
        self.reset()

    def reset(self) -> None:
        """Restaura los defaults de todos los campos."""
        data: dict[str, dict[str, Any]] = {}
        for spec in self.schema:
            data.setdefault(spec.section, {})[spec.id] = spec.default_value()
        self._data = data

    def _check(self, section: str, field_id: str) -> None:
        if section not in self._data or field_id not in self._data[section]:
            raise FieldNotFoundError(f"{section}.{field_id}")

    def get(self, section: str, field_id: str) -> Any:
        self._check(section, field_id)
        return self._data[section][field_id]

    def set(self, section: str, field_id: str, value: Any) -> None:
        """Reemplaza el valor de un campo (sin mezclar ni validar)."""
        self._check(section, field_id)
        self._data[section][field_id] = value

    def value_of(self, field_id: str) -> Any:
        spec = self.schema.by_id(field_id)
        return self._data[spec.section][spec.id]

    def assign(self, field_id: str, value: Any) -> None:
        """Asigna un valor resolviendo la sección desde el esquema."""
        spec = self.schema.by_id(field_id)
        self.set(spec.section, spec.id, value)

    def clear_field(self, field_id: str) -> None:
        spec = self.schema.by_id(field_id)
        self.set(spec.section, spec.id, spec.empty_value())

    def is_filled(self, field_id: str) -> bool:
        value = self.value_of(field_id)
        if isinstance(value, bool):
            return value
        if isinstance(value, (list, tuple)):
            return len(value) > 0
        return value is not None and str(value) != ""

    def progress(self) -> float:
        """Fracción de campos con valor (0 a 1)."""
        filled = sum(1 for spec in self.schema if self.is_filled(spec.id))
        return filled / len(self.schema)

    def values(self) -> dict[str, Any]:
        """Diccionario plano field_id -> valor (copia)."""
        return {
            spec.id: copy.deepcopy(self._data[spec.section][spec.id])
            for spec in self.schema
        }

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Copia profunda del estado anidado completo."""
        return copy.deepcopy(self._data)

    def tags(self, field_id: str) -> list[str]:
        """Lista de un campo TAGS (copia)."""
        spec = self.schema.by_id(field_id)
        if spec.field_type != FieldType.TAGS:
            raise TypeError(f"El campo '{field_id}' no es de tipo tags")
        return list(self.value_of(field_id))
