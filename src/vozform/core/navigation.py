"""
Controlador de navegación entre campos.

Es el único que modifica el campo activo. next/previous dan la vuelta
en ambos sentidos.
"""

from typing import Optional

from vozform.core.fields import FieldSpec
from vozform.core.schema import FormSchema


class NavigationController:
    """Puntero al campo activo sobre un esquema no vacío."""

    def __init__(self, schema: FormSchema, active_field: Optional[str] = None):
        self.schema = schema
        self._active: Optional[str] = None
        if active_field is not None:
            self.go_to(active_field)

    @property
    def active_field(self) -> Optional[str]:
        return self._active

    def current(self) -> Optional[FieldSpec]:
        return self.schema.get(self._active)

    def _move_to(self, idx: int) -> FieldSpec:
        spec = self.schema[idx % len(self.schema)]
        self._active = spec.id
        return spec

    def next(self) -> FieldSpec:
        """Siguiente campo. Sin campo activo, va al primero."""
        if self._active is None:
            return self._move_to(0)
        return self._move_to(self.schema.index_of(self._active) + 1)

    def previous(self) -> FieldSpec:
        """Campo anterior. Sin campo activo, va al último."""
        if self._active is None:
            return self._move_to(-1)
        return self._move_to(self.schema.index_of(self._active) - 1)

    def first(self) -> FieldSpec:
        return self._move_to(0)

    def last(self) -> FieldSpec:
        return self._move_to(len(self.schema) - 1)

    def go_to(self, field_id: str) -> FieldSpec:
        """Activa un campo por id. Lanza FieldNotFoundError si no existe."""
        return self._move_to(self.schema.index_of(field_id))

    def clear(self) -> None:
        self._active = None
