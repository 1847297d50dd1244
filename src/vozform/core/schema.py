"""
Registro del esquema del formulario.

El orden de los campos define el ciclo de navegación y no cambia en
tiempo de ejecución.
"""

from typing import Iterator, Optional, Sequence

from vozform.core.errors import FieldNotFoundError, SchemaError
from vozform.core.fields import (
    FieldOption,
    FieldSpec,
    FieldType,
    NumericRange,
    choices,
)
from vozform.core.validators import valid_email, valid_full_name, valid_phone


class FormSchema:
    """Catálogo ordenado y de solo lectura de campos."""

    def __init__(self, fields: Sequence[FieldSpec]):
        if not fields:
            raise SchemaError("El esquema necesita al menos un campo")

        seen = set()
        for spec in fields:
            if spec.id in seen:
                raise SchemaError(f"Id de campo duplicado: {spec.id}")
            seen.add(spec.id)

        self._fields: tuple[FieldSpec, ...] = tuple(fields)
        self._index = {spec.id: idx for idx, spec in enumerate(self._fields)}

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._index

    def __getitem__(self, idx: int) -> FieldSpec:
        return self._fields[idx]

    def fields(self) -> tuple[FieldSpec, ...]:
        """Campos en orden de navegación."""
        return self._fields

    def sections(self) -> list[str]:
        """Secciones en orden de primera aparición."""
        result = []
        for spec in self._fields:
            if spec.section not in result:
                result.append(spec.section)
        return result

    def fields_in(self, section: str) -> list[FieldSpec]:
        return [spec for spec in self._fields if spec.section == section]

    def by_id(self, field_id: str) -> FieldSpec:
        """Obtiene un campo por id. Lanza FieldNotFoundError si no existe."""
        idx = self._index.get(field_id)
        if idx is None:
            raise FieldNotFoundError(field_id)
        return self._fields[idx]

    def get(self, field_id: Optional[str]) -> Optional[FieldSpec]:
        """Como by_id pero retorna None si no existe."""
        idx = self._index.get(field_id) if field_id is not None else None
        return self._fields[idx] if idx is not None else None

    def index_of(self, field_id: str) -> int:
        idx = self._index.get(field_id)
        if idx is None:
            raise FieldNotFoundError(field_id)
        return idx

    def find_by_label_or_id(self, query: str) -> Optional[FieldSpec]:
        """
        Busca un campo por label o id.

        Coincide si la consulta está contenida en el label/id del campo, o
        si el label/id está contenido en la consulta. Gana el primero en
        orden del esquema, sin puntaje.

        Args:
            query: Texto dictado (ej: "email", "my zip code")

        Returns:
            FieldSpec o None si ningún campo coincide
        """
        q = query.lower()
        for spec in self._fields:
            label = spec.label.lower()
            field_id = spec.id.lower()
            if q in label or q in field_id or label in q or field_id in q:
                return spec
        return None


# ============================================================================
# Esquema por defecto
# ============================================================================

DEFAULT_FIELDS = [
    # Datos personales
    FieldSpec(
        id="fullName",
        label="Full Name",
        section="personalInfo",
        field_type=FieldType.TEXT,
        hint='Please say your full name, then say "done"',
        validator=valid_full_name,
    ),
    FieldSpec(
        id="email",
        label="Email Address",
        section="personalInfo",
        field_type=FieldType.EMAIL,
        hint='Please say your email address, then say "done"',
        validator=valid_email,
    ),
    FieldSpec(
        id="phone",
        label="Phone Number",
        section="personalInfo",
        field_type=FieldType.PHONE,
        hint='Please say your phone number with country code, then say "done"',
        validator=valid_phone,
    ),
    FieldSpec(
        id="birthDate",
        label="Birth Date",
        section="personalInfo",
        field_type=FieldType.TEXT,
        hint='Please say your birth date in format month day year, then say "done"',
    ),
    # Preferencias
    FieldSpec(
        id="subscription",
        label="Subscription Plan",
        section="preferences",
        field_type=FieldType.SELECT,
        options=(
            FieldOption("basic", "Basic"),
            FieldOption("premium", "Premium"),
            FieldOption("enterprise", "Enterprise"),
        ),
        default="basic",
        hint="Say basic, premium, or enterprise",
    ),
    FieldSpec(
        id="notifications",
        label="Enable Notifications",
        section="preferences",
        field_type=FieldType.TOGGLE,
        default=True,
        hint='Say "enable notifications" or "disable notifications"',
    ),
    FieldSpec(
        id="language",
        label="Preferred Language",
        section="preferences",
        field_type=FieldType.RADIO_ENUM,
        options=choices("english", "spanish", "french", "german"),
        hint="Say English, Spanish, French, or German",
    ),
    # Detalles
    FieldSpec(
        id="bio",
        label="Personal Bio",
        section="details",
        field_type=FieldType.TEXT_AREA,
        hint='Please tell us about yourself, then say "done"',
    ),
    FieldSpec(
        id="skills",
        label="Skills",
        section="details",
        field_type=FieldType.TAGS,
        hint='Say a skill to add, say "remove skill" to remove one, say "done" when finished',
    ),
    FieldSpec(
        id="experience",
        label="Experience Level",
        section="details",
        field_type=FieldType.RANGE_ENUM,
        options=choices("beginner", "intermediate", "advanced", "expert"),
        hint="Say beginner, intermediate, advanced, or expert",
    ),
    FieldSpec(
        id="salary",
        label="Expected Salary",
        section="details",
        field_type=FieldType.SLIDER,
        value_range=NumericRange(min_value=30000, max_value=150000, step=5000, default=50000),
        hint="Say a number between 30,000 and 150,000",
    ),
    # Contacto
    FieldSpec(
        id="address",
        label="Street Address",
        section="contact",
        hint='Please say your street address, then say "done"',
    ),
    FieldSpec(
        id="city",
        label="City",
        section="contact",
        hint='Please say your city, then say "done"',
    ),
    FieldSpec(
        id="country",
        label="Country",
        section="contact",
        hint='Please say your country, then say "done"',
    ),
    FieldSpec(
        id="zipCode",
        label="ZIP Code",
        section="contact",
        hint='Please say your ZIP code, then say "done"',
    ),
]


def default_schema() -> FormSchema:
    """Esquema de registro con cuatro secciones."""
    return FormSchema(DEFAULT_FIELDS)
