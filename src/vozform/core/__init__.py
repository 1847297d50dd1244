"""
Núcleo de vozform: esquema, estado, navegación y edición de habilidades.
"""

from vozform.core.errors import (
    VozformError,
    SchemaError,
    FieldNotFoundError,
    SubmissionNotFoundError,
)
from vozform.core.fields import (
    FieldType,
    FieldOption,
    FieldSpec,
    NumericRange,
    choices,
)
from vozform.core.schema import FormSchema, DEFAULT_FIELDS, default_schema
from vozform.core.state import FormStore
from vozform.core.skills import SkillListEditor, SkillOutcome, SkillEditResult
from vozform.core.navigation import NavigationController
from vozform.core.theme import ThemeMode, ThemeSwitch
from vozform.core.validators import (
    ValidationIssue,
    validate_values,
    format_field_value,
)

__all__ = [
    # Errores
    "VozformError",
    "SchemaError",
    "FieldNotFoundError",
    "SubmissionNotFoundError",
    # Campos y esquema
    "FieldType",
    "FieldOption",
    "FieldSpec",
    "NumericRange",
    "choices",
    "FormSchema",
    "DEFAULT_FIELDS",
    "default_schema",
    # Estado
    "FormStore",
    "SkillListEditor",
    "SkillOutcome",
    "SkillEditResult",
    "NavigationController",
    "ThemeMode",
    "ThemeSwitch",
    # Validación
    "ValidationIssue",
    "validate_values",
    "format_field_value",
]
