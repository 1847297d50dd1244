"""
Excepciones del núcleo.

Se usan solo para errores de programación o de almacenamiento. El
intérprete nunca las deja escapar: cada transcripción termina en un
mensaje de feedback.
"""


class VozformError(Exception):
    """Error base de vozform."""


class SchemaError(VozformError):
    """Esquema de formulario mal definido (vacío, ids duplicados, payload inválido)."""


class FieldNotFoundError(VozformError, KeyError):
    """Campo inexistente en el esquema."""

    def __init__(self, field_id: str):
        self.field_id = field_id
        super().__init__(f"Campo no encontrado: {field_id}")

    def __str__(self) -> str:
        return self.args[0]


class SubmissionNotFoundError(VozformError, FileNotFoundError):
    """Envío de formulario inexistente en disco."""
