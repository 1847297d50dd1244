"""
Módulo de gestión de formularios enviados.

Un envío congela el estado del formulario en un documento inmutable que
puede guardarse, listarse y exportarse.
"""

import json
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from vozform.core.errors import SubmissionNotFoundError


# ============================================================================
# Modelos de Datos
# ============================================================================

class SubmissionIssue(BaseModel):
    """Aviso de validación registrado al enviar."""
    model_config = ConfigDict(frozen=True)

    field_id: str
    label: str
    message: str


class FormSubmission(BaseModel):
    """Formulario enviado (instantánea congelada)."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4())[:8])
    submitted_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    values: dict[str, dict[str, Any]]
    issues: list[SubmissionIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def flat_values(self) -> dict[str, Any]:
        """Valores como field_id -> valor."""
        flat = {}
        for fields in self.values.values():
            flat.update(fields)
        return flat


# ============================================================================
# Gestor de Envíos
# ============================================================================

class SubmissionManager:
    """Guarda y carga formularios enviados como JSON."""

    def __init__(self, submissions_dir: Optional[Path] = None):
        """
        Inicializa el gestor.

        Args:
            submissions_dir: Directorio de envíos.
                             Default: ~/.vozform/submissions/
        """
        if submissions_dir is None:
            submissions_dir = Path.home() / ".vozform" / "submissions"

        self.submissions_dir = Path(submissions_dir)
        self.submissions_dir.mkdir(parents=True, exist_ok=True)

    def _submission_path(self, submission_id: str) -> Path:
        return self.submissions_dir / f"{submission_id}.json"

    def save(self, submission: FormSubmission) -> Path:
        """Guarda un envío a disco."""
        path = self._submission_path(submission.id)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(submission.model_dump(), f, indent=2, ensure_ascii=False)

        return path

    def load(self, submission_id: str) -> FormSubmission:
        """Carga un envío desde disco."""
        path = self._submission_path(submission_id)

        if not path.exists():
            raise SubmissionNotFoundError(f"Envío no encontrado: {submission_id}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return FormSubmission(**data)

    def get_submission(self, submission_id: str) -> Optional[FormSubmission]:
        """
        Obtiene un envío por ID (parcial o completo).

        Returns:
            FormSubmission o None si no existe
        """
        path = self._submission_path(submission_id)
        if path.exists():
            return self.load(submission_id)

        for p in sorted(self.submissions_dir.glob("*.json")):
            if p.stem.startswith(submission_id):
                return self.load(p.stem)

        return None

    def list_submissions(self) -> list[dict]:
        """Lista los envíos guardados, más recientes primero."""
        submissions = []
        for path in self.submissions_dir.glob("*.json"):
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            personal = data.get("values", {}).get("personalInfo", {})
            submissions.append({
                "id": data["id"],
                "submitted_at": data["submitted_at"],
                "name": personal.get("fullName", ""),
                "n_issues": len(data.get("issues", [])),
            })

        return sorted(submissions, key=lambda s: s["submitted_at"], reverse=True)

    def delete(self, submission_id: str) -> bool:
        """Elimina un envío. Retorna False si no existía."""
        path = self._submission_path(submission_id)
        if path.exists():
            path.unlink()
            return True
        return False
