"""
Editor de la lista de habilidades (campos TAGS).

Al agregar, los duplicados se comparan exactamente; al quitar, sin
distinguir mayúsculas.
"""

from dataclasses import dataclass
from enum import Enum

from vozform.core.fields import FieldType
from vozform.core.state import FormStore


class SkillOutcome(Enum):
    """Resultado de una edición de la lista."""
    ADDED = "added"
    DUPLICATE = "duplicate"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    EMPTY = "empty"


@dataclass(frozen=True)
class SkillEditResult:
    outcome: SkillOutcome
    skill: str

    @property
    def changed(self) -> bool:
        return self.outcome in (SkillOutcome.ADDED, SkillOutcome.REMOVED)

    @property
    def message(self) -> str:
        if self.outcome == SkillOutcome.ADDED:
            return f"Added skill: {self.skill}"
        if self.outcome == SkillOutcome.DUPLICATE:
            return f'Skill "{self.skill}" already exists'
        if self.outcome == SkillOutcome.REMOVED:
            return f"Removed skill: {self.skill}"
        if self.outcome == SkillOutcome.NOT_FOUND:
            return f'Skill "{self.skill}" not found'
        return "No skill heard"


class SkillListEditor:
    """Agrega y quita elementos de un campo TAGS del formulario."""

    def __init__(self, store: FormStore, field_id: str = "skills"):
        spec = store.schema.by_id(field_id)
        if spec.field_type != FieldType.TAGS:
            raise TypeError(f"El campo '{field_id}' no es de tipo tags")
        self.store = store
        self.field_id = field_id

    @property
    def skills(self) -> list[str]:
        return self.store.tags(self.field_id)

    def add(self, skill: str) -> SkillEditResult:
        skill = skill.strip()
        if not skill:
            return SkillEditResult(SkillOutcome.EMPTY, skill)

        current = self.skills
        if skill in current:
            return SkillEditResult(SkillOutcome.DUPLICATE, skill)

        self.store.assign(self.field_id, current + [skill])
        return SkillEditResult(SkillOutcome.ADDED, skill)

    def remove(self, skill: str) -> SkillEditResult:
        skill = skill.strip()
        if not skill:
            return SkillEditResult(SkillOutcome.EMPTY, skill)

        current = self.skills
        target = skill.lower()
        filtered = [s for s in current if s.lower() != target]
        if len(filtered) < len(current):
            self.store.assign(self.field_id, filtered)
            return SkillEditResult(SkillOutcome.REMOVED, skill)
        return SkillEditResult(SkillOutcome.NOT_FOUND, skill)
