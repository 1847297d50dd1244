"""Modelos Pydantic para la configuración de vozform."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from vozform.core.theme import ThemeMode


DEFAULT_CONFIG_PATH = Path.home() / ".vozform" / "config.json"


class InterpreterSettings(BaseModel):
    """Parámetros del intérprete de comandos."""
    skill_prompt_timeout_s: float = Field(
        default=10.0, gt=0,
        description="Segundos que espera la habilidad tras 'add skill'/'remove skill'",
    )


class SessionSettings(BaseModel):
    """Parámetros de la sesión de reconocimiento."""
    min_confidence: float = Field(default=0.0, ge=0, le=1, description="Confianza mínima aceptada")
    restart_delay_s: float = Field(default=0.3, ge=0, description="Espera antes de reiniciar tras un corte")
    error_restart_delay_s: float = Field(default=1.0, ge=0, description="Espera antes de reiniciar tras un error")
    max_restarts: int = Field(default=5, ge=0, description="Reinicios automáticos permitidos")


class StorageSettings(BaseModel):
    """Dónde se guardan los formularios enviados."""
    submissions_dir: Path = Field(default_factory=lambda: Path.home() / ".vozform" / "submissions")


class UISettings(BaseModel):
    """Preferencias de la interfaz."""
    theme: ThemeMode = ThemeMode.LIGHT


class VozformSettings(BaseModel):
    """Configuración completa."""
    interpreter: InterpreterSettings = Field(default_factory=InterpreterSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    ui: UISettings = Field(default_factory=UISettings)


def load_settings(path: Optional[Path] = None) -> VozformSettings:
    """
    Carga la configuración desde un archivo JSON.

    Args:
        path: Archivo de configuración. Default: ~/.vozform/config.json

    Returns:
        VozformSettings (defaults si el archivo no existe)

    Raises:
        pydantic.ValidationError: si el archivo tiene valores inválidos
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return VozformSettings()

    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return VozformSettings.model_validate(data)
