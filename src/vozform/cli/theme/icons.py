"""
Sistema de iconos para la CLI.

Proporciona iconos Unicode con fallback automático a ASCII
si el terminal no soporta Unicode.
"""

import sys
from dataclasses import dataclass
from typing import Optional


def _detect_unicode_support() -> bool:
    """Detecta si el terminal soporta caracteres Unicode."""
    try:
        encoding = getattr(sys.stdout, 'encoding', None) or 'ascii'
        test_chars = "❯✓✗⚠ℹ●•"
        test_chars.encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


@dataclass
class IconSet:
    """Conjunto de iconos para la interfaz."""
    pointer: str          # Campo activo
    success: str
    error: str
    warning: str
    info: str
    prompt: str           # Se espera respuesta hablada
    check: str            # Campo con valor
    empty: str            # Campo vacío
    bullet: str
    bar_full: str         # Barra de progreso
    bar_empty: str


ICONS_UNICODE = IconSet(
    pointer="❯",
    success="✓",
    error="✗",
    warning="⚠",
    info="ℹ",
    prompt="●",
    check="✓",
    empty="○",
    bullet="•",
    bar_full="█",
    bar_empty="░",
)

ICONS_ASCII = IconSet(
    pointer=">",
    success="[+]",
    error="[x]",
    warning="[!]",
    info="[i]",
    prompt="[?]",
    check="[+]",
    empty="[ ]",
    bullet="*",
    bar_full="#",
    bar_empty=".",
)


# Cache del IconSet activo
_active_icons: Optional[IconSet] = None


def get_icons() -> IconSet:
    """Obtiene el conjunto de iconos apropiado para el terminal."""
    global _active_icons

    if _active_icons is None:
        _active_icons = ICONS_UNICODE if _detect_unicode_support() else ICONS_ASCII

    return _active_icons


def reset_icons_cache() -> None:
    """Resetea el cache de iconos (útil para tests)."""
    global _active_icons
    _active_icons = None
