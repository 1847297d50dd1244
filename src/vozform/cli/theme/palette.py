"""
Definicion de paletas de colores y gestion de temas.

Los temas se cambian por voz ("dark mode", "light mode", "toggle theme").
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from vozform.core.theme import ThemeMode


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, destacados
    secondary: str    # Subtítulos, secciones
    accent: str       # Campo activo

    # Colores semánticos
    success: str
    warning: str
    error: str
    info: str
    muted: str        # Texto secundario/atenuado
    prompt: str       # Pedido de respuesta (ej: "add skill")

    # Colores para datos
    value: str        # Valores dictados
    label: str        # Etiquetas de campos

    # Bordes
    border: str
    progress: str     # Barra de progreso


# Tema claro - pensado para terminales con fondo blanco
THEME_LIGHT = ColorPalette(
    primary="#005f87",      # Azul oscuro
    secondary="#5f5f87",    # Gris azulado
    accent="#875f00",       # Ocre
    success="#005f00",      # Verde oscuro
    warning="#875f00",      # Ocre
    error="#af0000",        # Rojo
    info="#005f87",         # Azul
    muted="#808080",        # Gris
    prompt="#5f00af",       # Violeta
    value="#000000",        # Negro
    label="#444444",        # Gris oscuro
    border="#bcbcbc",       # Gris claro
    progress="#4caf50",     # Verde
)

# Tema oscuro - colores pastel sobre fondo negro
THEME_DARK = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#d7af5f",       # Amarillo suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#64c8ff",         # Celeste
    muted="#808080",        # Gris
    prompt="#af87af",       # Púrpura suave
    value="#ffffff",        # Blanco
    label="#afafaf",        # Gris claro
    border="#5f5f5f",       # Gris oscuro
    progress="#4caf50",     # Verde
)

# Mapeo de modos a paletas
THEMES = {
    ThemeMode.LIGHT: THEME_LIGHT,
    ThemeMode.DARK: THEME_DARK,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _instance: Optional["CLITheme"] = None
    _mode: ThemeMode = ThemeMode.LIGHT
    _palette: ColorPalette = THEME_LIGHT
    _console: Optional[Console] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_theme(cls, mode: ThemeMode) -> None:
        """Establece el tema activo."""
        cls._mode = ThemeMode(mode)
        cls._palette = THEMES.get(cls._mode, THEME_LIGHT)
        cls._console = None  # Resetear console para recrear con nuevo tema

    @classmethod
    def get_mode(cls) -> ThemeMode:
        return cls._mode

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "prompt": f"bold {p.prompt}",
                "value": f"bold {p.value}",
                "label": p.label,
                "title": f"bold {p.primary}",
                "header": f"bold {p.primary}",
                "selected": f"bold {p.accent}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


# Funciones de acceso global
def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()


def apply_theme(mode: ThemeMode) -> None:
    """Oyente para ThemeSwitch: aplica el tema elegido por voz."""
    CLITheme.set_theme(mode)
