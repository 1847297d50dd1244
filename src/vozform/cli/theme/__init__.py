"""
Sistema de temas para la interfaz CLI de vozform.

- palette: Paletas claro/oscuro y gestion del tema (CLITheme)
- icons: Iconos Unicode con fallback ASCII
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
"""

from vozform.cli.theme.palette import (
    ColorPalette,
    THEME_LIGHT,
    THEME_DARK,
    THEMES,
    CLITheme,
    apply_theme,
    get_console,
    get_palette,
)
from vozform.cli.theme.icons import IconSet, get_icons, reset_icons_cache
from vozform.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_feedback,
)
from vozform.cli.theme.printing import (
    print_header,
    print_field,
    print_success,
    print_warning,
    print_info,
    print_feedback,
    print_section,
)

__all__ = [
    "ColorPalette",
    "THEME_LIGHT",
    "THEME_DARK",
    "THEMES",
    "CLITheme",
    "apply_theme",
    "get_console",
    "get_palette",
    "IconSet",
    "get_icons",
    "reset_icons_cache",
    "styled_header",
    "styled_label",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_feedback",
    "print_header",
    "print_field",
    "print_success",
    "print_warning",
    "print_info",
    "print_feedback",
    "print_section",
]
