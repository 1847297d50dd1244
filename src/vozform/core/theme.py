"""
Selector de tema claro/oscuro controlado por voz.

El núcleo solo guarda el nombre del tema; la CLI aplica la paleta
correspondiente a través de los oyentes registrados.
"""

from enum import Enum
from typing import Callable, List


class ThemeMode(str, Enum):
    """Temas disponibles por voz."""
    LIGHT = "light"
    DARK = "dark"


class ThemeSwitch:
    """Tema actual con notificación de cambios."""

    def __init__(self, mode: ThemeMode = ThemeMode.LIGHT):
        self._mode = ThemeMode(mode)
        self._listeners: List[Callable[[ThemeMode], None]] = []

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    def subscribe(self, listener: Callable[[ThemeMode], None]) -> None:
        self._listeners.append(listener)

    def set(self, mode: ThemeMode) -> ThemeMode:
        self._mode = ThemeMode(mode)
        for listener in self._listeners:
            listener(self._mode)
        return self._mode

    def toggle(self) -> ThemeMode:
        if self._mode == ThemeMode.DARK:
            return self.set(ThemeMode.LIGHT)
        return self.set(ThemeMode.DARK)
