"""
VozForm - Llenado de formularios por comandos de voz.

Interpreta transcripciones de voz ya reconocidas y las traduce en
navegación entre campos, comandos globales o valores del formulario.
"""

__version__ = "0.3.0"
