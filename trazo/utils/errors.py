# File: trazo/utils/errors.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Errores tipados del motor de paths.
# Notes: Todos los errores se levantan donde se detecta el input inválido.
from __future__ import annotations


class TrazoError(Exception):
    """Error base del proyecto."""


class TrazoValidationError(TrazoError):
    """Error de validación (input/estructura)."""


class InvalidInput(TrazoValidationError):
    """Input vacío o mal formado (puntos, números)."""


class UnsupportedShape(TrazoValidationError):
    """Un simple path debe tener 2, 3 o 4 puntos."""


class PathInterpretError(TrazoValidationError):
    """Error al interpretar un string de path (atributo d)."""


class PathSyntaxError(PathInterpretError):
    """Caracteres o cantidad de argumentos inválidos en el path."""


class CursorNotSet(PathInterpretError):
    """Comando de dibujo antes de cualquier move-to."""


class UnsupportedCommand(PathInterpretError):
    """Letra de comando fuera de MLHVCQAZ."""

    def __init__(self, letter: str) -> None:
        super().__init__(f"Comando de path no soportado: {letter!r}")
        self.letter = letter


class NoContent(TrazoError):
    """No hay geometría para calcular un bbox (no es un fallo del input)."""
