# File: trazo/svg/path_reader.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Parser + máquina de estados del mini-lenguaje de paths -> primitivas geométricas.
# Notes:
#   - Subconjunto soportado: M L H V C Q A Z (mayúscula = absoluto, minúscula = relativo).
#   - Cualquier otra letra es error (no se saltea en silencio).
#   - El "brush tip" (cursor) es estado local de cada llamada.
#   - Z cierra contra el inicio del path (primer M) y deja el cursor donde estaba.
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from trazo.geom.point_math import Point
from trazo.geom.primitives import CubicBezier, EllipseArc, Line, Primitive, QuadraticBezier
from trazo.utils.errors import CursorNotSet, PathSyntaxError, UnsupportedCommand

log = logging.getLogger(__name__)


class PathCommand(str, Enum):
    """Comandos soportados (letra absoluta)."""

    MOVE = "M"
    LINE = "L"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CUBIC = "C"
    QUADRATIC = "Q"
    ARC = "A"
    CLOSE = "Z"


# Cantidad de números por invocación.
ARITY = {
    PathCommand.MOVE: 2,
    PathCommand.LINE: 2,
    PathCommand.HORIZONTAL: 1,
    PathCommand.VERTICAL: 1,
    PathCommand.CUBIC: 6,
    PathCommand.QUADRATIC: 4,
    PathCommand.ARC: 7,
    PathCommand.CLOSE: 0,
}

_BY_LETTER = {c.value: c for c in PathCommand}

_TOKEN_RE = re.compile(
    r"(?P<num>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|(?P<cmd>[A-Za-z])"
    r"|(?P<sep>[\s,]+)"
    r"|(?P<bad>.)",
    re.DOTALL,
)


@dataclass(frozen=True)
class PathCommandCall:
    command: PathCommand
    relative: bool
    args: tuple[float, ...] = ()

    @property
    def letter(self) -> str:
        return self.command.value.lower() if self.relative else self.command.value


def parse_command_letter(letter: str) -> tuple[PathCommand, bool]:
    cmd = _BY_LETTER.get(letter.upper())
    if cmd is None:
        raise UnsupportedCommand(letter)
    return cmd, letter.islower()


def _expand(letter: str, args: list[float], pos: int) -> list[PathCommandCall]:
    """Separa argumentos repetidos en llamadas individuales.

    "L 1 2 3 4" -> L(1,2), L(3,4). Pares extra tras M/m son L/l implícitos.
    """
    cmd, relative = parse_command_letter(letter)
    arity = ARITY[cmd]
    if arity == 0:
        if args:
            raise PathSyntaxError(f"{letter!r} no lleva argumentos (pos {pos})")
        return [PathCommandCall(cmd, relative)]

    if not args or len(args) % arity:
        raise PathSyntaxError(
            f"{letter!r} espera múltiplos de {arity} números, hay {len(args)} (pos {pos})"
        )

    out: list[PathCommandCall] = []
    for i in range(0, len(args), arity):
        c = cmd
        if cmd is PathCommand.MOVE and i > 0:
            c = PathCommand.LINE
        out.append(PathCommandCall(c, relative, tuple(args[i:i + arity])))
    return out


def tokenize_path(d: str) -> list[PathCommandCall]:
    """Parsea un string d a una lista de llamadas de comando."""
    calls: list[PathCommandCall] = []
    letter: str | None = None
    letter_pos = 0
    args: list[float] = []

    for m in _TOKEN_RE.finditer(d):
        kind = m.lastgroup
        if kind == "sep":
            continue
        if kind == "num":
            if letter is None:
                raise PathSyntaxError(f"Número antes de cualquier comando (pos {m.start()})")
            args.append(float(m.group("num")))
            continue
        if kind == "cmd":
            # Validar la letra apenas aparece.
            parse_command_letter(m.group("cmd"))
            if letter is not None:
                calls.extend(_expand(letter, args, letter_pos))
            letter = m.group("cmd")
            letter_pos = m.start()
            args = []
            continue
        raise PathSyntaxError(f"Carácter inválido {m.group()!r} en path (pos {m.start()})")

    if letter is not None:
        calls.extend(_expand(letter, args, letter_pos))
    return calls


class _BrushState:
    """Estado de una corrida: cursor, inicio del path y geometría acumulada."""

    def __init__(self) -> None:
        self.cursor: Point | None = None
        self.path_start: Point | None = None
        self.geometry: list[Primitive] = []

    def tip(self, call: PathCommandCall) -> Point:
        if self.cursor is None:
            raise CursorNotSet(f"Brush tip no seteado: {call.letter!r} antes de M/m")
        return self.cursor

    def resolve(self, call: PathCommandCall, x: float, y: float) -> Point:
        if not call.relative:
            return (x, y)
        tip = self.tip(call)
        return (tip[0] + x, tip[1] + y)

    def process(self, call: PathCommandCall) -> None:
        cmd = call.command
        a = call.args

        if cmd is PathCommand.MOVE:
            point = self.resolve(call, a[0], a[1])
            self.cursor = point
            # Solo el primer M fija el inicio del path.
            if self.path_start is None:
                self.path_start = point

        elif cmd is PathCommand.LINE:
            start = self.tip(call)
            end = self.resolve(call, a[0], a[1])
            self.geometry.append(Line(start, end))
            self.cursor = end

        elif cmd is PathCommand.HORIZONTAL:
            start = self.tip(call)
            end = (start[0] + a[0] if call.relative else a[0], start[1])
            self.geometry.append(Line(start, end))
            self.cursor = end

        elif cmd is PathCommand.VERTICAL:
            start = self.tip(call)
            end = (start[0], start[1] + a[0] if call.relative else a[0])
            self.geometry.append(Line(start, end))
            self.cursor = end

        elif cmd is PathCommand.CUBIC:
            start = self.tip(call)
            cp1 = self.resolve(call, a[0], a[1])
            cp2 = self.resolve(call, a[2], a[3])
            end = self.resolve(call, a[4], a[5])
            self.geometry.append(CubicBezier(start, cp1, cp2, end))
            self.cursor = end

        elif cmd is PathCommand.QUADRATIC:
            start = self.tip(call)
            cp = self.resolve(call, a[0], a[1])
            end = self.resolve(call, a[2], a[3])
            self.geometry.append(QuadraticBezier(start, cp, end))
            self.cursor = end

        elif cmd is PathCommand.ARC:
            start = self.tip(call)
            rx, ry, rotation, large_arc, sweep = a[0], a[1], a[2], a[3], a[4]
            end = self.resolve(call, a[5], a[6])
            self.geometry.append(
                EllipseArc(start, rx, ry, rotation, bool(large_arc), bool(sweep), end)
            )
            self.cursor = end

        elif cmd is PathCommand.CLOSE:
            if self.geometry and self.cursor is not None and self.path_start is not None:
                self.geometry.append(Line(self.cursor, self.path_start))

        else:
            raise UnsupportedCommand(call.letter)


def interpret_commands(calls: Iterable[PathCommandCall]) -> list[Primitive]:
    state = _BrushState()
    for call in calls:
        state.process(call)
    return state.geometry


def interpret_path(d: str) -> list[Primitive]:
    """String d -> lista ordenada de primitivas (Line/QuadraticBezier/CubicBezier/EllipseArc)."""
    calls = tokenize_path(d)
    geometry = interpret_commands(calls)
    log.debug("path interpretado: %d comandos -> %d primitivas", len(calls), len(geometry))
    return geometry
