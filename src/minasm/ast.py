'''
dataclases de tokens (Op, Ident, Register, Immediate) y producciones (Label, Expression)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from .isa import Operator

# ---- Tokens ----
# row/col son la posición del cursor DESPUÉS de consumir el token (incluido el delimitador)

@dataclass(frozen=True)
class Op:
    """Mnemónico reconocido (p.ej., 'add', 'JMP')."""
    operator: Operator
    row: int
    col: int

@dataclass(frozen=True)
class Ident:
    """Nombre de etiqueta con su marcador (p.ej., '.main')."""
    text: str
    row: int
    col: int

@dataclass(frozen=True)
class Register:
    """Registro '%<letra><dígito>' con el sigilo incluido."""
    text: str
    row: int
    col: int

@dataclass(frozen=True)
class Immediate:
    """Literal numérico (solo dígitos)."""
    text: str
    row: int
    col: int

@dataclass(frozen=True)
class EndOfInput:
    """Centinela de fin de entrada; nunca llega a las producciones."""

EOF_TOKEN = EndOfInput()

Token = Union[Op, Ident, Register, Immediate, EndOfInput]

# ---- Producciones ----

@dataclass(frozen=True)
class Label:
    """Declaración de etiqueta; position es el ordinal (base 1) del token."""
    token: Ident
    position: int

@dataclass(frozen=True)
class Expression:
    """Instrucción: operación, destino obligatorio y fuente opcional."""
    operation: Op
    destination: Register
    source: Optional[Register] = None

Production = Union[Label, Expression]

def describe(token: Token) -> str:
    """Descripción corta de un token para mensajes de error."""
    if isinstance(token, Op):
        return f"operación {token.operator.name}"
    if isinstance(token, Ident):
        return f"etiqueta {token.text!r}"
    if isinstance(token, Register):
        return f"registro {token.text!r}"
    if isinstance(token, Immediate):
        return f"inmediato {token.text!r}"
    return "fin de entrada"
