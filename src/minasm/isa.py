'''
tabla de operaciones (mnemónicos, sensibilidad a mayúsculas)
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict

class Operator(Enum):
    """Conjunto cerrado de operaciones del lenguaje; el valor es la grafía del mnemónico."""
    ADD = "add"
    SUB = "sub"
    MOV = "mov"
    EQ = "EQ"
    NEQ = "NEQ"
    JMP = "JMP"

@dataclass(frozen=True)
class OpSpec:
    """Especificación de un mnemónico.

    - operator: operación que representa
    - case_sensitive: si es True solo se reconoce con la grafía exacta de la tabla
    """
    operator: Operator
    case_sensitive: bool = False

SPEC: Dict[str, OpSpec] = {}

def _add(operator: Operator, *, case_sensitive: bool = False):
    key = operator.value if case_sensitive else operator.value.lower()
    SPEC[key] = OpSpec(operator, case_sensitive)

# Aritméticas y movimiento de datos: cualquier combinación de mayúsculas
_add(Operator.ADD)
_add(Operator.SUB)
_add(Operator.MOV)

# Comparación y control: solo en mayúsculas
_add(Operator.EQ, case_sensitive=True)
_add(Operator.NEQ, case_sensitive=True)
_add(Operator.JMP, case_sensitive=True)

def spec(mnemonic: str) -> OpSpec:
    """Devuelve la especificación de un mnemónico o lanza KeyError."""
    entry = SPEC.get(mnemonic)
    if entry is not None and entry.case_sensitive:
        return entry
    entry = SPEC.get(mnemonic.lower())
    if entry is not None and not entry.case_sensitive:
        return entry
    raise KeyError(f"Operación no soportada: {mnemonic!r}")
