'''
clase Diagnostic, excepciones del front end (léxicas y sintácticas)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

Severity = Literal["error"]

_SEV_TO_LABEL = {
    "error": "ERROR",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    La ubicación es opcional (archivo, línea y columna) y puede llevar un mensaje
    de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL[self.severity]
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

class AsmError(Exception):
    """Error fatal del front end.

    row/col son los contadores del scanner (base 0) en el momento de la detección;
    el diagnóstico asociado usa línea base 1 para mostrarse al usuario.
    """
    def __init__(self, message: str, row: int, col: int, *,
                 file: str | None = None, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.row = row
        self.col = col
        self.diagnostic = error(message, line=row + 1, col=col, file=file, hint=hint)

    def __str__(self) -> str:
        return str(self.diagnostic)

class LexError(AsmError):
    """Inmediato, registro o etiqueta mal formados, o mnemónico desconocido."""

class ParseError(AsmError):
    """Token inesperado o operando de tipo incorrecto."""
