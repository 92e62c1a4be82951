# src/minasm/parser.py
from __future__ import annotations
from typing import List, Optional, Tuple

from .lexer import Scanner
from .ast import (
    Op, Ident, Register, EndOfInput, Token,
    Label, Expression, Production, describe,
)
from .diagnostics import AsmError, ParseError, Diagnostic

class Parser:
    """Parser de una sola pasada que tira de su Scanner token a token.

    Gramática:
      program     := (label | instruction)*
      label       := Ident
      instruction := Op Register [Register]

    position cuenta los tokens pedidos al scanner (base 1), etiquetas incluidas.
    """

    def __init__(self, text: str, *, filename: Optional[str] = None):
        self._scanner = Scanner(text, filename=filename)
        self.filename = filename
        self.position = 0
        self._done = False

    def parse(self) -> List[Production]:
        """Devuelve las producciones del programa; lanza AsmError en el primer error.

        Un Parser se usa una sola vez: una segunda llamada lanza RuntimeError.
        """
        if self._done:
            raise RuntimeError("el parser ya se usó; cree uno nuevo por programa")
        self._done = True
        productions: List[Production] = []
        while True:
            token = self._next_token()
            if token is None:
                break
            if isinstance(token, Ident):
                productions.append(Label(token=token, position=self.position))
            elif isinstance(token, Op):
                productions.append(self._expression(token))
            else:
                raise self._fail(f"token incorrecto: {describe(token)}", token,
                                 hint="cada sentencia empieza con una etiqueta o una operación")
        return productions

    def _expression(self, operation: Op) -> Expression:
        destination = self._next_token()
        if not isinstance(destination, Register):
            found = describe(destination) if destination is not None else "fin de entrada"
            raise self._fail(f"se esperaba un registro como destino, se encontró {found}", destination)

        source = self._next_token()
        if source is not None and not isinstance(source, Register):
            # Un operando fuente presente debe ser un registro
            raise self._fail(f"se esperaba un registro como fuente, se encontró {describe(source)}", source,
                             hint="los inmediatos no se admiten como operando")
        return Expression(operation=operation, destination=destination, source=source)

    def _next_token(self) -> Optional[Token]:
        self.position += 1
        token = self._scanner.next_token()
        if isinstance(token, EndOfInput):
            return None
        return token

    def _fail(self, message: str, token: Optional[Token], hint: str | None = None) -> ParseError:
        if token is None or isinstance(token, EndOfInput):
            row, col = self._scanner.row, self._scanner.col
        else:
            row, col = token.row, token.col
        return ParseError(message, row, col, file=self.filename, hint=hint)

def parse(text: str, *, filename: Optional[str] = None) -> Tuple[List[Production], List[Diagnostic]]:
    """
    Devuelve (productions, diagnostics).

    Si hay un error se devuelve ([], [diagnóstico]): nunca un programa parcial.
    """
    try:
        return Parser(text, filename=filename).parse(), []
    except AsmError as ex:
        return [], [ex.diagnostic]
