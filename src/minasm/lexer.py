from __future__ import annotations
from typing import Iterator, Optional

from .ast import Op, Ident, Register, Immediate, EOF_TOKEN, Token
from .diagnostics import LexError
from .isa import spec

REGISTER_SIGIL = "%"
LABEL_MARKER = "."
REGISTER_SYNTAX = "%<letra><dígito>"

class Scanner:
    """Lexer incremental: entrega un token por llamada a next_token().

    Mantiene el carácter actual, el resto del flujo y la posición (row, col).
    Cada carácter consumido avanza col; un salto de línea pone col a 0 e
    incrementa row, tanto si se salta como si cierra un token.
    """

    def __init__(self, text: str, *, filename: Optional[str] = None):
        self._chars: Iterator[str] = iter(text)
        self.cur: Optional[str] = next(self._chars, None)
        self.row = 0
        self.col = 0
        self.filename = filename

    def consume(self) -> Optional[str]:
        """Consume el carácter actual y lo devuelve (None al final, sin efectos)."""
        c = self.cur
        if c is None:
            return None
        self.col += 1
        if c == "\n":
            self.row += 1
            self.col = 0
        self.cur = next(self._chars, None)
        return c

    def next_token(self) -> Token:
        """Devuelve el siguiente token; tras agotar la entrada siempre EOF_TOKEN."""
        while self.cur is not None:
            c = self.consume()
            if c.isspace():
                continue
            if c.isdigit():
                return self._immediate(c)
            if c == REGISTER_SIGIL:
                return self._register(c)
            if c == LABEL_MARKER:
                return self._ident(c)
            return self._op(c)
        return EOF_TOKEN

    def __iter__(self) -> Iterator[Token]:
        """Recorre los tokens restantes, sin incluir el centinela."""
        while True:
            tok = self.next_token()
            if tok is EOF_TOKEN:
                return
            yield tok

    def _fail(self, message: str, hint: str | None = None) -> LexError:
        return LexError(message, self.row, self.col, file=self.filename, hint=hint)

    def _immediate(self, text: str) -> Immediate:
        while self.cur is not None:
            c = self.consume()
            if c.isspace():
                break
            if not c.isdigit():
                raise self._fail(f"se esperaba un dígito, se encontró {c!r}",
                                 hint="los inmediatos son solo dígitos decimales")
            text += c
        return Immediate(text, self.row, self.col)

    def _register(self, text: str) -> Register:
        for kind, accepts in (("una letra", str.isalpha), ("un dígito", str.isdigit)):
            c = self.cur
            if c is None:
                raise self._fail(f"se esperaba {kind} del nombre de registro, fin de entrada",
                                 hint=f"sintaxis de registro: {REGISTER_SYNTAX}")
            self.consume()
            if c.isspace():
                raise self._fail(f"se esperaba {kind} del nombre de registro, se encontró un espacio",
                                 hint=f"sintaxis de registro: {REGISTER_SYNTAX}")
            if not accepts(c):
                raise self._fail(f"los registros tienen la sintaxis {REGISTER_SYNTAX}, se encontró {c!r}",
                                 hint=f"sintaxis de registro: {REGISTER_SYNTAX}")
            text += c
        # Se mira el siguiente carácter sin consumirlo
        if self.cur is not None and not self.cur.isspace():
            raise self._fail(f"carácter inesperado {self.cur!r} tras el registro {text!r}",
                             hint="separe los operandos con espacios")
        return Register(text, self.row, self.col)

    def _ident(self, text: str) -> Ident:
        if self.cur is None or self.cur.isspace():
            raise self._fail("las etiquetas deben tener al menos un carácter después del '.'")
        while self.cur is not None:
            c = self.consume()
            if c.isspace():
                break
            text += c
        return Ident(text, self.row, self.col)

    def _op(self, text: str) -> Op:
        while self.cur is not None:
            c = self.consume()
            if c.isspace():
                break
            text += c
        try:
            entry = spec(text)
        except KeyError:
            raise self._fail(f"operación no soportada: {text!r}",
                             hint="operaciones: add, sub, mov, EQ, NEQ, JMP") from None
        return Op(entry.operator, self.row, self.col)
