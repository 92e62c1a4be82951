from __future__ import annotations
from typing import Iterable, List

from .ast import Label, Production, Token, describe

def format_production(p: Production) -> str:
    if isinstance(p, Label):
        return f"{p.token.text}:  ; token {p.position}"
    operands = [p.destination.text]
    if p.source is not None:
        operands.append(p.source.text)
    return f"    {p.operation.operator.name} {', '.join(operands)}"

def format_token(t: Token) -> str:
    # t nunca es el centinela: Scanner.__iter__ lo descarta
    return f"{t.row}:{t.col}\t{describe(t)}"

def to_listing_lines(productions: Iterable[Production]) -> List[str]:
    return [format_production(p) for p in productions]

def to_token_lines(tokens: Iterable[Token]) -> List[str]:
    return [format_token(t) for t in tokens]

def write_lines(lines: Iterable[str], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
