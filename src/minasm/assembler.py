from __future__ import annotations
import argparse, sys
from typing import List

from .lexer import Scanner
from .parser import Parser
from .diagnostics import AsmError
from .writers import to_listing_lines, to_token_lines, write_lines

def front_text(text: str, *, filename: str | None = None, tokens: bool = False) -> List[str]:
    """Escanea (tokens=True) o parsea el texto y devuelve las líneas del listado.
    Lanza AsmError en el primer error léxico o sintáctico."""
    if tokens:
        return to_token_lines(list(Scanner(text, filename=filename)))
    return to_listing_lines(Parser(text, filename=filename).parse())

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Front end del ensamblador mínimo (scanner + parser)")
    ap.add_argument("source", help="archivo de programa de entrada")
    ap.add_argument("-o", "--output", help="archivo de salida para el listado (por defecto stdout)")
    ap.add_argument("--tokens", action="store_true", help="listar los tokens en lugar de las producciones")
    args = ap.parse_args(argv)

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except Exception as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    try:
        lines = front_text(text, filename=args.source, tokens=args.tokens)
    except AsmError as ex:
        print(ex.diagnostic, file=sys.stderr)
        return 1

    if args.output is None:
        for line in lines:
            print(line)
        return 0

    try:
        write_lines(lines, args.output)
    except Exception as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    print(f"OK: {len(lines)} líneas → {args.output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
