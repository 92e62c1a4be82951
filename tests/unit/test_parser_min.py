import pytest
from src.minasm.parser import Parser, parse
from src.minasm.ast import Op, Ident, Register, Label, Expression
from src.minasm.isa import Operator
from src.minasm.diagnostics import LexError, ParseError

def test_handle_expression():
    prods = Parser("add %r1 %r2").parse()
    assert prods == [Expression(
        operation=Op(Operator.ADD, 0, 4),
        destination=Register("%r1", 0, 7),
        source=Register("%r2", 0, 11),
    )]

def test_next_token_counts_position():
    p = Parser("add %r1 %r2")
    assert p._next_token() == Op(Operator.ADD, 0, 4)
    assert p._next_token() == Register("%r1", 0, 7)
    assert p._next_token() == Register("%r2", 0, 11)
    assert p._next_token() is None
    assert p.position == 4

def test_labels_use_token_ordinal():
    prods = Parser(".a .b\nadd %r1 %r2\n.loop").parse()
    assert prods[0] == Label(token=Ident(".a", 0, 3), position=1)
    assert prods[1] == Label(token=Ident(".b", 1, 0), position=2)
    assert isinstance(prods[2], Expression)
    # add, %r1, %r2 son los tokens 3..5
    assert prods[3] == Label(token=Ident(".loop", 2, 5), position=6)

@pytest.mark.parametrize("src, op", [
    ("MOV %a0", Operator.MOV),
    ("JMP %r1\n", Operator.JMP),
    ("NEQ %x9   ", Operator.NEQ),
])
def test_source_absent_at_end(src, op):
    (expr,) = Parser(src).parse()
    assert expr.operation.operator is op
    assert expr.source is None

def test_multiline_program_with_register_source():
    src = ".main\n\nadd %r1 %r2\nSUB %r1 %r3\n"
    prods, diags = parse(src, filename="main.s")
    assert not diags
    assert prods == [
        Label(token=Ident(".main", 1, 0), position=1),
        Expression(Op(Operator.ADD, 2, 4), Register("%r1", 2, 7), Register("%r2", 2, 11)),
        Expression(Op(Operator.SUB, 3, 4), Register("%r1", 3, 7), Register("%r3", 3, 11)),
    ]

def test_immediate_source_is_rejected():
    # Un inmediato en la posición de fuente es un error sintáctico
    src = ".main\n\nadd %r1 %r2\nSUB %r1 1\n"
    with pytest.raises(ParseError) as ei:
        Parser(src).parse()
    assert "como fuente" in ei.value.message
    assert "inmediato '1'" in ei.value.message
    assert (ei.value.row, ei.value.col) == (4, 0)

def test_parse_returns_no_partial_program():
    src = ".main\n\nadd %r1 %r2\nSUB %r1 1\n"
    prods, diags = parse(src, filename="prog.s")
    assert prods == []
    assert len(diags) == 1
    assert diags[0].severity == "error"
    assert diags[0].file == "prog.s"
    assert (diags[0].line, diags[0].col) == (5, 0)

def test_unary_instruction_followed_by_statement():
    with pytest.raises(ParseError, match="como fuente"):
        Parser("mov %r1\nadd %r2 %r3").parse()

@pytest.mark.parametrize("src, fragment", [
    ("add", "fin de entrada"),
    ("add   \n", "fin de entrada"),
    ("add .x", "etiqueta '.x'"),
    ("add 5", "inmediato '5'"),
    ("add sub", "operación SUB"),
])
def test_missing_or_wrong_destination(src, fragment):
    with pytest.raises(ParseError) as ei:
        Parser(src).parse()
    assert "como destino" in ei.value.message
    assert fragment in ei.value.message

def test_missing_destination_position_at_eof():
    with pytest.raises(ParseError) as ei:
        Parser("add").parse()
    assert (ei.value.row, ei.value.col) == (0, 3)

@pytest.mark.parametrize("src", ["%r1", "42", ".x %r1", "add %r1 %r2 %r3"])
def test_incorrect_statement_start(src):
    with pytest.raises(ParseError, match="token incorrecto"):
        Parser(src).parse()

def test_lex_errors_propagate():
    with pytest.raises(LexError):
        Parser("add %r1 %x").parse()
    prods, diags = parse("ADD %r1 %r2\nbogus %r1")
    assert prods == []
    assert "bogus" in diags[0].message

def test_empty_program():
    assert Parser("").parse() == []
    assert parse("  \n\n ") == ([], [])

def test_parser_is_single_use():
    p = Parser("add %r1")
    assert len(p.parse()) == 1
    with pytest.raises(RuntimeError, match="ya se usó"):
        p.parse()
    assert p.position == 3
