"""
The set of parse-nodes in simple form.
Whatever parser feeds this evaluator builds these bottom-up.
Every node remembers the line it came from, but only diagnostics care.
Nodes are immutable; a parser that wants to decorate them must make new ones.
"""
from typing import Any, Mapping, NamedTuple, Optional, Sequence, Union, get_args

class Block(NamedTuple):
	instructions: Sequence["Expr"]
	line: int = 0

class Literal(NamedTuple):
	value: Any
	line: int = 0

class FunCall(NamedTuple):
	qualifier: "Expr"
	args: Sequence["Expr"]
	line: int = 0

class LocalVarAccess(NamedTuple):
	name: str
	line: int = 0

class LocalVarAssignment(NamedTuple):
	name: str
	expr: "Expr"
	declaration: bool   # `var x = ...` as opposed to plain `x = ...`
	line: int = 0

class Fun(NamedTuple):
	name: Optional[str]
	parameters: Sequence[str]
	body: Block
	line: int = 0

class Return(NamedTuple):
	expr: "Expr"
	line: int = 0

class If(NamedTuple):
	condition: "Expr"
	true_block: Block
	false_block: Block
	line: int = 0

class New(NamedTuple):
	init_map: Mapping[str, "Expr"]
	line: int = 0

class FieldAccess(NamedTuple):
	receiver: "Expr"
	name: str
	line: int = 0

class FieldAssignment(NamedTuple):
	receiver: "Expr"
	name: str
	expr: "Expr"
	line: int = 0

class MethodCall(NamedTuple):
	receiver: "Expr"
	name: str
	args: Sequence["Expr"]
	line: int = 0

Expr = Union[
	Block, Literal, FunCall, LocalVarAccess, LocalVarAssignment, Fun,
	Return, If, New, FieldAccess, FieldAssignment, MethodCall,
]

EXPRESSION_TYPES = get_args(Expr)

class Script(NamedTuple):
	""" What a parser hands over: just the top-level block. """
	body: Block
