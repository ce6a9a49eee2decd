"""
The generic machinery that everything needs,
without the specific methods corresponding to particular syntax.
"""

from typing import NamedTuple
from .. import syntax
from .types import VALUE, JSObject


class Returning(NamedTuple):
	"""
	What a `return` statement evaluates to. Blocks and if-statements pass it
	straight up without doing anything further; the nearest function
	invocation unwraps it. It never appears as an ordinary value.
	"""
	value: VALUE


def evaluate(expr:syntax.Expr, env:JSObject) -> VALUE:
	assert isinstance(env, JSObject), env
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	return fn(expr, env)

EVALUATE = {}

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			_t = _v.__annotations__["expr"]
			assert isinstance(_t, type), (_k, _t)
			EVALUATE[_t] = _v
	missing = set(syntax.EXPRESSION_TYPES) - set(EVALUATE)
	assert not missing, missing
