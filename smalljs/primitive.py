"""
The primitive operators. Arithmetic is on integers only;
comparisons answer 1 or 0 because the language has no flag type.
Operand mistakes are left to surface as plain Python exceptions.
"""
import operator

def _integer(x):
	if isinstance(x, bool) or not isinstance(x, int):
		raise TypeError("%r is not an integer" % (x,))
	return x

def _arithmetic(op):
	def fn(a, b): return op(_integer(a), _integer(b))
	return fn

def _relation(op):
	def fn(a, b): return 1 if op(a, b) else 0
	return fn

def truncating_div(a:int, b:int) -> int:
	""" Rounds toward zero, as C and Java do, rather than toward minus infinity. """
	q = abs(a) // abs(b)
	return -q if (a < 0) != (b < 0) else q

def truncating_mod(a:int, b:int) -> int:
	""" The sign follows the dividend, so that a == b*(a/b) + a%b. """
	return a - b * truncating_div(a, b)

BINARY = {
	"+"  : _arithmetic(operator.add),
	"-"  : _arithmetic(operator.sub),
	"*"  : _arithmetic(operator.mul),
	"/"  : _arithmetic(truncating_div),
	"%"  : _arithmetic(truncating_mod),
	"==" : _relation(operator.eq),
	"!=" : _relation(operator.ne),
	"<"  : _relation(operator.lt),
	"<=" : _relation(operator.le),
	">"  : _relation(operator.gt),
	">=" : _relation(operator.ge),
}
