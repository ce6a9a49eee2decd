"""
This is the overall control for the run-time:
Build the global scope, install the primitives, and run the script.
"""
import sys
from typing import Optional, TextIO
from .. import syntax, primitive
from ..diagnostics import Report, Failure
from .types import UNDEFINED
from .values import Environment, Primitive
from .runtime import evaluate

def interpret(script:syntax.Script, out:Optional[TextIO]=None, report:Optional[Report]=None) -> Environment:
	"""
	Run a script in a fresh global environment, writing whatever it prints to `out`.
	Failures propagate to the caller, after they are noted in the report,
	unless the report has had enough and raises TooManyIssues instead.
	The global environment comes back, in case anyone wants to look around.
	"""
	out = sys.stdout if out is None else out
	report = Report(verbose=0) if report is None else report
	global_env = prepare_global_scope(out, report)
	report.info("Evaluating script of", len(script.body.instructions), "top-level instructions")
	try: evaluate(script.body, global_env)
	except Failure as ex:
		report.complain(ex)
		raise
	return global_env

def prepare_global_scope(out:TextIO, report:Report) -> Environment:
	global_env = Environment(None)
	global_env.register("global", global_env)

	def _print(*args):
		report.info("print called with", list(args))
		out.write(" ".join(map(str, args)) + "\n")
		return UNDEFINED
	global_env.register("print", Primitive("print", _print))

	for glyph, fn in primitive.BINARY.items():
		global_env.register(glyph, Primitive(glyph, fn, 2))
	return global_env
