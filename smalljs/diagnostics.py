"""
Everything that goes wrong during evaluation is a Failure of some flavor.
The Report decides what (if anything) reaches the console about it.

There is no source text at this level, only the tree, so the
way to show a user where things went wrong is to render the
offending node back into something that resembles the script.
"""
import sys, random
from typing import Optional, Sequence
from boozetools.support.foundation import Visitor
from . import syntax

class TooManyIssues(Exception):
	pass

class Failure(Exception):
	""" Root of the one flat taxonomy of evaluation failures. """
	def __init__(self, message:str, site:Optional[syntax.Expr]=None):
		super().__init__(message)
		self.message = message
		self.site = site

	@property
	def line(self) -> Optional[int]:
		return None if self.site is None else self.site.line

	def __str__(self):
		if self.site is None: return self.message
		return "%s at line %d" % (self.message, self.site.line)

class NotCallable(Failure):
	pass

class TypeFailure(Failure):
	pass

class ArityMismatch(Failure):
	pass

class DuplicateDeclaration(Failure):
	pass

###############################################################################

class Render(Visitor):
	"""
	Turn a node back into compact script-like text.
	Nested blocks come out as {...} so that a snippet stays on one line.
	"""
	def __call__(self, expr) -> str:
		return self.visit(expr)

	def _each(self, exprs:Sequence) -> str:
		return ", ".join(map(self.visit, exprs))

	def visit_Block(self, expr:syntax.Block):
		return "{ %s }" % "; ".join(map(self.visit, expr.instructions)) if expr.instructions else "{}"

	def visit_Literal(self, expr:syntax.Literal):
		if isinstance(expr.value, str): return '"%s"' % expr.value
		return str(expr.value)

	def visit_FunCall(self, expr:syntax.FunCall):
		return "%s(%s)" % (self.visit(expr.qualifier), self._each(expr.args))

	def visit_LocalVarAccess(self, expr:syntax.LocalVarAccess):
		return expr.name

	def visit_LocalVarAssignment(self, expr:syntax.LocalVarAssignment):
		keyword = "var " if expr.declaration else ""
		return "%s%s = %s" % (keyword, expr.name, self.visit(expr.expr))

	def visit_Fun(self, expr:syntax.Fun):
		name = " "+expr.name if expr.name else ""
		return "function%s(%s) {...}" % (name, ", ".join(expr.parameters))

	def visit_Return(self, expr:syntax.Return):
		return "return " + self.visit(expr.expr)

	def visit_If(self, expr:syntax.If):
		return "if (%s) {...} else {...}" % self.visit(expr.condition)

	def visit_New(self, expr:syntax.New):
		fields = ", ".join("%s: %s" % (k, self.visit(v)) for k, v in expr.init_map.items())
		return "{%s}" % fields

	def visit_FieldAccess(self, expr:syntax.FieldAccess):
		return "%s.%s" % (self.visit(expr.receiver), expr.name)

	def visit_FieldAssignment(self, expr:syntax.FieldAssignment):
		return "%s.%s = %s" % (self.visit(expr.receiver), expr.name, self.visit(expr.expr))

	def visit_MethodCall(self, expr:syntax.MethodCall):
		return "%s.%s(%s)" % (self.visit(expr.receiver), expr.name, self._each(expr.args))

render = Render()

###############################################################################

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	oaths = ['Drat', 'Rats', 'Nuts', 'Fiddlesticks', 'Good Grief', 'Curses', 'Crikey', 'Jeepers']
	resignations = [
		'The script cannot go on.',
		'Evaluation stops here.',
		'Something needs fixing.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, oaths, resignations)))

def illustrate(site:syntax.Expr, caption:str="") -> str:
	text = '% 6d | %s' % (site.line, render(site))
	return text + "   <-- " + caption if caption else text

class Report:
	"""
	Collects failures for the console, and carries the verbosity knob.
	Informational chatter goes to stderr only when verbose.
	"""
	_issues : list[Failure]

	def __init__(self, *, verbose:int=0, max_issues:Optional[int]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> Sequence[Failure]: return tuple(self._issues)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def trace(self, message, site:syntax.Expr):
		if self._verbose:
			print(illustrate(site, message), file=sys.stderr)

	def complain(self, failure:Failure, site:Optional[syntax.Expr]=None):
		"""
		Make an entry of an issue; the caller decides when to bemoan.
		A site given here fills in for a failure that arrived without one.
		"""
		assert isinstance(failure, Failure), failure
		if failure.site is None: failure.site = site
		self._issues.append(failure)
		if failure.site is not None: self.trace(type(failure).__name__, failure.site)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

def _as_text(failure:Failure) -> str:
	lines = ["%s: %s" % (type(failure).__name__, failure.message)]
	if failure.site is not None:
		lines.append(illustrate(failure.site))
	return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(_as_text(i), file=sys.stderr)
	sys.stderr.flush()
