"""
Whole scripts, the way a parser would hand them over, and the primitives they lean on.
"""
import io
import unittest

from smalljs.syntax import (
	Script, Block, Literal, FunCall, LocalVarAccess, LocalVarAssignment,
	Fun, Return, If, New, FieldAccess, FieldAssignment,
)
from smalljs.diagnostics import Report, TooManyIssues, ArityMismatch, DuplicateDeclaration, NotCallable
from smalljs.tree_walker.executive import interpret
from smalljs.tree_walker.types import UNDEFINED

def ref(name, line): return LocalVarAccess(name, line)
def lit(value, line): return Literal(value, line)
def call(name, line, *args): return FunCall(LocalVarAccess(name, line), list(args), line)

def output_of(script:Script) -> str:
	out = io.StringIO()
	interpret(script, out, Report(verbose=0))
	return out.getvalue()

def _fact_script():
	# function fact(n) {
	#   if (==(n, 0)) { return 1; }
	#   return *(n, fact(-(n, 1)));
	# }
	# print(fact(5));
	return Script(Block([
		Fun("fact", ["n"], Block([
			If(call("==", 2, ref("n", 2), lit(0, 2)), Block([Return(lit(1, 2), 2)], 2), Block([], 2), 2),
			Return(call("*", 3, ref("n", 3), call("fact", 3, call("-", 3, ref("n", 3), lit(1, 3)))), 3),
		], 1), 1),
		call("print", 5, call("fact", 5, lit(5, 5))),
	], 1))


class EndToEnd(unittest.TestCase):

	def test_arithmetic(self):
		# var x = 3; print(+(x, 4));
		script = Script(Block([
			LocalVarAssignment("x", lit(3, 1), True, 1),
			call("print", 1, call("+", 1, ref("x", 1), lit(4, 1))),
		], 1))
		self.assertEqual("7\n", output_of(script))

	def test_object_field(self):
		# var o = {a: 1}; o.a = 2; print(o.a);
		script = Script(Block([
			LocalVarAssignment("o", New({"a": lit(1, 1)}, 1), True, 1),
			FieldAssignment(ref("o", 1), "a", lit(2, 1), 1),
			call("print", 1, FieldAccess(ref("o", 1), "a", 1)),
		], 1))
		self.assertEqual("2\n", output_of(script))

	def test_factorial(self):
		self.assertEqual("120\n", output_of(_fact_script()))

	def test_same_script_twice(self):
		script = _fact_script()
		self.assertEqual(output_of(script), output_of(script))

	def test_redeclaration_fails_after_earlier_effects(self):
		# print(1); var x = 1; var x = 2;
		out = io.StringIO()
		script = Script(Block([
			call("print", 1, lit(1, 1)),
			LocalVarAssignment("x", lit(1, 2), True, 2),
			LocalVarAssignment("x", lit(2, 3), True, 3),
		], 1))
		with self.assertRaises(DuplicateDeclaration) as cm:
			interpret(script, out, Report(verbose=0))
		self.assertEqual(3, cm.exception.line)
		self.assertEqual("1\n", out.getvalue())

	def test_plain_assignment_mutates(self):
		# var x = 1; x = 2; print(x);
		script = Script(Block([
			LocalVarAssignment("x", lit(1, 1), True, 1),
			LocalVarAssignment("x", lit(2, 2), False, 2),
			call("print", 3, ref("x", 3)),
		], 1))
		self.assertEqual("2\n", output_of(script))

	def test_declaration_inside_function_stays_inside(self):
		# function f() { var x = 1; } f(); x
		script = Script(Block([
			Fun("f", [], Block([LocalVarAssignment("x", lit(1, 1), True, 1)], 1), 1),
			call("f", 1),
		], 1))
		env = interpret(script, io.StringIO(), Report(verbose=0))
		self.assertIs(UNDEFINED, env.lookup("x"))

	def test_failure_is_noted_in_report(self):
		report = Report(verbose=0)
		script = Script(Block([call("+", 4, lit(1, 4))], 4))
		with self.assertRaises(ArityMismatch) as cm:
			interpret(script, io.StringIO(), report)
		self.assertEqual(4, cm.exception.line)
		self.assertTrue(report.sick())
		self.assertIsInstance(report.issues[0], ArityMismatch)

	def test_shared_report_gives_up(self):
		report = Report(verbose=0, max_issues=2)
		script = Script(Block([call("nobody", 6)], 6))
		with self.assertRaises(NotCallable):
			interpret(script, io.StringIO(), report)
		with self.assertRaises(TooManyIssues) as cm:
			interpret(script, io.StringIO(), report)
		self.assertIsInstance(cm.exception.__context__, NotCallable)
		self.assertEqual([6, 6], [issue.line for issue in report.issues])


class Printing(unittest.TestCase):

	def show(self, *args):
		return output_of(Script(Block([call("print", 1, *args)], 1)))

	def test_space_separated(self):
		self.assertEqual("1 two 3\n", self.show(lit(1, 1), lit("two", 1), lit(3, 1)))

	def test_no_arguments(self):
		self.assertEqual("\n", self.show())

	def test_undefined(self):
		self.assertEqual("undefined\n", self.show(ref("nothing", 1)))

	def test_objects_and_functions(self):
		obj = New({"a": lit(1, 1), "b": lit("x", 1)}, 1)
		self.assertEqual("{a: 1, b: x}\n", self.show(obj))
		self.assertEqual("function print\n", self.show(ref("print", 1)))
		self.assertEqual("function lambda\n", self.show(Fun(None, [], Block([], 1), 1)))
		self.assertEqual("environment\n", self.show(ref("global", 1)))

	def test_self_referential_object(self):
		script = Script(Block([
			LocalVarAssignment("o", New({}, 1), True, 1),
			FieldAssignment(ref("o", 1), "me", ref("o", 1), 1),
			call("print", 1, ref("o", 1)),
		], 1))
		self.assertEqual("{me: {...}}\n", output_of(script))

	def test_print_yields_undefined(self):
		self.assertEqual("\nundefined\n", self.show(call("print", 1)))


class Primitives(unittest.TestCase):

	def apply(self, glyph, *operands):
		return output_of(Script(Block([call("print", 1, call(glyph, 1, *(lit(x, 1) for x in operands)))], 1))).strip()

	def test_arithmetic(self):
		for glyph, a, b, expect in [
			("+", 3, 4, "7"),
			("-", 3, 4, "-1"),
			("*", 3, 4, "12"),
			("/", 7, 2, "3"),
			("/", -7, 2, "-3"),
			("/", 7, -2, "-3"),
			("/", -7, -2, "3"),
			("%", 7, 2, "1"),
			("%", -7, 2, "-1"),
			("%", 7, -2, "1"),
		]:
			with self.subTest((glyph, a, b)):
				self.assertEqual(expect, self.apply(glyph, a, b))

	def test_comparisons(self):
		for glyph, a, b, expect in [
			("==", 1, 1, "1"),
			("==", 1, "1", "0"),
			("!=", "a", "b", "1"),
			("<", 1, 2, "1"),
			("<", 2, 2, "0"),
			("<=", 2, 2, "1"),
			(">", "b", "a", "1"),
			(">=", 1, 2, "0"),
		]:
			with self.subTest((glyph, a, b)):
				self.assertEqual(expect, self.apply(glyph, a, b))

	def test_wrong_kind_of_operand(self):
		for glyph, a, b in [("+", "a", 1), ("*", "a", 3), ("<", 1, "a")]:
			with self.subTest(glyph):
				with self.assertRaises(TypeError):
					self.apply(glyph, a, b)

	def test_division_by_zero(self):
		with self.assertRaises(ZeroDivisionError):
			self.apply("/", 1, 0)

	def test_two_operands_exactly(self):
		for operands in [(1,), (1, 2, 3)]:
			with self.subTest(operands):
				with self.assertRaises(ArityMismatch) as cm:
					self.apply("+", *operands)
				self.assertEqual(1, cm.exception.line)
				self.assertIsInstance(cm.exception.site, FunCall)


if __name__ == '__main__':
	unittest.main()
