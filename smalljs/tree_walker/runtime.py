"""
One evaluation function per kind of node.
Each `_eval_` function's annotation on `expr` decides which node-type it serves.
"""
from .. import syntax
from ..diagnostics import Failure, NotCallable, TypeFailure, DuplicateDeclaration
from .types import JSObject, UNDEFINED, VALUE
from .evaluator import evaluate, attach_evaluation_methods, Returning
from .values import Environment, PlainObject, Function, Closure

def _as_object(value:VALUE, site:syntax.Expr) -> JSObject:
	if not isinstance(value, JSObject):
		raise TypeFailure("type error %s is not an object" % (value,), site)
	return value

def _call(env:Environment, receiver:VALUE, callee:VALUE, args, site:syntax.Expr) -> VALUE:
	if not isinstance(callee, Function):
		raise NotCallable("%s is not callable" % (callee,), site)
	values = [evaluate(a, env) for a in args]
	try: return callee.invoke(receiver, values)
	except Failure as ex:
		# Primitives raise without a site.
		if ex.site is None: ex.site = site
		raise

###############################################################################

def _eval_block(expr:syntax.Block, env:Environment):
	for instruction in expr.instructions:
		result = evaluate(instruction, env)
		if isinstance(result, Returning): return result
	return UNDEFINED

def _eval_literal(expr:syntax.Literal, env:Environment):
	return expr.value

def _eval_fun_call(expr:syntax.FunCall, env:Environment):
	return _call(env, UNDEFINED, evaluate(expr.qualifier, env), expr.args, expr)

def _eval_local_var_access(expr:syntax.LocalVarAccess, env:Environment):
	return env.lookup(expr.name)

def _eval_local_var_assignment(expr:syntax.LocalVarAssignment, env:Environment):
	if expr.declaration and env.lookup(expr.name) is not UNDEFINED:
		raise DuplicateDeclaration("%s already defined" % expr.name, expr)
	env.register(expr.name, evaluate(expr.expr, env))
	return UNDEFINED

def _eval_fun(expr:syntax.Fun, env:Environment):
	function = Closure(expr, env)
	if expr.name is not None: env.register(expr.name, function)
	return function

def _eval_return(expr:syntax.Return, env:Environment):
	return Returning(evaluate(expr.expr, env))

def _eval_if(expr:syntax.If, env:Environment):
	condition = evaluate(expr.condition, env)
	if isinstance(condition, bool) or not isinstance(condition, int):
		raise TypeFailure("Invalid boolean value %s" % (condition,), expr)
	return evaluate(expr.true_block if condition else expr.false_block, env)

def _eval_new(expr:syntax.New, env:Environment):
	obj = PlainObject()
	for name, initializer in expr.init_map.items():
		obj.register(name, evaluate(initializer, env))
	return obj

def _eval_field_access(expr:syntax.FieldAccess, env:Environment):
	return _as_object(evaluate(expr.receiver, env), expr).lookup(expr.name)

def _eval_field_assignment(expr:syntax.FieldAssignment, env:Environment):
	obj = _as_object(evaluate(expr.receiver, env), expr)
	obj.register(expr.name, evaluate(expr.expr, env))
	return UNDEFINED

def _eval_method_call(expr:syntax.MethodCall, env:Environment):
	obj = _as_object(evaluate(expr.receiver, env), expr)
	return _call(env, obj, obj.lookup(expr.name), expr.args, expr)

attach_evaluation_methods(globals())
