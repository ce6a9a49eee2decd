"""
This module defines the run-time objects that the tree-walker operates in terms of.
Integers and strings play themselves, but environments, objects, and functions need more help.

All three keep their fields in a plain dictionary. Only an environment
also has a parent, and only a function can be invoked.
"""
from abc import abstractmethod
from reprlib import recursive_repr
from typing import Callable, Optional
from .. import syntax
from ..diagnostics import ArityMismatch
from .types import JSObject, UNDEFINED, VALUE, ARGS
from .evaluator import evaluate, Returning

class Environment(JSObject):
	""" A scope frame. Lookup falls back along the chain of parents. """
	def __init__(self, parent:Optional["Environment"]):
		assert parent is None or isinstance(parent, Environment), parent
		self._fields = {}
		self.parent = parent

	def __repr__(self): return "environment"

	def register(self, name:str, value:VALUE):
		self._fields[name] = value

	def lookup(self, name:str) -> VALUE:
		env = self
		while env is not None:
			try: return env._fields[name]
			except KeyError: env = env.parent
		return UNDEFINED

class PlainObject(JSObject):
	""" What `new` makes: fields and nothing else. """
	def __init__(self):
		self._fields = {}

	@recursive_repr("{...}")
	def __repr__(self):
		return "{%s}" % ", ".join("%s: %s" % (k, v) for k, v in self._fields.items())

	def register(self, name:str, value:VALUE):
		self._fields[name] = value

	def lookup(self, name:str) -> VALUE:
		return self._fields.get(name, UNDEFINED)

###############################################################################

class Function(JSObject):
	""" A run-time object that can be invoked with a receiver and arguments. """
	def __init__(self, name:str):
		self.name = name
		self._fields = {}

	def __repr__(self): return "function " + self.name

	def register(self, name:str, value:VALUE):
		self._fields[name] = value

	def lookup(self, name:str) -> VALUE:
		return self._fields.get(name, UNDEFINED)

	@abstractmethod
	def invoke(self, receiver:VALUE, args:ARGS) -> VALUE: pass

class Closure(Function):
	""" The run-time manifestation of a function literal: tied to its natal environment. """
	def __init__(self, fun:syntax.Fun, static_link:Environment):
		super().__init__(fun.name or "lambda")
		self._fun = fun
		self._static_link = static_link

	def invoke(self, receiver:VALUE, args:ARGS) -> VALUE:
		params = self._fun.parameters
		if len(args) != len(params):
			pattern = "Invalid number of arguments for %s: expected %d, got %d"
			raise ArityMismatch(pattern % (self.name, len(params), len(args)), self._fun)
		inner = Environment(self._static_link)
		inner.register("this", receiver)
		for name, value in zip(params, args):
			inner.register(name, value)
		result = evaluate(self._fun.body, inner)
		return result.value if isinstance(result, Returning) else UNDEFINED

class Primitive(Function):
	""" A host-language callable. Arity of None means any number of arguments. """
	def __init__(self, name:str, fn:Callable, arity:Optional[int]=None):
		super().__init__(name)
		self._fn = fn
		self._arity = arity

	def invoke(self, receiver:VALUE, args:ARGS) -> VALUE:
		if self._arity is not None and len(args) != self._arity:
			pattern = "Invalid number of arguments for %s: expected %d, got %d"
			raise ArityMismatch(pattern % (self.name, self._arity, len(args)))
		return self._fn(*args)
