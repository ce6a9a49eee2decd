"""
This module aims to express an interface agreement
between the evaluator and various kinds of data.
"""

from abc import ABC, abstractmethod
from typing import Callable, Sequence, Union
from ..diagnostics import NotCallable

class Undefined:
	""" There is exactly one of these. It means "nothing bound" and "no result". """
	__slots__ = ()
	_instance = None
	def __new__(cls):
		if cls._instance is None: cls._instance = super().__new__(cls)
		return cls._instance
	def __repr__(self): return "undefined"
	def __setattr__(self, key, value): raise AttributeError("undefined is immutable")

UNDEFINED = Undefined()

class JSObject(ABC):
	""" Root for run-time objects: anything with named fields. """
	@abstractmethod
	def register(self, name:str, value:"VALUE") -> None: pass

	@abstractmethod
	def lookup(self, name:str) -> "VALUE": pass

	def invoke(self, receiver:"VALUE", args:"ARGS") -> "VALUE":
		raise NotCallable("%s is not callable" % self)

NATIVE_DATA = Union[int, str]
VALUE = Union[NATIVE_DATA, Undefined, JSObject]
ARGS = Sequence[VALUE]
INVOKER = Callable[[VALUE, ARGS], VALUE]
