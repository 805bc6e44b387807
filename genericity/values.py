"""
This module defines the specialized value-types that the engine operates in terms of.
Basic primitive values play themselves, but a sequence needs to know its element type
even when it is empty, and a lambda needs somebody to tell it what types it takes.
"""
from typing import Callable, Iterable, Sequence
from .calculus import ValueType, NominalType, ANY, is_equivalent
from .diagnostics import NotConvertible
from .ontology import Participant
from .identity import code_identity
from .shapes import SequenceShape, CallableShape
from .inspector import type_of
from .invocation import spread

class Vector(list, Participant):
	"""
	A homogeneous list that remembers its element type.
	It compares equal to any list with equal items, as a list should.

	The items are checked against the element type on the way in.
	Instances of a subclass may stand in for a class, and anything at all
	goes in a vector of the universal type. Later mutation is not policed.
	"""
	def __init__(self, element_type:ValueType, items:Iterable=()):
		assert isinstance(element_type, ValueType), element_type
		super().__init__(items)
		self.element_type = element_type
		if element_type is not ANY:
			for item in self: _admit(element_type, item)

	def __repr__(self):
		return "Vector(%r, %s)"%(self.element_type, list.__repr__(self))

	def describe(self) -> SequenceShape:
		return SequenceShape(self.element_type, len(self))

class Function(Participant):
	""" A callable value, with its parameter and result types stated up front. """
	def __init__(self, fn:Callable, params:Sequence[ValueType], results:Sequence[ValueType]):
		assert callable(fn), fn
		assert all(isinstance(t, ValueType) for t in params), params
		assert all(isinstance(t, ValueType) for t in results), results
		self._fn = fn
		self._shape = CallableShape(params, results)

	def __repr__(self):
		return "<Function %s: %r>"%(getattr(self._fn, "__qualname__", self._fn), self._shape.value_type)

	def __call__(self, *args):
		return self._fn(*args)

	def describe(self) -> CallableShape:
		return self._shape

	def invoke(self, args:Sequence) -> list:
		assert len(args) == self._shape.arity(), (self, args)
		return spread(self._fn(*args), self._shape)

	def identity(self):
		return code_identity(self._fn)

def _admit(element_type:ValueType, item):
	if isinstance(element_type, NominalType) and isinstance(item, element_type.cls): return
	got = type_of(item)
	if not is_equivalent(got, element_type):
		raise NotConvertible("Vector", need=element_type, got=got)

def typed(params:Sequence[ValueType], results:Sequence[ValueType]):
	""" Decorator form: declare the shape of a function where annotations won't do. """
	def wrap(fn:Callable) -> Function:
		return Function(fn, params, results)
	return wrap

class NoResult:
	"""
	What find, max and min give back when there is nothing to give.
	It is not a value of any element type, so it cannot be mistaken for one.
	"""
	_it = None
	def __new__(cls):
		if cls._it is None: cls._it = super().__new__(cls)
		return cls._it
	def __bool__(self): return False
	def __repr__(self): return "NO_RESULT"
	def __reduce__(self): return NoResult, ()

NO_RESULT = NoResult()
