"""
The signature verifier.

Each operation states, once, what its callback must look like:
how many parameters, how many results, and how each one's type
relates to the sequence's element type or to another parameter.
The verifier compares that requirement against a callable's actual
shape and says what, if anything, is wrong with it.

Checks go in a fixed order, so the complaint is always about
the first thing wrong:

	1. The callable must take a fixed list of positional arguments.
	2. It must have the right number of parameters and of results.
	3. Each parameter must have the required type.
	4. Each result must have the required type.
	5. For folds, the zero value must have the accumulator's type.

Order matters only for diagnostics.
"""
from typing import NamedTuple, Optional, Sequence, Any
from boozetools.support.foundation import Visitor
from .calculus import ValueType, is_equivalent
from .shapes import CallableShape

class Constraint:
	""" What one parameter or result of a callback must be. """

class Element(Constraint):
	""" Must be the sequence's element type. """

class Exactly(Constraint):
	""" Must be this particular type, whatever the sequence holds. """
	def __init__(self, typ:ValueType):
		self.typ = typ

class Unconstrained(Constraint):
	""" Anything will do. """

class SameAs(Constraint):
	""" Must be whatever type the callback declares for parameter number `position`. """
	def __init__(self, position:int):
		self.position = position

class RequiredSignature(NamedTuple):
	name: str
	generic: str
	params: tuple[Constraint, ...]
	results: tuple[Constraint, ...]
	accumulator: Optional[int] = None  # Which result the zero value must agree with, if any.

class Mismatch(NamedTuple):
	reason: str   # One of: variadic, arity, parameter, result, zero
	position: Optional[int]
	need: Any
	got: Any

class Verifier(Visitor):
	"""
	Turns constraints into the concrete type they demand, in context.
	`None` means no demand at all.
	"""

	def check(self, required:RequiredSignature, actual:CallableShape, element_type:ValueType, zero_type:ValueType=None) -> Optional[Mismatch]:
		if actual.variadic:
			return Mismatch("variadic", None, self.pattern(required), "a variadic callable")
		if len(actual.param_types) != len(required.params) or len(actual.result_types) != len(required.results):
			return Mismatch("arity", None, self.pattern(required), actual.value_type)
		for i, (constraint, got) in enumerate(zip(required.params, actual.param_types)):
			need = self.visit(constraint, element_type, actual.param_types)
			if need is not None and not is_equivalent(need, got):
				return Mismatch("parameter", i, need, got)
		for i, (constraint, got) in enumerate(zip(required.results, actual.result_types)):
			need = self.visit(constraint, element_type, actual.param_types)
			if need is not None and not is_equivalent(need, got):
				return Mismatch("result", i, need, got)
		if required.accumulator is not None and zero_type is not None:
			need = actual.result_types[required.accumulator]
			if not is_equivalent(need, zero_type):
				return Mismatch("zero", required.accumulator, need, zero_type)
		return None

	@staticmethod
	def visit_Element(_, element_type, params): return element_type

	@staticmethod
	def visit_Exactly(c:Exactly, element_type, params): return c.typ

	@staticmethod
	def visit_Unconstrained(_, element_type, params): return None

	@staticmethod
	def visit_SameAs(c:SameAs, element_type, params:Sequence[ValueType]): return params[c.position]

	@staticmethod
	def pattern(required:RequiredSignature) -> str:
		return Pattern(required).text()

class Pattern(Visitor):
	""" Render a requirement in the same notation the calculus renders types, e.g. (T,U)->U """
	_LETTERS = "UVWXYZ"

	def __init__(self, required:RequiredSignature):
		self._required = required
		self._params = []

	def text(self) -> str:
		for i, c in enumerate(self._required.params):
			self._params.append(self.visit(c, i))
		res = [self.visit(c, None) for c in self._required.results]
		rhs = res[0] if len(res) == 1 else "(%s)"%",".join(res)
		return "(%s)->%s"%(",".join(self._params), rhs)

	@staticmethod
	def visit_Element(_, position): return "T"

	@staticmethod
	def visit_Exactly(c:Exactly, position): return repr(c.typ)

	def visit_Unconstrained(self, _, position):
		free = sum(1 for c in self._required.params[:position or 0] if isinstance(c, Unconstrained))
		return self._LETTERS[free]

	def visit_SameAs(self, c:SameAs, position): return self._params[c.position]
