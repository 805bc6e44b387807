"""
A Shape is what the inspector finds when it looks at a value:
a sequence with an element type and a length, a callable with
parameter and result types, or something else entirely.
"""
from typing import Sequence
from .calculus import ValueType, ListType, ProductType, ArrowType

class Shape:
	kind = "other"
	value_type: ValueType
	def is_sequence(self) -> bool: return False
	def is_callable(self) -> bool: return False
	def __repr__(self): return "<%s %r>"%(self.kind, self.value_type)

class SequenceShape(Shape):
	kind = "sequence"
	def __init__(self, element_type:ValueType, length:int):
		assert isinstance(element_type, ValueType), element_type
		self.element_type = element_type
		self.length = length
		self.value_type = ListType(element_type)
	def is_sequence(self) -> bool: return True
	def __repr__(self): return "<sequence %r x%d>"%(self.value_type, self.length)

class CallableShape(Shape):
	"""
	The variadic flag covers everything that cannot be called with
	a plain, fixed list of positional arguments. No operation accepts those.
	"""
	kind = "callable"
	def __init__(self, param_types:Sequence[ValueType], result_types:Sequence[ValueType], variadic:bool=False):
		self.param_types = tuple(param_types)
		self.result_types = tuple(result_types)
		self.variadic = variadic
		self.value_type = ArrowType(ProductType(self.param_types), ProductType(self.result_types))
	def is_callable(self) -> bool: return True
	def arity(self) -> int: return len(self.param_types)
	def __repr__(self):
		return "<callable %r%s>"%(self.value_type, " variadic" if self.variadic else "")

class OtherShape(Shape):
	def __init__(self, value_type:ValueType):
		self.value_type = value_type

VARIADIC = CallableShape((), (), variadic=True)
