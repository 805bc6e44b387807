"""
The shape inspector: given any value at all, say what it is.

Participants speak for themselves. Plain lists and tuples are sequences
of whatever type all their elements share; when they share none (or have
none to share) the element type is the universal type, which will match
nothing but itself. Callables are read through their annotations.
Everything else is just a value of its own type.

None of this raises, whatever it's handed. A list that contains itself
is, at the point where it comes around again, a list of anything.
"""
from .calculus import ValueType, NominalType, ANY
from .ontology import Participant
from .primitive import atom_for
from .shapes import Shape, SequenceShape, OtherShape
from .manifest import signature_of

def inspect(value) -> Shape:
	return _shape(value, set())

def type_of(value) -> ValueType:
	return inspect(value).value_type

def _shape(value, visiting:set) -> Shape:
	if isinstance(value, Participant): return value.describe()
	if isinstance(value, (list, tuple)): return SequenceShape(_common_type(value, visiting), len(value))
	if callable(value): return signature_of(value)
	return OtherShape(_scalar_type(value))

def _scalar_type(value) -> ValueType:
	atom = atom_for(type(value))
	return atom if atom is not None else NominalType(type(value))

def _common_type(items, visiting:set) -> ValueType:
	key = id(items)
	if key in visiting: return ANY
	visiting.add(key)
	try: found = {_shape(x, visiting).value_type for x in items}
	finally: visiting.discard(key)
	if len(found) == 1: return found.pop()
	return ANY
