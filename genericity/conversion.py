"""
Element-wise conversion between types, following Python's own
notion of which conversions are reasonable to do without asking:

	* Any type converts to itself, and to the universal type.
	* The numeric tower widens: bool -> int -> float -> complex.
	* A float narrows to an int by truncation.
	* Text and bytes convert both ways through UTF-8.
	* An instance of a class converts to any base class, unchanged.
	* A class derived from a built-in type (an IntEnum, say, or some
	  `class Celsius(float)`) converts as that built-in would,
	  through the target's constructor.

Nothing else converts. In particular, the universal type converts only
to itself: a heterogeneous list has no element type to convert from.
"""
from typing import Callable, Optional
from .calculus import ValueType, AtomicType, NominalType, ANY, is_equivalent
from .diagnostics import NotConvertible
from .ontology import Participant
from .primitive import BOOL, INT, FLOAT, COMPLEX, STRING, BYTES, NONE, atom_for

def _same(x): return x
def _encode(s:str) -> bytes: return s.encode("utf-8")
def _decode(b:bytes) -> str: return b.decode("utf-8")

_TABLE = {
	(BOOL, INT): int,
	(BOOL, FLOAT): float,
	(BOOL, COMPLEX): complex,
	(INT, FLOAT): float,
	(INT, COMPLEX): complex,
	(FLOAT, COMPLEX): complex,
	(FLOAT, INT): int,
	(STRING, BYTES): _encode,
	(BYTES, STRING): _decode,
}

def underlying(typ:ValueType) -> Optional[AtomicType]:
	""" The built-in type a descriptor is made of, if any. """
	if isinstance(typ, AtomicType): return typ
	if isinstance(typ, NominalType):
		for base in typ.cls.__mro__[1:]:
			atom = atom_for(base)
			if atom is not None: return atom
	return None

def converter(src:ValueType, dst:ValueType) -> Optional[Callable]:
	if dst is ANY or is_equivalent(src, dst): return _same
	if isinstance(src, NominalType) and isinstance(dst, NominalType) and issubclass(src.cls, dst.cls): return _same
	u, v = underlying(src), underlying(dst)
	if u is None or v is None or NONE in (u, v): return None
	if u is v: step = v.python_type
	else:
		step = _TABLE.get((u, v))
		if step is None: return None
	if isinstance(dst, NominalType):
		cls = dst.cls
		def construct(x): return cls(step(x))
		return construct
	return step

def convertible(src:ValueType, dst:ValueType) -> bool:
	return converter(src, dst) is not None

def convert(value, src:ValueType, dst:ValueType, operation:str="convert"):
	"""
	The types may agree while the value still does not fit: an infinite float
	has no integer, and not every byte string is UTF-8. Those are refused too.
	"""
	if isinstance(value, Participant): return value.convert(dst, operation)
	fn = converter(src, dst)
	if fn is None: raise NotConvertible(operation, need=dst, got=src)
	try: return fn(value)
	except (ValueError, OverflowError):
		raise NotConvertible(operation, need=dst, got=src)
