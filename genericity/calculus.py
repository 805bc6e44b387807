"""
The Calculus of Run-Time Types
===============================

These bits represent the data over which the signature verifier operates.
Every value the engine meets gets projected into one of these descriptors,
and the questions the engine asks ("is this parameter the element type?")
become questions about descriptors.

Descriptors are value objects. Two descriptors built from the same parts
are the same type, and the type-numbering subsystem hands each distinct
type a small integer so that equality checks go fast.

Conveniently, type-numbering is just an equivalence classification scheme.
I can reuse the one from booze-tools.

"""
from typing import Iterable
from boozetools.support.foundation import EquivalenceClassifier

_type_numbering_subsystem = EquivalenceClassifier()

class ValueType:
	"""Value objects so they can play well with the classifier"""
	def visit(self, visitor:"TypeVisitor"): raise NotImplementedError(type(self))
	def expected_arity(self) -> int: return -1  # Most things are not callable.

	def __init__(self, *key):
		self._key = key
		self._hash = hash(key)
		self.number = _type_numbering_subsystem.classify(self)
	def __hash__(self): return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def __ne__(self, other): return not self == other
	def exemplar(self) -> "ValueType": return _type_numbering_subsystem.exemplars[self.number]
	def __repr__(self) -> str:
		it = self.visit(Render())
		assert isinstance(it, str), (it, type(self))
		return it

def is_equivalent(s:ValueType, t:ValueType) -> bool:
	return s.number == t.number

class AtomicType(ValueType):
	""" One of the built-in scalar types. These play themselves in the primitive table. """
	def __init__(self, name:str, python_type:type):
		self.name = name
		self.python_type = python_type
		super().__init__(name, python_type)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_atom(self)

class NominalType(ValueType):
	""" Any other Python class, identified by the class itself. """
	def __init__(self, cls:type):
		assert isinstance(cls, type), cls
		self.cls = cls
		super().__init__(cls)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_nominal(self)

class ListType(ValueType):
	def __init__(self, element:ValueType):
		assert isinstance(element, ValueType), element
		self.element = element.exemplar()
		super().__init__(self.element.number)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_list(self)

class ProductType(ValueType):
	def __init__(self, fields: Iterable[ValueType]):
		self.fields = tuple(p.exemplar() for p in fields)
		super().__init__(*(p.number for p in self.fields))
	def visit(self, visitor:"TypeVisitor"): return visitor.on_product(self)

class ArrowType(ValueType):
	def __init__(self, arg: ProductType, res: ProductType):
		self.arg, self.res = arg.exemplar(), res.exemplar()
		super().__init__(self.arg.number, self.res.number)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_arrow(self)
	def expected_arity(self) -> int: return len(self.arg.fields)

class InterfaceType(ValueType):
	""" The type of a capability view. Identity of the capability is what counts. """
	def __init__(self, capability):
		self.capability = capability
		super().__init__(capability)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_interface(self)

class _Any(ValueType):
	"""
	The universal type: anything at all may be stored in a slot of this type.
	It is NOT a wildcard for purposes of signature verification,
	being equal only to itself.
	"""
	def visit(self, visitor:"TypeVisitor"): return visitor.on_any()

ANY = _Any(None)

###################
#

class TypeVisitor:
	def on_atom(self, a:AtomicType): raise NotImplementedError(type(self))
	def on_nominal(self, n:NominalType): raise NotImplementedError(type(self))
	def on_list(self, l:ListType): raise NotImplementedError(type(self))
	def on_product(self, p:ProductType): raise NotImplementedError(type(self))
	def on_arrow(self, a:ArrowType): raise NotImplementedError(type(self))
	def on_interface(self, it:InterfaceType): raise NotImplementedError(type(self))
	def on_any(self): raise NotImplementedError(type(self))


class Render(TypeVisitor):
	""" Return a string representation of the term. """
	def on_atom(self, a: AtomicType):
		return a.name
	def on_nominal(self, n: NominalType):
		return n.cls.__qualname__
	def on_list(self, l: ListType):
		return "[%s]"%l.element.visit(self)
	def on_product(self, p: ProductType):
		return self._args(p.fields)
	def _args(self, args:Iterable[ValueType]):
		return "(%s)"%(",".join(a.visit(self) for a in args))
	def on_arrow(self, a: ArrowType):
		res = a.res.fields
		if len(res) == 1: rhs = res[0].visit(self)
		else: rhs = self._args(res)
		return a.arg.visit(self)+"->"+rhs
	def on_interface(self, it:InterfaceType):
		return "<interface:%s>"%it.capability.name
	def on_any(self):
		return "any"
