"""
A capability is a named set of methods, the way an interface is.
Looking at an object through a capability gives a view; the methods
found on the view are not the object's own methods but the capability's
dispatch thunks, which forward to whatever the object provides.

Since the thunk is the same for every object seen through the same
capability, two different concrete types answer the same function
when asked through the view. That's how interface dispatch works,
and `func_equal` reports it faithfully.
"""
from typing import Sequence
from .calculus import InterfaceType
from .ontology import Participant
from .shapes import CallableShape, OtherShape
from .manifest import signature_of
from .invocation import spread

class Capability:
	def __init__(self, protocol:type, name:str=None):
		assert isinstance(protocol, type), protocol
		self.name = name or protocol.__name__
		self._thunks = {
			method_name: _Thunk(self, method_name, _without_receiver(member))
			for method_name, member in vars(protocol).items()
			if callable(member) and not method_name.startswith("_")
		}
		self.value_type = InterfaceType(self)

	def __repr__(self): return "<capability %s>"%self.name

	def method_names(self) -> frozenset:
		return frozenset(self._thunks)

	def thunk(self, method_name:str) -> "_Thunk":
		return self._thunks[method_name]

	def view(self, receiver) -> "View":
		missing = sorted(m for m in self._thunks if not callable(getattr(receiver, m, None)))
		if missing:
			raise TypeError("%s does not provide %s: lacks %s"%(type(receiver).__name__, self.name, ", ".join(missing)))
		return View(self, receiver)

def _without_receiver(member) -> CallableShape:
	shape = signature_of(member)
	if shape.variadic or not shape.param_types: return shape
	return CallableShape(shape.param_types[1:], shape.result_types)

class _Thunk:
	""" One per capability per method name. Its identity is the thing compared. """
	def __init__(self, capability:Capability, method_name:str, shape:CallableShape):
		self.capability = capability
		self.method_name = method_name
		self.shape = shape
	def __repr__(self): return "<thunk %s.%s>"%(self.capability.name, self.method_name)

class View(Participant):
	def __init__(self, capability:Capability, receiver):
		self._capability = capability
		self._receiver = receiver

	def __getattr__(self, method_name):
		try: thunk = self._capability.thunk(method_name)
		except KeyError:
			raise AttributeError(method_name) from None
		return MethodValue(thunk, self._receiver)

	def describe(self) -> OtherShape:
		return OtherShape(self._capability.value_type)

class MethodValue(Participant):
	""" A method fetched through a capability view: a thunk bound to its receiver. """
	def __init__(self, thunk:_Thunk, receiver):
		self._thunk = thunk
		self._receiver = receiver

	def __repr__(self): return "<method %s.%s of %r>"%(self._thunk.capability.name, self._thunk.method_name, self._receiver)

	def __call__(self, *args):
		return getattr(self._receiver, self._thunk.method_name)(*args)

	def describe(self) -> CallableShape:
		return self._thunk.shape

	def invoke(self, args:Sequence) -> list:
		return spread(self(*args), self._thunk.shape)

	def identity(self):
		return self._thunk
