"""
Callable identity: two function-like values are "the same function"
when they lead back to the same code, not when they behave alike.

Consequences worth knowing:
	* Two closures made by the same factory are the same function,
	  whatever they captured.
	* Bound methods of two instances of one class are the same function.
	* Methods fetched through a capability view are that capability's
	  dispatch thunks, so they compare equal across concrete types.
"""
import functools
import types
from typing import Hashable
from .ontology import Participant

def code_identity(fn) -> Hashable:
	if isinstance(fn, Participant): return fn.identity()
	assert callable(fn), fn
	if isinstance(fn, types.MethodType): return code_identity(fn.__func__)
	if isinstance(fn, functools.partial): return code_identity(fn.func)
	code = getattr(fn, "__code__", None)
	if code is not None: return code
	if isinstance(fn, type): return fn
	owner = getattr(fn, "__self__", None)
	if owner is not None and not isinstance(owner, types.ModuleType):
		# A method of some built-in type, e.g. [].append or (1).__add__
		return type(owner), fn.__name__
	call = getattr(type(fn), "__call__", None)
	if isinstance(call, types.FunctionType): return call.__code__
	return fn
