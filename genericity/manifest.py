"""
Python functions announce their types in annotations, if they announce them at all.
This module maps those annotations into descriptors from the calculus,
so that an ordinary annotated function can take part in generic operations
without being wrapped.

Whatever cannot be understood becomes the universal type.
That is not the same as a free type-variable: the universal type
only matches itself, so a poorly-annotated callback will be refused,
rather than waved through.
"""
import collections.abc
import inspect
import typing
from typing import Any, Callable
from .calculus import ValueType, ListType, ProductType, ArrowType, NominalType, ANY
from .primitive import NONE, atom_for
from .shapes import CallableShape, VARIADIC

_SEQUENCE_ORIGINS = {list, tuple, collections.abc.Sequence, collections.abc.MutableSequence}
_EMPTY = inspect.Parameter.empty
_FIXED_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

def translate(annotation) -> ValueType:
	if annotation is _EMPTY or annotation is Any or annotation is object: return ANY
	if annotation is None: return NONE
	if isinstance(annotation, str): return ANY  # An unresolved forward reference.
	# Generic aliases must be looked at first: some interpreters claim list[int] is a type.
	origin = typing.get_origin(annotation)
	if origin is not None:
		return _translate_generic(origin, typing.get_args(annotation))
	if isinstance(annotation, type):
		atom = atom_for(annotation)
		if atom is not None: return atom
		if annotation in _SEQUENCE_ORIGINS: return ListType(ANY)
		return NominalType(annotation)
	return ANY

def _translate_generic(origin, args) -> ValueType:
	if origin in _SEQUENCE_ORIGINS:
		if not args: return ListType(ANY)
		if origin is tuple:
			# Only the homogeneous form tuple[T, ...] is a sequence in this sense.
			if len(args) == 2 and args[1] is Ellipsis: return ListType(translate(args[0]))
			return ANY
		return ListType(translate(args[0]))
	if origin is collections.abc.Callable:
		if len(args) != 2 or args[0] is Ellipsis: return ANY
		return ArrowType(ProductType(map(translate, args[0])), ProductType(results(args[1])))
	return ANY

def results(annotation) -> tuple[ValueType, ...]:
	""" A function annotated to return None has no results; an unannotated one has one result of any type. """
	if annotation is None or annotation is type(None): return ()
	return (translate(annotation),)

def _hints(fn:Callable) -> dict:
	target = fn.__init__ if isinstance(fn, type) else fn
	try: return typing.get_type_hints(target)
	except Exception:
		# String annotations are evaluated here, and may be any broken code at all.
		return {}

def signature_of(fn:Callable) -> CallableShape:
	""" Read the shape of an arbitrary Python callable. Never raises. """
	try: sig = inspect.signature(fn)
	except (TypeError, ValueError):
		return VARIADIC
	hints = _hints(fn)
	param_types, variadic = [], False
	for p in sig.parameters.values():
		if p.kind in _FIXED_KINDS:
			param_types.append(translate(hints.get(p.name, p.annotation)))
		elif p.kind == inspect.Parameter.KEYWORD_ONLY and p.default is not _EMPTY:
			continue
		else:
			variadic = True
	if isinstance(fn, type):
		result_types = (translate(fn),)
	else:
		result_types = results(hints.get("return", sig.return_annotation))
	return CallableShape(param_types, result_types, variadic)
