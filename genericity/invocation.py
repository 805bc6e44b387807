"""
The invocation engine. Purely mechanical: one call per element,
in index order, no batching and no second thoughts.
Everything interesting has already been verified by the time we get here,
except what a callable actually hands back.
"""
from typing import Callable, Iterable, Iterator, Sequence
from .diagnostics import ResultMismatch
from .ontology import Participant
from .shapes import CallableShape
from .signature import Mismatch

def invoke(fn:Callable, shape:CallableShape, args:Sequence) -> list:
	""" Call fn with positional args and return the list of its results. """
	if isinstance(fn, Participant): return fn.invoke(args)
	return spread(fn(*args), shape)

def spread(it, shape:CallableShape) -> list:
	""" One call's return value, as the list of results its shape declares. """
	width = len(shape.result_types)
	if width == 1: return [it]
	if width == 0: return []
	if isinstance(it, tuple) and len(it) == width: return list(it)
	got = "%d results"%len(it) if isinstance(it, tuple) else "a single %s"%type(it).__name__
	raise ResultMismatch("invoke", Mismatch("result", None, "%d results"%width, got), repr(shape.value_type))

def results(fn:Callable, shape:CallableShape, items:Iterable) -> Iterator:
	"""
	Lazily yield the single result of calling fn on each item in turn.
	Consumers that stop early (find, some, every) thereby stop calling.
	"""
	for item in items:
		yield invoke(fn, shape, (item,))[0]
