"""
The operation library.

Every operation goes the same way:

	1. Inspect the sequence and the callback.
	2. Verify the callback against the operation's required signature.
	3. Drive the calls, in index order.
	4. Assemble the result.

If anything is wrong with the shapes, the complaint comes out of steps 1 or 2,
before the callback is ever called. Either a result is produced in full,
or an exception is raised and no result at all.

Each operation's documentation begins with its generic type, e.g.

	map(seq: [T], fn: (T)->U) -> [U]

"""
from typing import Callable, Sequence, Any
from .calculus import ValueType
from .diagnostics import (
	Report, Illegal, NotASequence, NotACallable, SignatureMismatch, ResultMismatch, ZeroTypeMismatch, NotConvertible,
)
from .primitive import BOOL
from .shapes import SequenceShape, CallableShape
from .inspector import inspect, type_of
from .manifest import translate
from .signature import RequiredSignature, Mismatch, Verifier, Element, Exactly, Unconstrained, SameAs
from .invocation import invoke, results
from .identity import code_identity
from .conversion import convertible, convert
from .values import Vector, NO_RESULT

_PREDICATE = (Element(),), (Exactly(BOOL),)
_ORDERING = (Element(), Element()), (Exactly(BOOL),)

MAP = RequiredSignature("map", "map(seq: [T], fn: (T)->U) -> [U]", (Element(),), (Unconstrained(),))
FILTER = RequiredSignature("filter", "filter(seq: [T], pred: (T)->bool) -> [T]", *_PREDICATE)
REJECT = RequiredSignature("reject", "reject(seq: [T], pred: (T)->bool) -> [T]", *_PREDICATE)
FOLDR = RequiredSignature("foldr", "foldr(seq: [T], zero: U, fn: (T,U)->U) -> U", (Element(), Unconstrained()), (SameAs(1),), accumulator=0)
FOLDL = RequiredSignature("foldl", "foldl(seq: [T], zero: U, fn: (U,T)->U) -> U", (Unconstrained(), Element()), (SameAs(0),), accumulator=0)
FIND = RequiredSignature("find", "find(seq: [T], pred: (T)->bool) -> T", *_PREDICATE)
FIND_INDEX = RequiredSignature("find_index", "find_index(seq: [T], pred: (T)->bool) -> int", *_PREDICATE)
SOME = RequiredSignature("some", "some(seq: [T], pred: (T)->bool) -> bool", *_PREDICATE)
EVERY = RequiredSignature("every", "every(seq: [T], pred: (T)->bool) -> bool", *_PREDICATE)
COUNT = RequiredSignature("count", "count(seq: [T], pred: (T)->bool) -> int", *_PREDICATE)
MAX = RequiredSignature("max", "max(seq: [T], less: (T,T)->bool) -> T", *_ORDERING)
MIN = RequiredSignature("min", "min(seq: [T], less: (T,T)->bool) -> T", *_ORDERING)

_ABSENT = object()

class Engine:
	def __init__(self, report:Report=None):
		self._report = report or Report(verbose=0)
		self._verifier = Verifier()

	def _fail(self, error:Illegal):
		self._report.failed(error)
		raise error

	def _sequence(self, operation:str, value) -> SequenceShape:
		shape = inspect(value)
		if not shape.is_sequence():
			self._fail(NotASequence(operation, need="a sequence", got=shape.value_type))
		return shape

	def _callable(self, operation:str, value) -> CallableShape:
		shape = inspect(value)
		if not shape.is_callable():
			self._fail(NotACallable(operation, need="a callable", got=shape.value_type))
		return shape

	def _prepare(self, required:RequiredSignature, seq, fn, zero=_ABSENT) -> tuple[SequenceShape, CallableShape]:
		seq_shape = self._sequence(required.name, seq)
		fn_shape = self._callable(required.name, fn)
		zero_type = None if zero is _ABSENT else type_of(zero)
		mismatch = self._verifier.check(required, fn_shape, seq_shape.element_type, zero_type)
		if mismatch is None:
			self._report.info("%s: %r over %r"%(required.name, fn_shape.value_type, seq_shape))
			self._report.detail("  as %s"%required.generic)
			return seq_shape, fn_shape
		if mismatch.reason == "zero":
			self._fail(ZeroTypeMismatch(required.name, mismatch.need, mismatch.got, required.generic))
		self._fail(SignatureMismatch(required.name, mismatch, required.generic))

	###########################################################################

	@staticmethod
	def identity(x:Any) -> Any:
		"""
		identity(x: T) -> T
		Returns its argument.
		"""
		return x

	def map(self, seq:Sequence, fn:Callable) -> Vector:
		"""
		map(seq: [T], fn: (T)->U) -> [U]
		Applies fn to each element of seq successively, and returns the results.
		The result's element type is fn's declared result type, even when seq is empty.
		"""
		seq_shape, fn_shape = self._prepare(MAP, seq, fn)
		element_type = fn_shape.result_types[0]
		items = list(results(fn, fn_shape, seq))
		try: return Vector(element_type, items)
		except NotConvertible as error:
			self._fail(ResultMismatch(MAP.name, Mismatch("result", 0, element_type, error.got), repr(fn_shape.value_type)))

	def filter(self, seq:Sequence, pred:Callable) -> Vector:
		"""
		filter(seq: [T], pred: (T)->bool) -> [T]
		Returns the elements for which pred returned true, in their original order.
		"""
		seq_shape, fn_shape = self._prepare(FILTER, seq, pred)
		return Vector(seq_shape.element_type, [x for x, keep in zip(seq, results(pred, fn_shape, seq)) if keep])

	def reject(self, seq:Sequence, pred:Callable) -> Vector:
		"""
		reject(seq: [T], pred: (T)->bool) -> [T]
		Returns the elements for which pred returned false, in their original order.
		"""
		seq_shape, fn_shape = self._prepare(REJECT, seq, pred)
		return Vector(seq_shape.element_type, [x for x, keep in zip(seq, results(pred, fn_shape, seq)) if not keep])

	def foldr(self, seq:Sequence, zero:Any, fn:Callable) -> Any:
		"""
		foldr(seq: [T], zero: U, fn: (T,U)->U) -> U
		Threads an accumulator from the first element to the last:

			acc = fn(seq[0], zero)
			acc = fn(seq[1], acc)
			...

		An empty seq gives back zero itself.
		"""
		seq_shape, fn_shape = self._prepare(FOLDR, seq, fn, zero)
		acc = zero
		for item in seq:
			acc = invoke(fn, fn_shape, (item, acc))[0]
		return acc

	def foldl(self, seq:Sequence, zero:Any, fn:Callable) -> Any:
		"""
		foldl(seq: [T], zero: U, fn: (U,T)->U) -> U
		Threads an accumulator from the last element to the first:

			acc = fn(zero, seq[-1])
			acc = fn(acc, seq[-2])
			...

		An empty seq gives back zero itself.
		"""
		seq_shape, fn_shape = self._prepare(FOLDL, seq, fn, zero)
		acc = zero
		for i in range(len(seq) - 1, -1, -1):
			acc = invoke(fn, fn_shape, (acc, seq[i]))[0]
		return acc

	def find(self, seq:Sequence, pred:Callable) -> Any:
		"""
		find(seq: [T], pred: (T)->bool) -> T
		Returns the first element for which pred returns true.
		If there is none, returns NO_RESULT, which is not a T.
		"""
		seq_shape, fn_shape = self._prepare(FIND, seq, pred)
		for item, hit in zip(seq, results(pred, fn_shape, seq)):
			if hit: return item
		return NO_RESULT

	def find_index(self, seq:Sequence, pred:Callable) -> int:
		"""
		find_index(seq: [T], pred: (T)->bool) -> int
		Returns the index of the first element for which pred returns true, or else -1.
		"""
		seq_shape, fn_shape = self._prepare(FIND_INDEX, seq, pred)
		for i, hit in enumerate(results(pred, fn_shape, seq)):
			if hit: return i
		return -1

	def some(self, seq:Sequence, pred:Callable) -> bool:
		"""
		some(seq: [T], pred: (T)->bool) -> bool
		True if pred holds for any element. Stops calling at the first hit.
		"""
		seq_shape, fn_shape = self._prepare(SOME, seq, pred)
		for hit in results(pred, fn_shape, seq):
			if hit: return True
		return False

	def every(self, seq:Sequence, pred:Callable) -> bool:
		"""
		every(seq: [T], pred: (T)->bool) -> bool
		True if pred holds for all elements. Stops calling at the first miss.
		"""
		seq_shape, fn_shape = self._prepare(EVERY, seq, pred)
		for hit in results(pred, fn_shape, seq):
			if not hit: return False
		return True

	def count(self, seq:Sequence, pred:Callable) -> int:
		"""
		count(seq: [T], pred: (T)->bool) -> int
		"""
		seq_shape, fn_shape = self._prepare(COUNT, seq, pred)
		return sum(1 for hit in results(pred, fn_shape, seq) if hit)

	def max(self, seq:Sequence, less:Callable) -> Any:
		"""
		max(seq: [T], less: (T,T)->bool) -> T
		Finds the largest element according to less, where less(a, b) means a < b.
		Among equals, the first one wins. An empty seq gives NO_RESULT.
		"""
		seq_shape, fn_shape = self._prepare(MAX, seq, less)
		if not len(seq): return NO_RESULT
		best = seq[0]
		for i in range(1, len(seq)):
			if invoke(less, fn_shape, (best, seq[i]))[0]: best = seq[i]
		return best

	def min(self, seq:Sequence, less:Callable) -> Any:
		"""
		min(seq: [T], less: (T,T)->bool) -> T
		Finds the smallest element according to less, where less(a, b) means a < b.
		Among equals, the first one wins. An empty seq gives NO_RESULT.
		"""
		seq_shape, fn_shape = self._prepare(MIN, seq, less)
		if not len(seq): return NO_RESULT
		best = seq[0]
		for i in range(1, len(seq)):
			if invoke(less, fn_shape, (seq[i], best))[0]: best = seq[i]
		return best

	def func_equal(self, f1:Callable, f2:Callable) -> bool:
		"""
		Do f1 and f2 refer to the same function? See the identity module
		for what "same" means: closures from one factory count as the same,
		and so do methods fetched through the same capability.
		"""
		self._callable("func_equal", f1)
		self._callable("func_equal", f2)
		return code_identity(f1) == code_identity(f2)

	def convert_slice(self, seq:Sequence, example:Any) -> Vector:
		"""
		convert_slice(seq: [T], example: U) -> [U]
		Converts each element of seq to the type of example.
		"""
		return self._convert("convert_slice", seq, type_of(example))

	def convert_slice_type(self, seq:Sequence, typ) -> Vector:
		"""
		convert_slice_type(seq: [T], typ) -> [typ]
		Like convert_slice, but with the target given as a type:
		either a descriptor or a Python annotation such as float or list[int].
		"""
		target = typ if isinstance(typ, ValueType) else translate(typ)
		return self._convert("convert_slice_type", seq, target)

	def _convert(self, operation:str, seq:Sequence, target:ValueType) -> Vector:
		seq_shape = self._sequence(operation, seq)
		src = seq_shape.element_type
		# Checked against the declared element type, so that an empty seq fails too.
		if not convertible(src, target):
			self._fail(NotConvertible(operation, need=target, got=src))
		self._report.info("%s: %r to %r"%(operation, seq_shape, target))
		items = []
		for x in seq:
			try: items.append(convert(x, src, target, operation))
			except NotConvertible as error:
				self._fail(error)
		return Vector(target, items)
