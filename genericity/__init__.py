"""
Generic higher-order operations with the type-checking done at call time.

	>>> from genericity import map, typed, INT
	>>> map([1, 2, 3], typed([INT], [INT])(lambda i: i * i))
	Vector(int, [1, 4, 9])

Callbacks may be annotated Python functions, or any callable wrapped in
a `Function` (or decorated with `typed`) to say what types it takes.
If the shapes do not fit, the operation raises before calling anything.

The functions here use a quiet default engine. For a running commentary
on stderr, make your own: `Engine(Report(verbose=1))`.
"""
from .calculus import ValueType, AtomicType, NominalType, ListType, ProductType, ArrowType, InterfaceType, ANY
from .primitive import BOOL, INT, FLOAT, COMPLEX, STRING, BYTES, NONE, INTERFACE
from .diagnostics import (
	Report, Illegal, NotASequence, NotACallable, SignatureMismatch, ResultMismatch, ZeroTypeMismatch, NotConvertible,
)
from .ontology import Participant
from .shapes import Shape, SequenceShape, CallableShape, OtherShape
from .inspector import inspect, type_of
from .values import Vector, Function, typed, NO_RESULT
from .capability import Capability
from .engine import Engine

_default = Engine()

identity = _default.identity
map = _default.map
filter = _default.filter
reject = _default.reject
foldr = _default.foldr
foldl = _default.foldl
find = _default.find
find_index = _default.find_index
some = _default.some
every = _default.every
count = _default.count
max = _default.max
min = _default.min
func_equal = _default.func_equal
convert_slice = _default.convert_slice
convert_slice_type = _default.convert_slice_type
