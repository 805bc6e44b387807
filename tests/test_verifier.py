"""
The signature verifier in isolation, plus the things an engine says
when it is asked to talk.
"""
import io
import pickle
import unittest

from genericity import (
	Engine, Report, Capability, Vector, Function, NO_RESULT,
	INT, BOOL, STRING, FLOAT, ANY, ListType,
	SignatureMismatch, ResultMismatch, NotConvertible,
)
from genericity.shapes import CallableShape, VARIADIC
from genericity.signature import Verifier, Pattern, RequiredSignature, Element, Unconstrained
from genericity import engine

class Verifying(unittest.TestCase):
	def setUp(self):
		self.verifier = Verifier()

	def check(self, required, params, results, element_type=INT, zero_type=None):
		return self.verifier.check(required, CallableShape(params, results), element_type, zero_type)

	def test_fitting_shapes_pass(self):
		for required, params, results in (
			(engine.MAP, [INT], [STRING]),
			(engine.FILTER, [INT], [BOOL]),
			(engine.FOLDR, [INT, FLOAT], [FLOAT]),
			(engine.FOLDL, [FLOAT, INT], [FLOAT]),
			(engine.MAX, [INT, INT], [BOOL]),
		):
			with self.subTest(required.name):
				self.assertIsNone(self.check(required, params, results))

	def test_first_problem_is_the_one_reported(self):
		for required, params, results, reason, position in (
			(engine.MAP, [INT, INT], [INT], "arity", None),
			(engine.MAP, [INT], [], "arity", None),
			(engine.MAP, [STRING], [INT, INT], "arity", None),
			(engine.MAP, [STRING], [INT], "parameter", 0),
			(engine.FILTER, [INT], [INT], "result", 0),
			(engine.FILTER, [STRING], [INT], "parameter", 0),
			(engine.FOLDR, [STRING, FLOAT], [FLOAT], "parameter", 0),
			(engine.FOLDR, [INT, FLOAT], [INT], "result", 0),
			(engine.FOLDL, [INT, INT], [FLOAT], "result", 0),
			(engine.MIN, [INT, FLOAT], [BOOL], "parameter", 1),
			(engine.COUNT, [ANY], [BOOL], "parameter", 0),
		):
			with self.subTest((required.name, params, results)):
				mismatch = self.check(required, params, results)
				self.assertEqual(reason, mismatch.reason)
				self.assertEqual(position, mismatch.position)

	def test_variadic_comes_first(self):
		mismatch = self.verifier.check(engine.MAP, VARIADIC, INT)
		self.assertEqual("variadic", mismatch.reason)
		self.assertEqual("(T)->U", mismatch.need)

	def test_zero_comes_last(self):
		self.assertIsNone(self.check(engine.FOLDR, [INT, FLOAT], [FLOAT], zero_type=FLOAT))
		mismatch = self.check(engine.FOLDR, [INT, FLOAT], [FLOAT], zero_type=STRING)
		self.assertEqual("zero", mismatch.reason)
		self.assertEqual(FLOAT, mismatch.need)
		self.assertEqual(STRING, mismatch.got)
		self.assertEqual("parameter", self.check(engine.FOLDR, [STRING, FLOAT], [FLOAT], zero_type=STRING).reason)

	def test_element_type_is_the_sequence_type(self):
		self.assertIsNone(self.check(engine.MAP, [ListType(INT)], [INT], element_type=ListType(INT)))
		self.assertEqual("parameter", self.check(engine.MAP, [ListType(FLOAT)], [INT], element_type=ListType(INT)).reason)

class Patterns(unittest.TestCase):
	def test_pattern_text(self):
		for required, text in (
			(engine.MAP, "(T)->U"),
			(engine.FILTER, "(T)->bool"),
			(engine.FOLDR, "(T,U)->U"),
			(engine.FOLDL, "(U,T)->U"),
			(engine.MAX, "(T,T)->bool"),
			(RequiredSignature("zip", "", (Unconstrained(), Element(), Unconstrained()), (Unconstrained(),)), "(U,T,V)->U"),
		):
			with self.subTest(required.name):
				self.assertEqual(text, Pattern(required).text())

class Complaints(unittest.TestCase):
	def test_signature_mismatch_details(self):
		with self.assertRaises(SignatureMismatch) as cm:
			Engine().filter([1, 2], Function(str, [INT], [STRING]))
		error = cm.exception
		self.assertEqual("filter", error.operation)
		self.assertEqual("result", error.reason)
		self.assertEqual(0, error.position)
		self.assertIs(BOOL, error.need)
		self.assertIs(STRING, error.got)
		text = error.as_text()
		self.assertTrue(text.startswith("illegal: function type and sequence type do not match in call to filter(seq: [T]"))
		self.assertIn("need: bool", text)
		self.assertIn("got: str", text)

class CallingConvention(unittest.TestCase):
	def test_declared_width_is_enforced(self):
		three = Function(lambda i: (i, i, i), [INT], [INT, INT])
		with self.assertRaises(ResultMismatch) as cm:
			three.invoke((1,))
		self.assertEqual("result", cm.exception.reason)
		self.assertEqual("illegal: function of type (int)->(int,int) returned 3 results in call to invoke", str(cm.exception))
		lone = Function(lambda i: i, [INT], [INT, INT])
		with self.assertRaises(ResultMismatch) as cm:
			lone.invoke((1,))
		self.assertIn("returned a single int", str(cm.exception))

	def test_declared_width_is_honoured(self):
		self.assertEqual([1, 2], Function(lambda i: (i, i + 1), [INT], [INT, INT]).invoke((1,)))
		self.assertEqual([], Function(lambda i: i, [INT], []).invoke((1,)))
		self.assertEqual([(1, 1)], Function(lambda i: (i, i), [INT], [ANY]).invoke((1,)))

class Reporting(unittest.TestCase):
	def engine(self, verbose):
		self.stream = io.StringIO()
		return Engine(Report(verbose=verbose, stream=self.stream))

	def test_quiet_by_default(self):
		it = self.engine(0)
		it.map([1], Function(str, [INT], [STRING]))
		with self.assertRaises(SignatureMismatch):
			it.map([1], Function(str, [STRING], [STRING]))
		self.assertEqual("", self.stream.getvalue())

	def test_verbose_engine_narrates(self):
		it = self.engine(1)
		it.map([1], Function(str, [INT], [STRING]))
		self.assertIn("map: (int)->str", self.stream.getvalue())

	def test_verbose_engine_explains_failure(self):
		it = self.engine(1)
		with self.assertRaises(NotConvertible):
			it.convert_slice([1.5], "")
		self.assertIn("illegal.convert_slice: cannot convert type float to str", self.stream.getvalue())

	def test_detail_needs_more_verbosity(self):
		report = Report(verbose=1, stream=io.StringIO())
		report.detail("hidden")
		self.assertEqual("", report._stream.getvalue())
		report = Report(verbose=2, stream=io.StringIO())
		report.detail("shown")
		self.assertEqual("shown\n", report._stream.getvalue())
		self.assertEqual(2, report.verbose)

class Capabilities(unittest.TestCase):
	class Greeter:
		def greet(self, name:str) -> str: ...
		def _private(self): ...

	def test_view_requires_every_method(self):
		with self.assertRaises(TypeError) as cm:
			Capability(self.Greeter).view(3)
		self.assertIn("greet", str(cm.exception))

	def test_methods_work_through_the_view(self):
		class English:
			def greet(self, name:str) -> str: return "Hello, " + name
		greeter = Capability(self.Greeter)
		self.assertEqual(frozenset({"greet"}), greeter.method_names())
		view = greeter.view(English())
		self.assertEqual(["Hello, Ann", "Hello, Bo"], Engine().map(Vector(STRING, ["Ann", "Bo"]), view.greet))
		with self.assertRaises(AttributeError):
			view.wave

class NoResultSentinel(unittest.TestCase):
	def test_singleton(self):
		self.assertFalse(NO_RESULT)
		self.assertEqual("NO_RESULT", repr(NO_RESULT))
		self.assertIs(NO_RESULT, type(NO_RESULT)())
		self.assertIs(NO_RESULT, pickle.loads(pickle.dumps(NO_RESULT)))

if __name__ == '__main__':
	unittest.main()
