import sys, random
from typing import Any

class Illegal(Exception):
	"""
	Root of the failure taxonomy. These are all programmer errors:
	the caller passed something whose shape the operation cannot accept.
	Nothing here is transient, so nothing here is retried.
	"""
	complaint = "illegal operation"

	def __init__(self, operation:str, need:Any=None, got:Any=None, generic:str=None):
		self.operation = operation
		self.need, self.got = need, got
		self.generic = generic
		super().__init__(self.headline())

	def headline(self) -> str:
		return "illegal: %s to %s"%(self.complaint, self.operation)

	def as_text(self) -> str:
		lines = [self.headline()]
		if self.need is not None: lines.append("   need: %s"%(self.need,))
		if self.got is not None: lines.append("    got: %s"%(self.got,))
		if self.generic: lines.append("  while: %s"%self.generic)
		return "\n".join(lines)

class NotASequence(Illegal):
	complaint = "passed non-sequence value"

class NotACallable(Illegal):
	complaint = "passed non-function value"

class SignatureMismatch(Illegal):
	""" Arity, parameter type, or result type disagrees with the operation's generic signature. """
	def __init__(self, operation:str, mismatch, generic:str):
		self.reason = mismatch.reason
		self.position = mismatch.position
		super().__init__(operation, mismatch.need, mismatch.got, generic)
	def headline(self) -> str:
		return "illegal: function type and sequence type do not match in call to %s"%self.generic

class ResultMismatch(SignatureMismatch):
	""" The callable's type promised some number of results, and it returned something else. """
	def headline(self) -> str:
		return "illegal: function of type %s returned %s in call to %s"%(self.generic, self.got, self.operation)

class ZeroTypeMismatch(Illegal):
	"""
	It's possible to have a perfectly valid folding function
	and still have a zero value of some other type.
	"""
	def headline(self) -> str:
		return "illegal: zero type and function return type do not match in call to %s"%self.generic

class NotConvertible(Illegal):
	def headline(self) -> str:
		return "illegal.%s: cannot convert type %s to %s"%(self.operation, self.got, self.need)

###############################################################################

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott", 'Heavens', 'Nuts', 'Rats',
	]
	resignations = [
		'That does not fit.',
		'The shapes disagree.',
		'I cannot call that.',
		'I will not guess what you meant.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Where the engine says what it's doing, if anybody asked.
	With verbose=0 this stays completely quiet; the exceptions
	carry everything a caller needs either way.
	"""
	def __init__(self, *, verbose:int=0, stream=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._stream = stream

	@property
	def verbose(self) -> int: return self._verbose

	def _emit(self, *args):
		print(*args, file=self._stream or sys.stderr)

	def info(self, *args):
		if self._verbose:
			self._emit(*args)

	def detail(self, *args):
		""" For per-element chatter, which only the very curious want. """
		if self._verbose > 1:
			self._emit(*args)

	def failed(self, error:Illegal):
		if self._verbose:
			self._emit(_outburst())
			self._emit(error.as_text())
