"""
The most-fundamental classes are separate from the rest to avoid
various circular-import scenarios. Anything that wants to take part
in generic operations on its own terms, rather than being inspected
from the outside, implements this one small interface.
"""
from abc import ABC, abstractmethod
from typing import Sequence, Hashable
from .calculus import ValueType, ANY, is_equivalent
from .diagnostics import NotConvertible, NotACallable

class Participant(ABC):
	@abstractmethod
	def describe(self) -> "Shape":
		""" Return the run-time shape of this value. Must not raise. """

	def convert(self, target:ValueType, operation:str="convert"):
		""" Return this value as a value of the target type, or raise NotConvertible on behalf of the operation. """
		mine = self.describe().value_type
		if target is ANY or is_equivalent(mine, target): return self
		raise NotConvertible(operation, need=target, got=mine)

	def invoke(self, args:Sequence) -> list:
		""" Call this value with positional arguments and return the list of its results. """
		raise NotACallable("invoke", need="a callable", got=self.describe().value_type)

	def identity(self) -> Hashable:
		""" What two callables must share to count as the same function. """
		return self
