"""
Build the primitive type table.
Also, the precomputed descriptors that every comparison leans on.
"""

from .calculus import AtomicType, ANY

literal_type_map = {}

def _built_in_type(name:str, python_type:type) -> AtomicType:
	typ = literal_type_map[python_type] = AtomicType(name, python_type)
	return typ

BOOL = _built_in_type("bool", bool)
INT = _built_in_type("int", int)
FLOAT = _built_in_type("float", float)
COMPLEX = _built_in_type("complex", complex)
STRING = _built_in_type("str", str)
BYTES = _built_in_type("bytes", bytes)
NONE = _built_in_type("none", type(None))

# The type of an empty interface: it holds anything, and matches only itself.
INTERFACE = ANY

def atom_for(python_type:type):
	""" Exact lookup: a bool is not an int, as far as this table cares. """
	return literal_type_map.get(python_type)
