# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Argument resolution for element constructors.

Every constructor takes up to three positional arguments, and the role of each is decided by its shape and position.
A leading string is always a selector, never content: `div('.cls', 'text')`, `div({'id': 'x'}, 'text')`,
`div([child1, child2])` and `div('.cls', 'text', [child])` are the typical call forms.
'''

from enum import Enum
from typing import Any, Mapping, NamedTuple, Sequence


class Shape(Enum):
  ABSENT = 'absent'
  PRIMITIVE = 'primitive'
  MAPPING = 'mapping'
  SEQUENCE = 'sequence'
  OTHER = 'other'


primitive_types = (str, int, float, bool)
_lax_child_types = (int, float) # Converted to `str` when passed as children; includes `bool`.


def classify(val:Any) -> Shape:
  if val is None: return Shape.ABSENT
  if isinstance(val, primitive_types): return Shape.PRIMITIVE
  if isinstance(val, Mapping): return Shape.MAPPING
  if isinstance(val, Sequence) and not isinstance(val, (bytes, bytearray)): return Shape.SEQUENCE
  return Shape.OTHER


class ResolvedArgs(NamedTuple):
  attributes:str|Mapping[str,Any]
  content:str
  children:list[Any]


def resolve_args(one:Any=None, two:Any=None, three:Any=None) -> ResolvedArgs:
  '''
  Assign the three positional constructor arguments to the attributes, content and children roles.
  The rules are applied in order; later rules override earlier ones:
  * `one` is a string or mapping: attributes; otherwise `one` is a sequence: children.
  * `two` is a primitive: content; otherwise a mapping: attributes; otherwise a sequence: children.
  * `three` is a sequence: children.
  Unassigned roles default to no attributes, empty content and no children.
  '''
  attributes:str|Mapping[str,Any] = {}
  content = ''
  children:Sequence[Any] = ()

  shape_one = classify(one)
  if isinstance(one, str) or shape_one is Shape.MAPPING: attributes = one
  elif shape_one is Shape.SEQUENCE: children = one

  shape_two = classify(two)
  if shape_two is Shape.PRIMITIVE: content = fmt_primitive(two)
  elif shape_two is Shape.MAPPING: attributes = two
  elif shape_two is Shape.SEQUENCE: children = two

  if classify(three) is Shape.SEQUENCE: children = three

  return ResolvedArgs(attributes=attributes, content=content, children=lax_children(children))


def lax_children(children:Sequence[Any]) -> list[Any]:
  'Copy `children` into a new list, converting numeric and boolean children to strings.'
  return [fmt_primitive(c) if isinstance(c, _lax_child_types) else c for c in children]


def fmt_primitive(val:Any) -> str:
  'Format a primitive as text. Booleans are lowercase, matching how attribute values render.'
  if isinstance(val, bool): return str(val).lower()
  return str(val)
