# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Element constructors and the registry that maps tag names to them.
'''

from typing import Any, Iterable, Iterator

from .args import resolve_args
from .attrs import attr_key_for_kw, merge_attrs, parse_attrs, parse_kw_attrs
from .exceptions import ConflictingValues
from .node import Node
from .semantics import known_tags, void_tags as default_void_tags


def build_node(name:str, is_void:bool, one:Any, two:Any, three:Any, kw_attrs:dict[str,Any]) -> Node:
  'Resolve the constructor arguments, normalize the attributes, and build the node.'
  attributes, content, children = resolve_args(one, two, three)
  parsed = parse_attrs(attributes)
  if kw_attrs: parsed = merge_attrs(parsed, parse_kw_attrs(kw_attrs))
  return Node.new(name, is_void=is_void, id=parsed.id, class_list=parsed.class_list, style=parsed.style,
    listeners=parsed.listeners, attrs=parsed.attrs, content=content, children=children)


class ElementConstructor:
  '''
  Callable that builds nodes for a single tag.
  Accepts up to three positional arguments (see `args.resolve_args`), plus optional keyword attributes,
  which are merged over the positional attributes.
  '''

  __slots__ = ('name', 'is_void')

  def __init__(self, name:str, is_void:bool) -> None:
    self.name = name
    self.is_void = is_void

  def __repr__(self) -> str: return f'{type(self).__name__}({self.name!r}, is_void={self.is_void})'

  def __call__(self, one:Any=None, two:Any=None, three:Any=None, **kw_attrs:Any) -> Node:
    return build_node(self.name, self.is_void, one, two, three, kw_attrs)


class ElementRegistry:
  '''
  Maps tag names to element constructors.
  Constructors are available by item (`registry['my-widget']`) or by attribute (`registry.div`);
  attribute names follow the keyword convention, so `registry.del_` is the `del` constructor
  and `registry.font_face` is `font-face`.
  Entries are only ever added; an existing constructor is never replaced.
  '''

  def __init__(self, tags:Iterable[str]=known_tags, void_tags:frozenset[str]=default_void_tags) -> None:
    self.void_tags = void_tags
    self._constructors:dict[str,ElementConstructor] = {}
    for tag in tags: self.add_element(tag)


  def __repr__(self) -> str: return f'{type(self).__name__}(<{len(self)} tags>)'

  def __contains__(self, name:str) -> bool: return name in self._constructors

  def __getitem__(self, name:str) -> ElementConstructor: return self._constructors[name]

  def __iter__(self) -> Iterator[str]: return iter(self._constructors)

  def __len__(self) -> int: return len(self._constructors)


  def __getattr__(self, attr:str) -> ElementConstructor:
    if attr.startswith('_'): raise AttributeError(attr) # Do not confuse copy, pickle and friends.
    try: return self._constructors[attr_key_for_kw(attr)]
    except KeyError: pass
    raise AttributeError(f'{type(self).__name__} has no element named {attr!r}; use `add_element` or `create` for ad hoc tags.')


  def add_element(self, name:str, is_void:bool|None=None) -> ElementConstructor:
    '''
    Register a constructor for `name` and return it.
    If `is_void` is omitted, it is looked up from the registry's void tag set.
    Adding an existing name returns the existing constructor, unless `is_void` conflicts with it.
    '''
    if not name: raise ValueError('element name must be a non-empty string.')
    try: existing = self._constructors[name]
    except KeyError: pass
    else:
      if is_void is not None and is_void != existing.is_void:
        raise ConflictingValues(key=name, existing=existing.is_void, incoming=is_void)
      return existing
    if is_void is None: is_void = name in self.void_tags
    constructor = ElementConstructor(name, is_void)
    self._constructors[name] = constructor
    return constructor


  def is_void(self, name:str) -> bool:
    try: return self._constructors[name].is_void
    except KeyError: return name in self.void_tags


  def create(self, name:str, one:Any=None, two:Any=None, three:Any=None, **kw_attrs:Any) -> Node:
    'Build a node for an arbitrary tag name, registered or not, using the same argument convention as the constructors.'
    return build_node(name, self.is_void(name), one, two, three, kw_attrs)


html = ElementRegistry()


def create_element(name:str, one:Any=None, two:Any=None, three:Any=None, **kw_attrs:Any) -> Node:
  'Build a node for an arbitrary tag name using the default registry.'
  return html.create(name, one, two, three, **kw_attrs)
