# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`node` provides the `Node` class, the markup element record at the center of hypertree, and the whole-tree walkers.
'''

from enum import Enum
from itertools import chain
from typing import Any, Callable, final, Iterator, TypeVar, Union

from .attrs import Listener, Listeners, Style
from .exceptions import ConstructionError
from .semantics import void_tags


_T = TypeVar('_T')

NodeChild = Union[str,'Node']
NodeFn = Callable[['Node'],'Node']


@final
class _New(Enum):
  'Singleton token that only `Node.new` passes to the initializer.'
  _ = 0


class Node:
  '''
  A single markup element.

  Nodes are conceptually immutable once built; the exceptions are `on`, which accumulates event listeners,
  and the children replacement that `traverse` performs on the nodes it returns.
  The initializer cannot be called directly; use an element constructor (`tags.div(...)`), `create_element`, or `Node.new`.
  '''

  __slots__ = ('name', 'is_void', 'id', 'class_list', 'style', 'listeners', 'attrs', 'content', 'children')

  name:str
  is_void:bool
  id:str|None
  class_list:list[str]
  style:Style|None
  listeners:Listeners
  attrs:dict[str,Any]
  content:str|None
  children:list[NodeChild]

  def __init__(self, name:str, is_void:bool, id:str|None, class_list:list[str], style:Style|None, listeners:Listeners,
   attrs:dict[str,Any], content:str|None, children:list[NodeChild], _token:_New|None=None) -> None:
    if _token is not _New._:
      raise ConstructionError(f'Node({name!r}, ...) cannot be instantiated directly; '
        f'use an element constructor such as `tags.div(...)`, `create_element({name!r}, ...)`, or `Node.new({name!r}, ...)`.')
    self.name = name
    self.is_void = is_void
    self.id = id
    self.class_list = class_list
    self.style = style
    self.listeners = listeners
    self.attrs = attrs
    self.content = content
    self.children = children


  @classmethod
  def new(cls, name:str, *, is_void:bool|None=None, id:str|None=None, class_list:list[str]|None=None, style:Style|None=None,
   listeners:Listeners|None=None, attrs:dict[str,Any]|None=None, content:str|None='', children:list[NodeChild]|None=None) -> 'Node':
    '''
    The designated factory for nodes.
    Note: collection arguments are used by reference, not copied; `freeze` relies on this to share fields.
    If `is_void` is omitted it is looked up from the void tag set.
    '''
    if not name: raise ValueError('Node name must be a non-empty string.')
    return cls(name,
      is_void=(name in void_tags) if is_void is None else is_void,
      id=id,
      class_list=[] if class_list is None else class_list,
      style=style,
      listeners={} if listeners is None else listeners,
      attrs={} if attrs is None else attrs,
      content=content,
      children=[] if children is None else children,
      _token=_New._)


  def __eq__(self, other:Any) -> bool:
    if not isinstance(other, Node): return NotImplemented
    return all(getattr(self, k) == getattr(other, k) for k in self.__slots__)

  __hash__ = None # type: ignore[assignment] # Nodes are mutable through `on`.


  def __repr__(self) -> str: return f'Node{self}'


  def __str__(self) -> str:
    words = ''.join(chain(self._attr_words(all_attrs=False), (_child_summary(c) for c in self.children)))
    return f'<{self.name}:{words}>'


  def _attr_words(self, all_attrs:bool) -> Iterator[str]:
    if self.id is not None: yield f' id={self.id!r}'
    if self.class_list: yield f' class={self.class_list!r}'
    if self.style is not None: yield f' style={self.style!r}' if all_attrs else ' style=…'
    for event, fns in self.listeners.items():
      yield f' on{event}={len(fns)}'
    for k, v in self.attrs.items():
      yield f' {k}={v!r}' if all_attrs else f' {k}=…'
    if self.content: yield f' {_repr_lim(self.content)}'


  def summarize(self, levels=1, indent=0) -> str:
    'Return a multi-line outline of the tree, descending `levels` levels.'
    nl_indent = '\n' + '  ' * indent
    return ''.join(self._summarize(levels, nl_indent))

  def _summarize(self, levels:int, nl_indent:str) -> Iterator[str]:
    if levels == 0:
      yield str(self)
      return
    nl_indent1 = nl_indent + '  '
    yield f'<{self.name}:{"".join(self._attr_words(all_attrs=True))}'
    for c in self.children:
      yield nl_indent1
      if isinstance(c, Node): yield from c._summarize(levels-1, nl_indent1)
      else: yield repr(c)
    yield '>'


  # Tree walking.

  def freeze(self) -> 'Node':
    'Return a shallow copy of the node with no children. All other fields are shared with the original.'
    return Node.new(self.name, is_void=self.is_void, id=self.id, class_list=self.class_list, style=self.style,
      listeners=self.listeners, attrs=self.attrs, content=self.content)


  def transform(self, fn:Callable[['Node'],_T]) -> list[Any]:
    '''
    Transform the tree into a nested list: `[fn(frozen_self), transform(child0), transform(child1), ...]`.
    Each node is passed to `fn` frozen, i.e. without its children, so that `fn` cannot alter the tree;
    all children are still visited. Text children appear in the list verbatim.
    '''
    return [fn(self.freeze()), *(c.transform(fn) if isinstance(c, Node) else c for c in self.children)]


  def to_list(self) -> list[Any]:
    'Turn the tree into a nested list, with each node frozen and its children represented as sub-lists.'
    return self.transform(_identity)


  def traverse(self, fn:NodeFn) -> 'Node':
    '''
    Apply `fn` to each frozen node in the tree, returning a new tree assembled from the results.
    `fn` never observes children: the children of each result are set afterwards to the traversed original children.
    Reference fields of the results (style, listeners, attrs) are shared with whatever `fn` returned.
    '''
    root = fn(self.freeze())
    root.children = [c.traverse(fn) if isinstance(c, Node) else c for c in self.children]
    return root


  def on(self, event:str, listener:Listener) -> 'Node':
    'Register `listener` for `event`, accumulating with any existing listeners. Returns the same node for chaining.'
    self.listeners.setdefault(event, []).append(listener)
    return self


  # Output.

  def render(self) -> str:
    from .render import render
    return render(self)


  def to_dom(self, document:Any=None) -> Any:
    from .dom import materialize
    return materialize(self, document)


freeze = Node.freeze
transform = Node.transform
to_list = Node.to_list
traverse = Node.traverse
on = Node.on


def _identity(node:Node) -> Node: return node


def _child_summary(child:NodeChild) -> str:
  if isinstance(child, Node): return ' ' + child.name
  return ' ' + _repr_lim(child)


def _repr_lim(text:str, limit=32) -> str:
  r = repr(text)
  return r if len(r) <= limit else r[:limit-1] + '…'
