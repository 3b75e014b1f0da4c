# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Materialization of node trees into host documents.

The bridge talks to a document only through the narrow `DocumentContext` capability.
`MemoryDocument` is an in-process implementation for targets without a browser;
`RecordingDocument` additionally records every capability call, which is useful for tests and debugging.
'''

from os import environ
from sys import stderr
from typing import Any, Iterable, Protocol, TextIO

from .attrs import Listener
from .io import writeSL
from .node import Node
from .render import boolean_attr_val, esc, fmt_style
from .semantics import void_tags


class DocumentContext(Protocol):
  'The document capabilities used by `materialize`.'

  def create_element(self, name:str) -> Any: ...

  def create_text_node(self, text:str) -> Any: ...

  def set_attribute(self, element:Any, key:str, value:str) -> None: ...

  def add_event_listener(self, element:Any, event:str, listener:Listener) -> None: ...

  def append_child(self, parent:Any, child:Any) -> None: ...


def materialize(node:Node, document:DocumentContext|None=None) -> Any:
  '''
  Convert a node tree into a tree of host document nodes and return the root element, unattached.
  If `document` is omitted, the ambient browser document is used; outside of a browser this raises `NoAmbientDocumentError`.
  Work is performed depth-first, pre-order: each element is fully set up before its children are appended.
  '''
  if document is None:
    from .browser import ambient_document
    document = ambient_document()
  return _materialize(node, document)


def _materialize(node:Node, document:DocumentContext) -> Any:
  element = document.create_element(node.name)
  if isinstance(element, MemoryElement): element.is_void = node.is_void

  for k, v in node.attrs.items():
    val = boolean_attr_val(k, v)
    if val is None: continue
    document.set_attribute(element, k, val)

  if node.id is not None:
    element.id = node.id
  if node.class_list:
    element.className = ' '.join(node.class_list)
  if node.style is not None:
    document.set_attribute(element, 'style', fmt_style(node.style))

  for event, listeners in node.listeners.items():
    for listener in listeners:
      document.add_event_listener(element, event, listener)

  if node.content is not None:
    document.append_child(element, document.create_text_node(node.content))

  for child in node.children:
    if isinstance(child, str): dom_child = document.create_text_node(child)
    elif isinstance(child, Node): dom_child = _materialize(child, document)
    else: raise TypeError(f'invalid child type: {type(child)!r}; value: {child!r}') # Expected str or Node.
    document.append_child(element, dom_child)

  return element


def append_list_to_dom(parent:Any, nodes:Iterable[Node], document:DocumentContext|None=None) -> None:
  'Materialize each node and append it to the host element `parent`, in order.'
  if document is None:
    from .browser import ambient_document
    document = ambient_document()
  for node in nodes:
    document.append_child(parent, _materialize(node, document))


# In-memory documents.

class MemoryText:
  node_name = '#text'

  def __init__(self, data:str) -> None:
    self.data = data

  def __repr__(self) -> str: return f'{type(self).__name__}({self.data!r})'

  def outer_html(self) -> str: return esc(self.data)


class MemoryElement:
  '''
  A minimal element for `MemoryDocument`.
  `id` and `className` are properties, mirroring the browser DOM, so that the owning document can observe assignments.
  '''

  def __init__(self, name:str, document:'MemoryDocument') -> None:
    self.node_name = name
    self.document = document
    self.is_void = name in void_tags
    self._id = ''
    self._class_name = ''
    self.attributes:dict[str,str] = {}
    self.listeners:dict[str,list[Listener]] = {}
    self.child_nodes:list[MemoryElement|MemoryText] = []

  def __repr__(self) -> str: return f'{type(self).__name__}({self.node_name!r})'

  @property
  def id(self) -> str: return self._id

  @id.setter
  def id(self, val:str) -> None:
    self._id = val
    self.document.did_set_property(self, 'id', val)

  @property
  def className(self) -> str: return self._class_name

  @className.setter
  def className(self, val:str) -> None:
    self._class_name = val
    self.document.did_set_property(self, 'className', val)


  def dispatch_event(self, event:str, *args:Any) -> None:
    'Call each listener registered for `event` with `args`, in registration order.'
    for listener in self.listeners.get(event, ()):
      listener(*args)


  def outer_html(self) -> str:
    parts = [f'<{self.node_name}']
    if self._id: parts.append(f' id="{esc(self._id)}"')
    if self._class_name: parts.append(f' class="{esc(self._class_name)}"')
    style = self.attributes.get('style')
    if style is not None: parts.append(f' style="{esc(style)}"')
    parts.extend(f' {k}="{esc(v)}"' for k, v in self.attributes.items() if k != 'style')
    parts.append('>')
    inner = ''.join(c.outer_html() for c in self.child_nodes)
    if self.is_void and not inner: return ''.join(parts)
    parts.append(inner)
    parts.append(f'</{self.node_name}>')
    return ''.join(parts)


class MemoryDocument:
  'A `DocumentContext` that builds `MemoryElement` trees.'

  def create_element(self, name:str) -> MemoryElement:
    return MemoryElement(name, document=self)

  def create_text_node(self, text:str) -> MemoryText:
    return MemoryText(text)

  def set_attribute(self, element:MemoryElement, key:str, value:str) -> None:
    element.attributes[key] = value

  def add_event_listener(self, element:MemoryElement, event:str, listener:Listener) -> None:
    element.listeners.setdefault(event, []).append(listener)

  def append_child(self, parent:MemoryElement, child:MemoryElement|MemoryText) -> None:
    parent.child_nodes.append(child)

  def did_set_property(self, element:MemoryElement, key:str, value:str) -> None:
    'Hook called when an element property is assigned.'


class RecordingDocument(MemoryDocument):
  '''
  A `MemoryDocument` that records each capability call and property assignment as a tuple in `calls`.
  Elements are identified in the tuples by tag name, and text nodes by '#text'.
  If `trace` is true, each call is also written to `trace_file` as it happens;
  when `trace` is omitted, it defaults to the truthiness of the `HYPERTREE_TRACE_DOM` environment variable.
  '''

  def __init__(self, trace:bool|None=None, trace_file:TextIO=stderr) -> None:
    self.calls:list[tuple[Any,...]] = []
    self.trace = bool(environ.get('HYPERTREE_TRACE_DOM')) if trace is None else trace
    self.trace_file = trace_file

  def _record(self, *call:Any) -> None:
    self.calls.append(call)
    if self.trace: writeSL(self.trace_file, 'hypertree.dom:', *(repr(el) for el in call))

  def create_element(self, name:str) -> MemoryElement:
    self._record('create_element', name)
    return super().create_element(name)

  def create_text_node(self, text:str) -> MemoryText:
    self._record('create_text_node', text)
    return super().create_text_node(text)

  def set_attribute(self, element:MemoryElement, key:str, value:str) -> None:
    self._record('set_attribute', element.node_name, key, value)
    super().set_attribute(element, key, value)

  def add_event_listener(self, element:MemoryElement, event:str, listener:Listener) -> None:
    self._record('add_event_listener', element.node_name, event, listener)
    super().add_event_listener(element, event, listener)

  def append_child(self, parent:MemoryElement, child:MemoryElement|MemoryText) -> None:
    self._record('append_child', parent.node_name, child.node_name)
    super().append_child(parent, child)

  def did_set_property(self, element:MemoryElement, key:str, value:str) -> None:
    self._record('set_property', element.node_name, key, value)
