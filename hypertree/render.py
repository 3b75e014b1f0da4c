# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML serialization of node trees.
'''

import re
from typing import Any, Iterable, Iterator

from .args import fmt_primitive
from .node import Node
from .semantics import is_boolean_attr


_esc_chars = {
  '&': '&amp;',
  '<': '&lt;',
  '>': '&gt;',
  '"': '&quot;',
  "'": '&apos;',
}

_esc_re = re.compile('[&<>"\']')


def esc(text:Any) -> str:
  'HTML-escape the string form of `text` in a single pass, so that existing entities are escaped exactly once.'
  return _esc_re.sub(lambda m: _esc_chars[m[0]], str(text))


def fmt_style(style:dict[str,str]) -> str:
  return ''.join(f'{prop}:{val};' for prop, val in style.items())


def fmt_attr_val(val:Any) -> str:
  'Format a plain attribute value. Booleans and None are rendered lowercase, like their JSON counterparts.'
  if val is None: return 'none'
  return fmt_primitive(val)


def boolean_attr_val(key:str, val:Any) -> str|None:
  '''
  Apply the boolean attribute rule: for a boolean attribute key, `True` yields the key itself as the value,
  and `False` yields None, meaning that the attribute is omitted.
  All other cases yield the formatted value.
  '''
  if is_boolean_attr(key):
    if val is True: return key
    if val is False: return None
  return fmt_attr_val(val)


def fmt_attrs(node:Node) -> str:
  'Return a string that is either empty or with a leading space, containing all of the formatted attributes.'
  parts:list[str] = []
  if node.id is not None: parts.append(f' id="{esc(node.id)}"')
  if node.class_list: parts.append(f' class="{esc(" ".join(node.class_list))}"')
  if node.style is not None: parts.append(f' style="{esc(fmt_style(node.style))}"')
  for k, v in node.attrs.items():
    val = boolean_attr_val(k, v)
    if val is None: continue
    parts.append(f' {k}="{esc(val)}"')
  return ''.join(parts)


def render_iter(node:Node) -> Iterator[str]:
  'Render the tree as a stream of string fragments.'
  yield f'<{node.name}{fmt_attrs(node)}>'
  # A void element is closed only when it has content or children to show.
  if node.is_void and not node.children and not node.content: return
  if node.content: yield esc(node.content)
  for child in node.children:
    if isinstance(child, str): yield esc(child)
    elif isinstance(child, Node): yield from render_iter(child)
    else: raise TypeError(f'invalid child type: {type(child)!r}; value: {child!r}') # Expected str or Node.
  yield f'</{node.name}>'


def render(node:Node) -> str:
  'Render the tree into a single HTML string.'
  return ''.join(render_iter(node))


def render_list(nodes:Iterable[Node]) -> str:
  'Render a sequence of trees into a single HTML string, with no separators.'
  return ''.join(render(node) for node in nodes)
