# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Attribute normalization.

The attributes argument of an element constructor is either a selector string like `'#main.wide.dark'`,
or a mapping of attribute names to values.
Either form is normalized into a `ParsedAttrs`, which splits out the attributes that nodes store separately:
the id, the class list, the style mapping, and event listeners.
'''

from enum import Enum
from typing import Any, Callable, Iterator, Mapping, NamedTuple, Sequence

from .semantics import listener_prefix


Listener = Callable[..., Any]
Listeners = dict[str,list[Listener]]
Style = dict[str,str]


class SelectorToken(Enum):
  ID = '#'
  CLASS = '.'


_selector_markers = { t.value: t for t in SelectorToken }


class ParsedAttrs(NamedTuple):
  'The canonical shape of a normalized attributes argument.'
  id:str|None
  class_list:list[str]
  style:Style|None
  listeners:Listeners
  attrs:dict[str,Any]


def scan_selector(selector:str) -> Iterator[tuple[SelectorToken,str]]:
  '''
  Scan a selector string into (token, text) pairs.
  Each '#' or '.' marker starts a new segment that runs until the next marker or the end of the string.
  Text preceding the first marker is ignored, as are empty segments.
  '''
  token:SelectorToken|None = None
  start = 0
  for i, char in enumerate(selector):
    next_token = _selector_markers.get(char)
    if next_token is None: continue
    if token is not None and i > start:
      yield (token, selector[start:i])
    token = next_token
    start = i + 1
  if token is not None and len(selector) > start:
    yield (token, selector[start:])


def parse_selector(selector:str) -> ParsedAttrs:
  '''
  Parse a selector string.
  Only one id is allowed per element, so a later '#' segment replaces an earlier one.
  '''
  id:str|None = None
  class_list:list[str] = []
  for token, text in scan_selector(selector):
    if token is SelectorToken.ID: id = text
    else: class_list.append(text)
  return ParsedAttrs(id=id, class_list=class_list, style=None, listeners={}, attrs={})


def parse_attrs(attributes:str|Mapping[str,Any]) -> ParsedAttrs:
  '''
  Normalize a selector string or an attribute mapping into a `ParsedAttrs`.
  The input mapping is not mutated.

  Mapping keys are handled as follows:
  * `id`: string-coerced; a `None` value leaves the id unset.
  * `class`: a string is split on whitespace; a list or tuple is copied; None is no classes; any other value becomes a single class.
  * `style`: a mapping or a `'prop:value;...'` declaration string.
  * `on<event>` keys with a callable or a sequence of callables: accumulated into `listeners[event]`.
  * all other keys: copied into `attrs`; booleans and None are preserved for rendering, other values are string-coerced.
  '''
  if isinstance(attributes, str): return parse_selector(attributes)

  id:str|None = None
  class_list:list[str] = []
  style:Style|None = None
  listeners:Listeners = {}
  attrs:dict[str,Any] = {}
  for key, val in attributes.items():
    if key == 'id':
      id = None if val is None else str(val)
    elif key == 'class':
      class_list = parse_class(val)
    elif key == 'style':
      style = parse_style(val)
    elif (fns := _listener_fns(key, val)) is not None:
      listeners.setdefault(key[len(listener_prefix):], []).extend(fns)
    else:
      attrs[key] = val if val is None or isinstance(val, bool) else str(val)
  return ParsedAttrs(id=id, class_list=class_list, style=style, listeners=listeners, attrs=attrs)


def parse_class(val:Any) -> list[str]:
  if val is None: return []
  if isinstance(val, str): return val.split()
  if isinstance(val, (list, tuple)): return list(val)
  return [str(val)]


def parse_style(val:Any) -> Style|None:
  if val is None: return None
  if isinstance(val, str):
    style:Style = {}
    for decl in val.split(';'):
      prop, colon, value = decl.partition(':')
      prop = prop.strip()
      if prop and colon: style[prop] = value.strip()
    return style
  return { str(k): str(v) for k, v in val.items() }


def _listener_fns(key:str, val:Any) -> list[Listener]|None:
  'Return the listener functions for `key`/`val`, or None if the pair is not a listener registration.'
  if len(key) <= len(listener_prefix) or not key.startswith(listener_prefix): return None
  if callable(val): return [val]
  if isinstance(val, Sequence) and not isinstance(val, str) and val and all(callable(f) for f in val):
    return list(val)
  return None


def merge_attrs(base:ParsedAttrs, over:ParsedAttrs) -> ParsedAttrs:
  '''
  Merge two parsed attribute sets into a new one.
  The id of `over` wins when set; classes extend; style entries and plain attributes update; listeners accumulate.
  '''
  if over.style is None: style = base.style
  elif base.style is None: style = over.style
  else: style = {**base.style, **over.style}
  listeners = { event: list(fns) for event, fns in base.listeners.items() }
  for event, fns in over.listeners.items():
    listeners.setdefault(event, []).extend(fns)
  return ParsedAttrs(
    id=base.id if over.id is None else over.id,
    class_list=base.class_list + over.class_list,
    style=style,
    listeners=listeners,
    attrs={**base.attrs, **over.attrs})


def attr_key_for_kw(key:str) -> str:
  '''
  Convert a Python keyword argument name to an attribute name.
  A single trailing underscore is dropped so that reserved words can be passed (`class_`, `for_`),
  and remaining underscores become hyphens (`data_id` -> `data-id`).
  '''
  if key.endswith('_'): key = key[:-1]
  return key.replace('_', '-')


def parse_kw_attrs(kw_attrs:Mapping[str,Any]) -> ParsedAttrs:
  return parse_attrs({ attr_key_for_kw(k): v for k, v in kw_attrs.items() })
