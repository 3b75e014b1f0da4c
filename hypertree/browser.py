# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Host adapter for browser runtimes (Pyodide), where the page document is reachable through the `js` module.
This is the only place where hypertree looks for an ambient document.
'''

from functools import lru_cache
from typing import Any

from .attrs import Listener
from .exceptions import NoAmbientDocumentError


class BrowserDocument:
  'A `DocumentContext` over a browser `document` object.'

  def __init__(self, document:Any) -> None:
    self.document = document

  def create_element(self, name:str) -> Any:
    return self.document.createElement(name)

  def create_text_node(self, text:str) -> Any:
    return self.document.createTextNode(text)

  def set_attribute(self, element:Any, key:str, value:str) -> None:
    element.setAttribute(key, value)

  def add_event_listener(self, element:Any, event:str, listener:Listener) -> None:
    # The proxy keeps the Python callable alive for as long as the listener is registered.
    from pyodide.ffi import create_proxy
    element.addEventListener(event, create_proxy(listener))

  def append_child(self, parent:Any, child:Any) -> None:
    parent.appendChild(child)


@lru_cache(maxsize=None)
def ambient_document() -> BrowserDocument:
  'Return the document of the hosting browser page. Raises `NoAmbientDocumentError` outside of a browser runtime.'
  try: import js
  except ImportError as e:
    raise NoAmbientDocumentError('no ambient document outside of a browser runtime; pass a document context explicitly, '
      'e.g. `materialize(node, MemoryDocument())`.') from e
  return BrowserDocument(js.document)
