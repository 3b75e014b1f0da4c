# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Various exception classes.
'''

from typing import Any


class ConflictingValues(KeyError):
  '''
  Raised when an incoming value collides with an existing value.
  In one sense, it is similar to both a key error and a value error.
  Since it arises from a key lookup, it subclasses KeyError.
  '''
  def __init__(self, *, key:Any, existing:Any, incoming:Any) -> None:
    self.key = key
    self.existing = existing
    self.incoming = incoming
    super().__init__(key) # Initialized like a KeyError.


class ConstructionError(TypeError):
  '''
  Raised when a `Node` is instantiated directly.
  Nodes must be built by an element constructor (e.g. `tags.div(...)`), `create_element`, or `Node.new`,
  so that arguments and attributes are always normalized.
  '''


class NoAmbientDocumentError(RuntimeError):
  'Raised when a node is materialized without a document outside of a browser runtime.'
