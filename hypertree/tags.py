# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The element constructors of the default registry, as module attributes:

  from hypertree.tags import div, p, br
  div('#main.wide', [p('.lead', 'Hello.'), br()])

Reserved words take a trailing underscore (`del_`), and hyphenated names of added elements use underscores.
'''

from keyword import iskeyword as _iskeyword
from typing import Iterable as _Iterable

from . import registry as _registry

# Note: this module's own globals are kept private, so that every public name resolves to a constructor, including `html`.


def __getattr__(attr:str) -> _registry.ElementConstructor:
  try: return getattr(_registry.html, attr)
  except AttributeError: pass
  raise AttributeError(f'module {__name__!r} has no element named {attr!r}')


def __dir__() -> _Iterable[str]:
  names = (n.replace('-', '_') for n in _registry.html)
  return [n + '_' if _iskeyword(n) else n for n in names if n.isidentifier()]
