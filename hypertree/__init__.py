# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
hypertree builds markup trees with ordinary function calls, renders them to HTML, and materializes them into documents.

  from hypertree import html, render
  page = html.div('#main.wide', [html.h1('.title', 'Title'), html.p({'class': 'lead'}, 'Hello.'), html.br()])
  render(page) # '<div id="main" class="wide"><h1 class="title">Title</h1><p class="lead">Hello.</p><br></div>'
'''

from .dom import append_list_to_dom, DocumentContext, materialize, MemoryDocument, MemoryElement, MemoryText, RecordingDocument
from .exceptions import ConflictingValues, ConstructionError, NoAmbientDocumentError
from .node import freeze, Node, on, to_list, transform, traverse
from .registry import create_element, ElementConstructor, ElementRegistry, html
from .render import esc, render, render_list
from .semantics import boolean_attrs, known_tags, void_tags
