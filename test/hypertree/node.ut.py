# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hypertree import ConstructionError, freeze, html, Node, on, to_list, transform, traverse
from utest import utest, utest_call, utest_exc, utest_repr, utest_val


def on_a() -> None: pass
def on_b() -> None: pass


utest_exc(ConstructionError, Node, 'div', False, None, [], None, {}, {}, '', [])
utest_exc(ValueError, Node.new, '')

utest(True, lambda: Node.new('br').is_void)
utest(False, lambda: Node.new('div').is_void)
utest(True, lambda: Node.new('div', is_void=True).is_void)
utest(html.div(), Node.new, 'div')
utest(html.p('#x.a', 'hi'), Node.new, 'p', id='x', class_list=['a'], content='hi')

utest_repr("Node<div: id='x' class=['a'] 'hi'>", html.div, '#x.a', 'hi')
utest_repr("Node<a: href=… p 'tail'>", html.a, {'href': '/'}, [html.p(), 'tail'])


@utest_call
def test_summarize():
  tree = html.div('#x', [html.p({}, 'a'), 'b'])
  utest_val("<div: id='x'\n  <p: 'a'>\n  'b'>", tree.summarize(), 'summarize')


@utest_call
def test_eq():
  utest_val(html.div('#x.a', 'hi', [html.br()]), html.div({'id': 'x', 'class': 'a'}, 'hi', [html.br()]), 'equivalent constructions')
  utest_val(False, html.div('#x') == html.div('#y'), 'different ids')
  utest_val(False, html.div() == html.span(), 'different names')
  utest_val(False, html.div() == 'div', 'not a node')


@utest_call
def test_freeze():
  leaf = html.p('.lead', 'Hello')
  tree = html.div({'id': 'main', 'style': {'color': 'red'}, 'title': 't'}, [leaf])
  frozen = freeze(tree)
  utest_val([], frozen.children, 'frozen children')
  utest_val([leaf], tree.children, 'original children')
  utest_val(False, frozen is tree, 'frozen is new node')
  utest_val(True, frozen.attrs is tree.attrs, 'attrs shared')
  utest_val(True, frozen.style is tree.style, 'style shared')
  utest_val(True, frozen.class_list is tree.class_list, 'class list shared')
  utest_val(True, frozen.listeners is tree.listeners, 'listeners shared')
  utest_val(html.div({'id': 'main', 'style': {'color': 'red'}, 'title': 't'}), frozen, 'frozen fields')
  utest_val(frozen, tree.freeze(), 'method')


@utest_call
def test_transform():
  leaf = html.p('.lead', 'Hello')
  tree = html.div('#main', [leaf, 'tail', html.ul([html.li({}, '1'), html.li({}, '2')])])
  children = list(tree.children)

  utest_val(['div', ['p'], 'tail', ['ul', ['li'], ['li']]], transform(tree, lambda n: n.name), 'names')
  utest_val([html.div('#main'), [html.p('.lead', 'Hello')], 'tail', [html.ul(), [html.li({}, '1')], [html.li({}, '2')]]],
    to_list(tree), 'to_list')
  utest_val(to_list(tree), tree.to_list(), 'to_list is repeatable')
  utest_val(children, tree.children, 'children unchanged')
  utest_val(True, tree.children[0] is leaf, 'child identity unchanged')
  utest_val([html.p('.lead', 'Hello')], leaf.to_list(), 'leaf')

  seen_children:list[int] = []
  transform(tree, lambda n: seen_children.append(len(n.children)))
  utest_val([0, 0, 0, 0, 0], seen_children, 'fn sees frozen nodes')


@utest_call
def test_traverse_identity():
  leaf = html.p('.lead', 'Hello')
  tree = html.div({'id': 'main', 'title': 't'}, [leaf, 'tail'])
  copy = traverse(tree, lambda n: n)
  utest_val(tree, copy, 'equal')
  utest_val(False, copy is tree, 'root distinct')
  utest_val(False, copy.children[0] is leaf, 'child distinct')
  utest_val(False, copy.children is tree.children, 'children list distinct')
  utest_val(True, copy.attrs is tree.attrs, 'attrs shared')
  utest_val([leaf, 'tail'], tree.children, 'source children unchanged')


@utest_call
def test_traverse_mapping():
  tree = html.div('#main', [html.p({}, 'a'), html.section([html.p({}, 'b')])])
  seen_children:list[int] = []

  def rename(node:Node) -> Node:
    seen_children.append(len(node.children))
    if node.name != 'p': return node
    return html.span({'title': node.content}, node.content.upper())

  result = tree.traverse(rename)
  utest_val(html.div('#main', [html.span({'title': 'a'}, 'A'), html.section([html.span({'title': 'b'}, 'B')])]), result, 'renamed')
  utest_val([0, 0, 0, 0], seen_children, 'fn never sees children')
  utest_val('p', tree.children[0].name, 'source unchanged')


@utest_call
def test_on():
  button = html.button({}, 'Go')
  utest_val(True, on(button, 'click', on_a) is button, 'returns same node')
  on(button, 'click', on_b)
  utest_val({'click': [on_a, on_b]}, button.listeners, 'accumulated')

  chained = html.button({'onclick': on_a}).on('click', on_b).on('keyup', on_a)
  utest_val({'click': [on_a, on_b], 'keyup': [on_a]}, chained.listeners, 'chained')
