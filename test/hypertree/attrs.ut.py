# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hypertree.attrs import (attr_key_for_kw, merge_attrs, parse_attrs, parse_class, parse_kw_attrs, parse_selector,
  parse_style, ParsedAttrs, scan_selector, SelectorToken)
from utest import utest, utest_call, utest_seq, utest_val


ID = SelectorToken.ID
CLASS = SelectorToken.CLASS

def on_a() -> None: pass
def on_b() -> None: pass


utest_seq([], scan_selector, '')
utest_seq([], scan_selector, 'div')
utest_seq([], scan_selector, '#.')
utest_seq([(ID, 'main')], scan_selector, '#main')
utest_seq([(ID, 'x'), (CLASS, 'y')], scan_selector, 'div#x.y') # Leading tag text is ignored.
utest_seq([(CLASS, 'a'), (ID, 'b'), (CLASS, 'c')], scan_selector, '.a#b.c')
utest_seq([(CLASS, 'a'), (CLASS, 'b')], scan_selector, '..a..b.')


def sel(id:str|None, *classes:str) -> ParsedAttrs:
  return ParsedAttrs(id=id, class_list=list(classes), style=None, listeners={}, attrs={})

utest(sel(None), parse_selector, '')
utest(sel('x'), parse_selector, '#x')
utest(sel(None, 'a', 'b'), parse_selector, '.a.b')
utest(sel('c', 'b', 'd'), parse_selector, '#a.b#c.d') # Last id wins; classes in encounter order.
utest(sel('x', 'a', 'a'), parse_selector, '.a#x.a') # Classes are not deduplicated.

utest(sel('x', 'a'), parse_attrs, '#x.a')


utest(['a', 'b'], parse_class, ' a  b ')
utest(['a', 'b c'], parse_class, ['a', 'b c'])
utest(['a'], parse_class, ('a',))
utest(['5'], parse_class, 5)
utest([], parse_class, None)

utest(None, parse_style, None)
utest({'color': 'red', 'margin': '0'}, parse_style, {'color': 'red', 'margin': 0})
utest({'color': 'red', 'margin': '0 auto'}, parse_style, 'color: red; margin:0 auto;;bogus')


utest(ParsedAttrs(id='3', class_list=['a', 'b'], style={'color': 'red'}, listeners={'click': [on_a]},
  attrs={'title': 't', 'disabled': True, 'tabindex': '2'}),
  parse_attrs, {'id': 3, 'class': 'a b', 'style': {'color': 'red'}, 'onclick': on_a, 'title': 't', 'disabled': True, 'tabindex': 2})

utest(ParsedAttrs(id=None, class_list=[], style=None, listeners={'click': [on_a, on_b], 'keyup': [on_b]}, attrs={}),
  parse_attrs, {'onclick': [on_a, on_b], 'onkeyup': on_b})

# Keys that look like listeners but do not carry functions are plain attributes.
utest(ParsedAttrs(id=None, class_list=[], style=None, listeners={}, attrs={'onclick': 'go()', 'on': 'x', 'onkeyup': '[]'}),
  parse_attrs, {'onclick': 'go()', 'on': 'x', 'onkeyup': []})

utest(sel(None), parse_attrs, {'id': None})
utest(ParsedAttrs(id=None, class_list=[], style=None, listeners={}, attrs={'title': None, 'open': False}), parse_attrs, {'title': None, 'open': False})


@utest_call
def test_parse_attrs_pure():
  classes = ['a']
  src = {'id': 'x', 'class': classes, 'onclick': on_a, 'href': '/'}
  parsed = parse_attrs(src)
  utest_val({'id': 'x', 'class': ['a'], 'onclick': on_a, 'href': '/'}, src, 'source mapping')
  utest_val(False, parsed.class_list is classes, 'class list is copy')
  parsed.class_list.append('b')
  utest_val(['a'], classes, 'source class list')


utest('class', attr_key_for_kw, 'class_')
utest('for', attr_key_for_kw, 'for_')
utest('data-id', attr_key_for_kw, 'data_id')
utest('aria-hidden', attr_key_for_kw, 'aria_hidden')
utest('href', attr_key_for_kw, 'href')

utest(ParsedAttrs(id=None, class_list=['a'], style=None, listeners={}, attrs={'for': 'name', 'data-id': '3'}),
  parse_kw_attrs, {'class_': 'a', 'for_': 'name', 'data_id': 3})


@utest_call
def test_merge_attrs():
  base = ParsedAttrs(id='x', class_list=['a'], style={'color': 'red'}, listeners={'click': [on_a]}, attrs={'title': 't', 'lang': 'en'})
  over = ParsedAttrs(id=None, class_list=['b'], style={'margin': '0'}, listeners={'click': [on_b]}, attrs={'title': 'u'})
  merged = merge_attrs(base, over)
  utest_val(ParsedAttrs(id='x', class_list=['a', 'b'], style={'color': 'red', 'margin': '0'}, listeners={'click': [on_a, on_b]},
    attrs={'title': 'u', 'lang': 'en'}), merged, 'merged')
  utest_val([on_a], base.listeners['click'], 'base listeners unchanged')
  utest_val('y', merge_attrs(base, sel('y')).id, 'id override')
  utest_val({'color': 'red'}, merge_attrs(base, sel(None)).style, 'style kept')
