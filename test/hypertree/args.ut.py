# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hypertree.args import classify, fmt_primitive, lax_children, resolve_args, ResolvedArgs, Shape
from utest import utest, utest_call, utest_val


utest(Shape.ABSENT, classify, None)
utest(Shape.PRIMITIVE, classify, 'x')
utest(Shape.PRIMITIVE, classify, 1)
utest(Shape.PRIMITIVE, classify, 1.5)
utest(Shape.PRIMITIVE, classify, False)
utest(Shape.MAPPING, classify, {'id': 'x'})
utest(Shape.SEQUENCE, classify, ['a'])
utest(Shape.SEQUENCE, classify, ())
utest(Shape.OTHER, classify, b'bytes')
utest(Shape.OTHER, classify, object())


# Rule table.
utest(ResolvedArgs({}, '', []), resolve_args)
utest(ResolvedArgs('text', '', []), resolve_args, 'text') # A leading string is never content.
utest(ResolvedArgs({}, '', ['a', 'b']), resolve_args, ['a', 'b'])
utest(ResolvedArgs('x', 'text', []), resolve_args, 'x', 'text')
utest(ResolvedArgs({'id': 'x'}, 'text', []), resolve_args, {'id': 'x'}, 'text')
utest(ResolvedArgs('.cls', 'text', ['c']), resolve_args, '.cls', 'text', ['c'])
utest(ResolvedArgs('.cls', '', ['c']), resolve_args, '.cls', ['c'])
utest(ResolvedArgs({'id': 'y'}, '', []), resolve_args, '#x', {'id': 'y'})
utest(ResolvedArgs({'id': 'y'}, '', ['a']), resolve_args, ['a'], {'id': 'y'})
utest(ResolvedArgs({}, '', ['b']), resolve_args, ['a'], ['b'])
utest(ResolvedArgs({}, '', ['c']), resolve_args, ['a'], ['b'], ['c'])
utest(ResolvedArgs({}, '', ['c']), resolve_args, ['a'], None, ['c'])
utest(ResolvedArgs({}, '1', []), resolve_args, None, 1)
utest(ResolvedArgs({}, 'true', []), resolve_args, None, True) # Booleans are lowercase, as in attribute values.
utest(ResolvedArgs('.a', 'false', []), resolve_args, '.a', False)
utest(ResolvedArgs({}, '', []), resolve_args, 5) # A leading non-string primitive has no role.
utest(ResolvedArgs('.a', 'b', []), resolve_args, '.a', 'b', 'c') # A trailing primitive has no role.
utest(ResolvedArgs('.a', 'b', []), resolve_args, '.a', 'b', {'id': 'c'}) # Nor does a trailing mapping.


utest(['1', '2.5', 'x', 'true'], lax_children, [1, 2.5, 'x', True])

utest('false', fmt_primitive, False)
utest('0', fmt_primitive, 0)


@utest_call
def test_children_copied():
  children = ['a']
  resolved = resolve_args(children)
  utest_val(['a'], resolved.children, 'children')
  utest_val(False, resolved.children is children, 'children is copy')
