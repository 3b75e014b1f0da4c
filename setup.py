# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='hypertree',
  version='0.0.1',
  description='Hypertree builds HTML element trees with plain function calls, renders them, and materializes them into documents.',
  license='CC0-1.0',
  python_requires='>=3.10',

  packages=['hypertree', 'utest'],
  extras_require={
    # `pyodide.ffi` wraps event listeners when materializing into a browser page.
    'browser': ['pyodide-py'],
  },
)
