#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, pathsep, walk
from os.path import isfile, join as path_join, relpath
from subprocess import run
from sys import executable
from typing import Iterator

from hypertree.io import errL


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to  "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()
  paths = list(walk_test_files(*args.paths))

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  # Tests run from the build directory, so make the working tree importable.
  env['PYTHONPATH'] = pathsep.join(filter(None, [getcwd(), env.get('PYTHONPATH')]))

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  failed:list[str] = []
  for path in paths:
    print(path)
    exe_path = relpath(path, utest_cwd)
    c = run([executable, exe_path], cwd=utest_cwd, env=env).returncode
    if c != 0:
      failed.append(path)
      print()

  if failed: errL(f'utest: {len(failed)} of {len(paths)} test files failed.')
  exit(1 if failed else 0)


def walk_test_files(*paths:str) -> Iterator[str]:
  for path in paths:
    if isfile(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
