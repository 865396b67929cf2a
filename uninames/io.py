# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Diagnostic and output printing for uninames tools.
Loader and builder notes go to std err; command results go to std out.
'''

from sys import stderr
from typing import Any


def outSL(*items:Any, flush=False) -> None:
  "Write `items` to std out; sep=' ', end='\\n'."
  print(*items, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)

def errSL(*items:Any, flush=False) -> None:
  "Write `items` to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)
