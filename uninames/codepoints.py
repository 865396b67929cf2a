# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Code point coercion, formatting and range utilities.
Name tables store inclusive (low, high) ranges, as the UCD files list them.
'''

from typing import Any, Iterable, Iterator, Optional, Tuple


CodeRange = Tuple[int, int] # Inclusive (low, high).
CodeRanges = Tuple[CodeRange, ...]

code_limit = 0x110000

high_surrogates = (0xD800, 0xDBFF)
low_surrogates  = (0xDC00, 0xDFFF)

hangul_syllables = (0xAC00, 0xD7A3)

vs16 = '\uFE0F'


def char_for(char:Any) -> Optional[str]:
  '''
  Coerce a code point or string argument to a nonempty string, or None.
  Integers outside the code space and bools are rejected; surrogate code points are accepted.
  '''
  if isinstance(char, bool): return None
  if isinstance(char, int):
    return chr(char) if 0 <= char < code_limit else None
  if isinstance(char, str) and char:
    return _join_surrogate_pair(char)
  return None


def sequence_str(seq:Any) -> Optional[str]:
  'Sequence operations only accept nonempty strings.'
  if isinstance(seq, str) and seq: return seq
  return None


def scalar_code(char:str) -> Optional[int]:
  'Return the code point of `char` if it holds exactly one scalar value, else None.'
  if len(char) != 1: return None
  return ord(char)


def _join_surrogate_pair(s:str) -> str:
  if len(s) != 2: return s
  h, l = ord(s[0]), ord(s[1])
  if high_surrogates[0] <= h <= high_surrogates[1] and low_surrogates[0] <= l <= low_surrogates[1]:
    return chr(0x10000 + ((h - high_surrogates[0]) << 10) + (l - low_surrogates[0]))
  return s


def code_hex(code:int) -> str:
  'Uppercase hex with at least four digits.'
  return f'{code:04X}'


def code_desc(code:int) -> str:
  return f'U+{code:04X}'

def codes_desc(s:str) -> str:
  return ' '.join(code_desc(ord(c)) for c in s)


def str_for_codes(codes:Iterable[int]) -> str:
  return ''.join(chr(c) for c in codes)


def parse_codes(text:str) -> list[int]:
  'Parse a space-separated list of hex code points, as found in the UCD files.'
  return [int(word, 16) for word in text.split()]


def ranges_contain(ranges:Iterable[CodeRange], code:int) -> bool:
  return any(l <= code <= h for l, h in ranges)


def ranges_overlap(a:CodeRange, b:CodeRange) -> bool:
  return a[0] <= b[1] and b[0] <= a[1]


def ranges_for_codes(seq:Iterable[int]) -> Iterator[CodeRange]:
  'Coalesce sorted codes into inclusive ranges. Codes must be sorted.'
  it = iter(seq)
  try: first = next(it)
  except StopIteration: return
  low = first
  high = first
  for el in it:
    if el <= high: raise ValueError(el)
    if el == high + 1:
      high = el
    else:
      yield (low, high)
      low = el
      high = el
  yield (low, high)


def noncharacters() -> Iterator[int]:
  'The 66 permanently reserved noncharacter code points, in order.'
  yield from range(0xFDD0, 0xFDF0)
  for plane in range(0, code_limit, 0x10000):
    yield plane + 0xFFFE
    yield plane + 0xFFFF
