# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Algorithmic names for code point families too large to list individually.
See Unicode section 4.8, rules NR1 (Hangul syllables) and NR2 (ideograph-style prefix and hex).
'''

from typing import Dict, Optional

from .codepoints import CodeRanges, code_hex, hangul_syllables, ranges_contain
from .tables import JamoTable


hangul_base = hangul_syllables[0]
hangul_last = hangul_syllables[1]
hangul_medial_count = 21
hangul_final_count = 28
hangul_initial_span = hangul_medial_count * hangul_final_count # 588.


def range_name(ranges:Dict[str, CodeRanges], code:int) -> Optional[str]:
  'Name for `code` from the first prefix whose ranges contain it.'
  for prefix, prefix_ranges in ranges.items():
    if ranges_contain(prefix_ranges, code):
      return prefix + code_hex(code)
  return None


def hangul_name(jamo:JamoTable, code:int) -> Optional[str]:
  if not (hangul_base <= code <= hangul_last): return None
  base = code - hangul_base
  final = base % hangul_final_count
  medial = (base % hangul_initial_span) // hangul_final_count
  initial = base // hangul_initial_span
  try: return 'HANGUL SYLLABLE ' + jamo.initial[initial] + jamo.medial[medial] + jamo.final[final]
  except IndexError: return None # Incomplete jamo table.
