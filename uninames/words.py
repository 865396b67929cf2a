# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Common word substitution for name strings.

Names are stored with frequent words replaced by single private use characters.
A character at or above `replace_base` stands for `words[ord(c) - replace_base]` followed by a space;
every other character is literal.
'''

from collections import Counter
from typing import Dict, Iterable, List, Sequence, Tuple


def insert_words(compressed:str, words:Sequence[str], replace_base:int) -> str:
  'Expand the word tokens in `compressed` and trim trailing whitespace.'
  parts:List[str] = []
  for c in compressed:
    code = ord(c)
    if code < replace_base:
      parts.append(c)
      continue
    i = code - replace_base
    if i < len(words): # Tokens past the end of the dictionary expand to nothing.
      parts.append(words[i])
      parts.append(' ')
  return ''.join(parts).rstrip()


def compress_words(name:str, word_codes:Dict[str, str]) -> str:
  '''
  Replace each space-terminated (or final) word of `name` that has a token in `word_codes`.
  The token absorbs the following space; `insert_words` restores it.
  '''
  words = name.split(' ')
  last = len(words) - 1
  parts:List[str] = []
  for i, word in enumerate(words):
    try: parts.append(word_codes[word])
    except KeyError:
      parts.append(word)
      if i < last: parts.append(' ')
  return ''.join(parts)


def choose_common_words(names:Iterable[str], max_words:int) -> Tuple[str, ...]:
  '''
  Choose the dictionary for a set of names.
  Words that occur at least twice are ranked by the characters they save (count times length), ties broken by the word.
  '''
  counts:Counter[str] = Counter()
  for name in names:
    counts.update(name.split(' '))
  candidates = [(n * len(w), w) for w, n in counts.items() if n > 1 and len(w) > 1]
  candidates.sort(key=lambda p: (-p[0], p[1]))
  return tuple(w for _, w in candidates[:max_words])


def word_codes_for(words:Sequence[str], replace_base:int) -> Dict[str, str]:
  return { w : chr(replace_base + i) for i, w in enumerate(words) }
