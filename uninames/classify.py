# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Basic code point type classification.

The type trie is indexed by successive division of the code point by a descending sequence of offsets.
Uniform blocks of the code space collapse into a single leaf code at whatever depth they occur,
so densely assigned ranges are cheap while sparse areas expand into deeper tables.
'''

from typing import Optional

from .tables import TypeNode, TypeTables


def type_code(types:TypeTables, code:int) -> int:
  'Return the category code for `code`; 0 (reserved) if the trie has no answer.'
  remaining = code
  node:Optional[TypeNode] = types.trie
  for offset in types.offsets:
    node = _child(node, remaining // offset)
    remaining %= offset
    if not isinstance(node, tuple):
      return node or 0
  leaf = _child(node, remaining)
  return leaf if isinstance(leaf, int) else 0


def type_name(types:TypeTables, code:int) -> str:
  names = types.type_names
  c = type_code(types, code)
  if 0 < c < len(names): return names[c]
  return names[0] if names else 'Reserved'


def _child(node:Optional[TypeNode], index:int) -> Optional[TypeNode]:
  if isinstance(node, tuple) and 0 <= index < len(node): return node[index]
  return None
