# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Load and write table sets as JSON assets.

The default asset is named by the `UNINAMES_DATA` environment variable,
or else is `data/uninames.json` inside this package.
'''

import json as _json
from functools import lru_cache
from os import environ
from os.path import dirname, join as path_join
from typing import Any, Dict, Iterator, Tuple

from .codepoints import CodeRange, CodeRanges, hangul_syllables, ranges_overlap
from .io import errL, errSL
from .tables import (AliasRecord, JamoTable, NameTables, SequenceTables, TypeNode, TypeTables, UnicodeTables,
  replace_base_default, type_names_default, type_offsets_default)


asset_format = 1

data_env_var = 'UNINAMES_DATA'

package_data_path = path_join(dirname(__file__), 'data', 'uninames.json')


class TablesLoadError(Exception): pass


def default_data_path() -> str:
  return environ.get(data_env_var) or package_data_path


@lru_cache(maxsize=None)
def default_tables() -> UnicodeTables:
  '''
  Load the default asset once.
  A missing or unreadable asset is reported on std err and yields empty tables,
  so that lookups degrade to no result rather than failing.
  '''
  path = default_data_path()
  try: tables = load_tables(path)
  except TablesLoadError as e:
    errL(f'uninames: {e}; cause: {e.__cause__}')
    errL(f'uninames: using empty tables; set {data_env_var} or run `uninames build`.')
    return UnicodeTables.empty()
  report_overlaps(tables, label=path)
  return tables


def load_tables(path:str) -> UnicodeTables:
  try:
    with open(path, encoding='utf8') as f:
      obj = _json.load(f)
  except (OSError, ValueError) as e:
    raise TablesLoadError(f'could not load table asset: {path!r}') from e
  try: return tables_from_json(obj)
  except (TypeError, ValueError, AttributeError) as e:
    raise TablesLoadError(f'malformed table asset: {path!r}') from e


def write_tables(path:str, tables:UnicodeTables) -> None:
  with open(path, 'w', encoding='utf8') as f:
    _json.dump(tables_to_json(tables), f, separators=(',', ':'), sort_keys=False)
    f.write('\n')


def tables_from_json(obj:Dict[str, Any]) -> UnicodeTables:
  '''
  Convert a parsed JSON asset to tables. Missing sections default to empty tables.
  Raises ValueError for values of the wrong shape.
  '''
  if not isinstance(obj, dict): raise ValueError(f'table asset must be a JSON object; found {type(obj).__name__}')
  fmt = obj.get('format', asset_format)
  if fmt != asset_format: raise ValueError(f'unsupported table asset format: {fmt!r}')

  t = _section(obj, 'types')
  types = TypeTables(
    trie=_trie_node(t.get('trie', [])),
    type_names=_strs(t.get('type_names', type_names_default), 'type names'),
    offsets=_offsets(t.get('offsets', type_offsets_default)))

  n = _section(obj, 'names')
  jamo = _section(n, 'jamo')
  names = NameTables(
    names=_str_dict(n.get('names', {}), 'names'),
    words=_strs(n.get('common_words', ()), 'name words'),
    replace_base=_int(n.get('replace_base', replace_base_default), 'name replace base'),
    aliases={ c : _alias_record(r) for c, r in _dict(n.get('aliases', {}), 'aliases').items() },
    ranges={ _str(prefix, 'range prefix') : _code_ranges(ranges) for prefix, ranges in n.get('ranges', ()) },
    jamo=JamoTable(
      initial=_strs(jamo.get('initial', ()), 'jamo initials'),
      medial=_strs(jamo.get('medial', ()), 'jamo medials'),
      final=_strs(jamo.get('final', ()), 'jamo finals')))

  s = _section(obj, 'sequences')
  sequences = SequenceTables(
    sequences=_str_dict(s.get('sequences', {}), 'sequences'),
    words=_strs(s.get('common_words', ()), 'sequence words'),
    replace_base=_int(s.get('replace_base', replace_base_default), 'sequence replace base'),
    not_qualified=_str_dict(s.get('not_qualified', {}), 'not qualified sequences'))

  return UnicodeTables(types=types, names=names, sequences=sequences,
    unicode_version=_str(obj.get('unicode_version', ''), 'unicode version'))


def tables_to_json(tables:UnicodeTables) -> Dict[str, Any]:
  t = tables.types
  n = tables.names
  s = tables.sequences
  return {
    'format': asset_format,
    'unicode_version': tables.unicode_version,
    'types': {
      'trie': t.trie,
      'type_names': t.type_names,
      'offsets': t.offsets,
    },
    'names': {
      'names': n.names,
      'common_words': n.words,
      'replace_base': n.replace_base,
      'aliases': n.aliases,
      'ranges': [[prefix, ranges] for prefix, ranges in n.ranges.items()], # List of pairs preserves prefix order.
      'jamo': n.jamo._asdict(),
    },
    'sequences': {
      'sequences': s.sequences,
      'common_words': s.words,
      'replace_base': s.replace_base,
      'not_qualified': s.not_qualified,
    },
  }


def _section(obj:Dict[str, Any], key:str) -> Dict[str, Any]:
  return _dict(obj.get(key) or {}, key)


def _dict(val:Any, desc:str) -> Dict[str, Any]:
  if not isinstance(val, dict): raise ValueError(f'{desc}: expected an object; found {val!r}')
  return val


def _str(val:Any, desc:str) -> str:
  if not isinstance(val, str): raise ValueError(f'{desc}: expected a string; found {val!r}')
  return val


def _int(val:Any, desc:str) -> int:
  if not isinstance(val, int) or isinstance(val, bool): raise ValueError(f'{desc}: expected an integer; found {val!r}')
  return val


def _strs(vals:Any, desc:str) -> Tuple[str, ...]:
  if isinstance(vals, (str, dict)): raise ValueError(f'{desc}: expected an array; found {vals!r}')
  return tuple(_str(v, desc) for v in vals)


def _str_dict(val:Any, desc:str) -> Dict[str, str]:
  return { k : _str(v, desc) for k, v in _dict(val, desc).items() }


def _offsets(vals:Any) -> Tuple[int, ...]:
  offsets = tuple(_int(o, 'type offsets') for o in vals)
  if not offsets or any(o <= 0 for o in offsets): raise ValueError(f'type offsets must be positive: {offsets}')
  return offsets


def _trie_node(node:Any) -> TypeNode:
  if isinstance(node, list): return tuple(_trie_node(el) for el in node)
  if node is None: return 0
  if isinstance(node, int) and not isinstance(node, bool): return node
  raise ValueError(f'invalid type trie node: {node!r}')


def _alias_record(record:Any) -> AliasRecord:
  return { category : _strs(aliases, f'{category} aliases') for category, aliases in _dict(record, 'alias record').items() }


def _code_ranges(ranges:Any) -> CodeRanges:
  return tuple((_int(l, 'range bound'), _int(h, 'range bound')) for l, h in ranges)


def range_overlaps(tables:UnicodeTables) -> Iterator[Tuple[str, CodeRange, str, CodeRange]]:
  '''
  Find ranges of different prefixes that intersect, and ranges that intersect the Hangul syllables block.
  Lookups resolve such conflicts by taking the first matching prefix.
  '''
  items = [(prefix, r) for prefix, ranges in tables.names.ranges.items() for r in ranges]
  for i, (prefix_a, a) in enumerate(items):
    if ranges_overlap(a, hangul_syllables):
      yield (prefix_a, a, 'HANGUL SYLLABLE ', hangul_syllables)
    for prefix_b, b in items[i+1:]:
      if prefix_a != prefix_b and ranges_overlap(a, b):
        yield (prefix_a, a, prefix_b, b)


def report_overlaps(tables:UnicodeTables, label:str) -> int:
  count = 0
  for prefix_a, a, prefix_b, b in range_overlaps(tables):
    count += 1
    errSL(f'uninames: {label}: overlapping name ranges:', f'{prefix_a!r} {a[0]:04X}..{a[1]:04X};',
      f'{prefix_b!r} {b[0]:04X}..{b[1]:04X}')
  return count
