# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Build table sets from the Unicode Character Database text files.

Source files, found in a UCD directory (emoji files in its `emoji` subdirectory by default):
* UnicodeData.txt: names, general categories, and First/Last code point ranges. Required.
* NameAliases.txt: correction, control, figment, alternate and abbreviation aliases.
* Jamo.txt: short names of the conjoining jamo, for Hangul syllable names.
* NamedSequences.txt, StandardizedVariants.txt: named code point sequences.
* emoji-variation-sequences.txt, emoji-test.txt: emoji sequence names and qualification status.

Each parser takes an iterable of lines so that excerpts can be parsed directly.
'''

import re
from collections import defaultdict
from os.path import exists, join as path_join
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from .codepoints import (CodeRange, CodeRanges, code_limit, noncharacters, parse_codes, ranges_for_codes,
  str_for_codes, vs16)
from .io import errL
from .resolver import UnicodeNames
from .tables import (AliasRecord, JamoTable, NameTables, SequenceTables, TypeNode, TypeTables, UnicodeTables,
  replace_base_default, type_names_default, type_offsets_default)
from .words import choose_common_words, compress_words, word_codes_for


replace_limit_default = 0xF900 # End of the BMP private use area.


class UcdParseError(ValueError): pass


class UnicodeDataEntry(NamedTuple):
  code:int
  name:str
  category:str

class UnicodeDataRange(NamedTuple):
  low:int
  high:int
  label:str
  category:str

UnicodeDataItem = Union[UnicodeDataEntry, UnicodeDataRange]


class EmojiTestEntry(NamedTuple):
  codes:Tuple[int, ...]
  status:str
  name:str


# Basic types by general category; anything not listed here is Graphic.
category_types:Dict[str, str] = {
  'Cc': 'Control',
  'Cf': 'Format',
  'Zl': 'Format',
  'Zp': 'Format',
  'Co': 'Private-use',
  'Cs': 'Surrogate',
}

range_label_prefixes:Tuple[Tuple[str, str], ...] = (
  ('CJK Ideograph', 'CJK UNIFIED IDEOGRAPH-'),
  ('Tangut Ideograph', 'TANGUT IDEOGRAPH-'),
  ('Egyptian Hieroglyph', 'EGYPTIAN HIEROGLYPH-'),
)

jamo_initial_range = (0x1100, 0x1112)
jamo_medial_range = (0x1161, 0x1175)
jamo_final_range = (0x11A8, 0x11C2)

cjk_compatibility_prefix = 'CJK COMPATIBILITY IDEOGRAPH-'

_hex_name_re = re.compile(r'(?P<prefix>.+-)(?P<hex>[0-9A-F]{4,6})')
_header_version_re = re.compile(r'-(?P<version>\d+\.\d+\.\d+)\.txt')
_emoji_comment_re = re.compile(r'\s*\S+\s+E\d+\.\d+\s+(?P<name>.+)')


# Line parsing.

def data_fields(path:str, lines:Iterable[str]) -> Iterator[Tuple[int, List[str], str]]:
  'Yield (line_num, fields, comment) for each non-blank line of a semicolon-separated UCD file.'
  for line_num, line in enumerate(lines, 1):
    data, _, comment = line.partition('#')
    data = data.strip()
    if not data: continue
    yield line_num, [f.strip() for f in data.split(';')], comment.strip()


def _codes(path:str, line_num:int, text:str) -> List[int]:
  try: codes = parse_codes(text)
  except ValueError as e: raise UcdParseError(f'{path}:{line_num}: invalid code points: {text!r}') from e
  if not codes: raise UcdParseError(f'{path}:{line_num}: missing code points.')
  for c in codes:
    if not 0 <= c < code_limit: raise UcdParseError(f'{path}:{line_num}: code point out of range: {c:X}')
  return codes


def _field_count(path:str, line_num:int, fields:List[str], count:int) -> None:
  if len(fields) < count:
    raise UcdParseError(f'{path}:{line_num}: expected at least {count} fields; found {len(fields)}: {fields!r}')


def version_from_header(lines:Sequence[str]) -> str:
  'UCD files begin with a comment line like `# NameAliases-16.0.0.txt`.'
  for line in lines[:1]:
    m = _header_version_re.search(line)
    if m: return m['version']
  return ''


def parse_unicode_data(lines:Iterable[str], path='UnicodeData.txt') -> Iterator[UnicodeDataItem]:
  first:Optional[UnicodeDataEntry] = None
  for line_num, fields, _ in data_fields(path, lines):
    _field_count(path, line_num, fields, 3)
    codes = _codes(path, line_num, fields[0])
    if len(codes) != 1: raise UcdParseError(f'{path}:{line_num}: expected a single code point: {fields[0]!r}')
    entry = UnicodeDataEntry(code=codes[0], name=fields[1], category=fields[2])
    if entry.name.endswith(', First>'):
      if first: raise UcdParseError(f'{path}:{line_num}: range start follows unterminated range: {first.name!r}')
      first = entry
    elif entry.name.endswith(', Last>'):
      label = entry.name[1:-len(', Last>')]
      if not first or first.name[1:-len(', First>')] != label:
        raise UcdParseError(f'{path}:{line_num}: range end does not match a range start: {entry.name!r}')
      yield UnicodeDataRange(low=first.code, high=entry.code, label=label, category=first.category)
      first = None
    else:
      if first: raise UcdParseError(f'{path}:{line_num}: unterminated range: {first.name!r}')
      yield entry
  if first: raise UcdParseError(f'{path}: unterminated range at end of file: {first.name!r}')


def parse_name_aliases(lines:Iterable[str], path='NameAliases.txt') -> Dict[str, AliasRecord]:
  records:Dict[str, Dict[str, List[str]]] = defaultdict(dict)
  for line_num, fields, _ in data_fields(path, lines):
    _field_count(path, line_num, fields, 3)
    codes = _codes(path, line_num, fields[0])
    alias, category = fields[1], fields[2]
    records[str_for_codes(codes)].setdefault(category, []).append(alias)
  return { c : { cat : tuple(aliases) for cat, aliases in r.items() } for c, r in records.items() }


def parse_jamo(lines:Iterable[str], path='Jamo.txt') -> JamoTable:
  initial:List[str] = []
  medial:List[str] = []
  final:List[str] = [''] # No final consonant.
  for line_num, fields, _ in data_fields(path, lines):
    _field_count(path, line_num, fields, 2)
    code = _codes(path, line_num, fields[0])[0]
    short_name = fields[1]
    if jamo_initial_range[0] <= code <= jamo_initial_range[1]: initial.append(short_name)
    elif jamo_medial_range[0] <= code <= jamo_medial_range[1]: medial.append(short_name)
    elif jamo_final_range[0] <= code <= jamo_final_range[1]: final.append(short_name)
  return JamoTable(initial=tuple(initial), medial=tuple(medial), final=tuple(final))


def parse_named_sequences(lines:Iterable[str], path='NamedSequences.txt') -> Iterator[Tuple[str, str]]:
  'Yield (sequence, name) pairs.'
  for line_num, fields, _ in data_fields(path, lines):
    _field_count(path, line_num, fields, 2)
    yield str_for_codes(_codes(path, line_num, fields[1])), fields[0]


def parse_variation_sequences(lines:Iterable[str], path='StandardizedVariants.txt') -> Iterator[Tuple[str, str]]:
  'Yield (sequence, description) pairs from StandardizedVariants.txt or emoji-variation-sequences.txt.'
  for line_num, fields, _ in data_fields(path, lines):
    _field_count(path, line_num, fields, 2)
    yield str_for_codes(_codes(path, line_num, fields[0])), fields[1]


def parse_emoji_test(lines:Iterable[str], path='emoji-test.txt') -> Iterator[EmojiTestEntry]:
  for line_num, fields, comment in data_fields(path, lines):
    _field_count(path, line_num, fields, 2)
    m = _emoji_comment_re.match(comment)
    if not m: raise UcdParseError(f'{path}:{line_num}: expected emoji, version and name in comment: {comment!r}')
    yield EmojiTestEntry(codes=tuple(_codes(path, line_num, fields[0])), status=fields[1], name=m['name'].strip().upper())


# Table construction.

def build_type_trie(codes:Sequence[int], offsets:Tuple[int, ...]=type_offsets_default) -> TypeNode:
  '''
  Build a type trie from a flat sequence of category codes indexed by code point.
  Each offset must divide the previous one; a uniform block at any level becomes a single leaf.
  '''
  for a, b in zip(offsets, offsets[1:]):
    if a <= b or a % b: raise ValueError(f'type offsets must be descending, each dividing the previous: {offsets}')
  top = offsets[0]
  return tuple(_type_trie_node(codes, start, offsets, 0) for start in range(0, len(codes), top))


def _type_trie_node(codes:Sequence[int], start:int, offsets:Tuple[int, ...], depth:int) -> TypeNode:
  span = offsets[depth]
  block = codes[start:start+span]
  if block.count(block[0]) == len(block): return block[0]
  if depth + 1 == len(offsets): return tuple(block)
  step = offsets[depth + 1]
  return tuple(_type_trie_node(codes, s, offsets, depth + 1) for s in range(start, start + len(block), step))


def type_codes_for(items:Iterable[UnicodeDataItem], type_names:Tuple[str, ...]=type_names_default) -> bytearray:
  'Category codes for the whole code space; unlisted code points are reserved or noncharacters.'
  index = { name : i for i, name in enumerate(type_names) }
  graphic = index['Graphic']
  codes = bytearray(code_limit)
  for item in items:
    t = index[category_types[item.category]] if item.category in category_types else graphic
    if isinstance(item, UnicodeDataRange):
      codes[item.low:item.high + 1] = bytes([t]) * (item.high + 1 - item.low)
    else:
      codes[item.code] = t
  noncharacter = index['Noncharacter']
  for c in noncharacters():
    if codes[c] == 0: codes[c] = noncharacter
  return codes


def range_prefix_for_label(label:str) -> Optional[str]:
  for label_prefix, name_prefix in range_label_prefixes:
    if label.startswith(label_prefix): return name_prefix
  return None


def is_unnamed_range_label(label:str) -> bool:
  return label.startswith('Hangul Syllable') or 'Private Use' in label or 'Surrogate' in label


def split_names(items:Iterable[UnicodeDataItem]) -> Tuple[Dict[str, str], Dict[str, CodeRanges]]:
  '''
  Separate listed names from those generated by a prefix and the hex code point.
  Returns (names, ranges); range prefixes are ordered by first appearance.
  '''
  names:Dict[str, str] = {}
  range_codes:Dict[str, List[int]] = {}
  explicit_ranges:Dict[str, List[CodeRange]] = {}
  for item in items:
    if isinstance(item, UnicodeDataRange):
      prefix = range_prefix_for_label(item.label)
      if prefix is not None:
        range_codes.setdefault(prefix, [])
        explicit_ranges.setdefault(prefix, []).append((item.low, item.high))
      elif not is_unnamed_range_label(item.label):
        errL(f'uninames build: note: skipping unknown range label: {item.label!r} {item.low:04X}..{item.high:04X}')
      continue
    name = item.name
    if not name or name.startswith('<'): continue # `<control>` and similar have no name.
    m = _hex_name_re.fullmatch(name)
    if m and int(m['hex'], 16) == item.code:
      range_codes.setdefault(m['prefix'], []).append(item.code)
      continue
    names[chr(item.code)] = name
  ranges:Dict[str, CodeRanges] = {}
  for prefix, codes in range_codes.items():
    ranges[prefix] = tuple(sorted(explicit_ranges.get(prefix, []) + list(ranges_for_codes(sorted(codes)))))
  return names, ranges


def compress_names(names:Dict[str, str], replace_base:int, replace_limit:int) -> Tuple[Dict[str, str], Tuple[str, ...]]:
  'Returns (compressed names, common words).'
  for key, name in names.items():
    if any(ord(c) >= replace_base for c in name):
      raise UcdParseError(f'name contains characters at or above the replace base U+{replace_base:04X}: {name!r}')
  words = choose_common_words(names.values(), max_words=replace_limit - replace_base)
  word_codes = word_codes_for(words, replace_base)
  return { key : compress_words(name, word_codes) for key, name in names.items() }, words


def variation_sequence_name(base_name:str, description:str) -> str:
  if description.startswith(cjk_compatibility_prefix): return description
  return f'{base_name} ({description})'


def build_tables_from_lines(unicode_data:Iterable[str], name_aliases:Iterable[str]=(), jamo:Iterable[str]=(),
 named_sequences:Iterable[str]=(), standardized_variants:Iterable[str]=(), emoji_variation_sequences:Iterable[str]=(),
 emoji_test:Iterable[str]=(), unicode_version='', offsets:Tuple[int, ...]=type_offsets_default,
 replace_base=replace_base_default, replace_limit=replace_limit_default) -> UnicodeTables:

  items = list(parse_unicode_data(unicode_data))
  trie = build_type_trie(type_codes_for(items), offsets=offsets)
  types = TypeTables(trie=trie, type_names=type_names_default, offsets=offsets)

  plain_names, ranges = split_names(items)
  aliases = parse_name_aliases(name_aliases)
  jamo_table = parse_jamo(jamo)
  # Uncompressed names resolve base names for variation sequences.
  plain = UnicodeNames(UnicodeTables(names=NameTables(names=plain_names, replace_base=code_limit, ranges=ranges, jamo=jamo_table)))

  sequences:Dict[str, str] = {}
  def add_sequence(seq:str, name:str) -> None:
    if len(seq) > 1 and seq not in sequences: sequences[seq] = name

  for seq, name in parse_named_sequences(named_sequences):
    add_sequence(seq, name)

  variations = [
    *parse_variation_sequences(standardized_variants),
    *parse_variation_sequences(emoji_variation_sequences, path='emoji-variation-sequences.txt')]
  for seq, description in variations:
    base_name = plain.base_name(seq[0])
    if base_name is None:
      errL(f'uninames build: note: no base name for variation sequence: {seq!r} ({description})')
      continue
    add_sequence(seq, variation_sequence_name(base_name, description))

  emoji_entries = list(parse_emoji_test(emoji_test))
  fully_qualified:Dict[str, str] = {}
  for entry in emoji_entries:
    if entry.status != 'fully-qualified': continue
    seq = str_for_codes(entry.codes)
    add_sequence(seq, entry.name)
    fully_qualified.setdefault(seq.replace(vs16, ''), seq)
  not_qualified:Dict[str, str] = {}
  for entry in emoji_entries:
    if entry.status not in ('minimally-qualified', 'unqualified'): continue
    seq = str_for_codes(entry.codes)
    if len(seq) < 2 or seq in sequences: continue
    qualified = fully_qualified.get(seq.replace(vs16, ''))
    if qualified is not None and qualified in sequences:
      not_qualified[seq] = qualified

  names, words = compress_names(plain_names, replace_base, replace_limit)
  compressed_sequences, sequence_words = compress_names(sequences, replace_base, replace_limit)

  return UnicodeTables(
    types=types,
    names=NameTables(names=names, words=words, replace_base=replace_base, aliases=aliases, ranges=ranges, jamo=jamo_table),
    sequences=SequenceTables(sequences=compressed_sequences, words=sequence_words, replace_base=replace_base,
      not_qualified=not_qualified),
    unicode_version=unicode_version)


def read_lines(path:str, required=False) -> List[str]:
  if not exists(path):
    if required: raise FileNotFoundError(path)
    errL(f'uninames build: note: missing optional file: {path}')
    return []
  with open(path, encoding='utf8') as f:
    return list(f)


def build_tables(ucd_dir:str, emoji_dir:Optional[str]=None, **kwargs) -> UnicodeTables:
  if emoji_dir is None: emoji_dir = path_join(ucd_dir, 'emoji')
  name_aliases = read_lines(path_join(ucd_dir, 'NameAliases.txt'))
  jamo = read_lines(path_join(ucd_dir, 'Jamo.txt'))
  named_sequences = read_lines(path_join(ucd_dir, 'NamedSequences.txt'))
  version = kwargs.pop('unicode_version', '') or version_from_header(name_aliases) or version_from_header(jamo) \
    or version_from_header(named_sequences)
  return build_tables_from_lines(
    unicode_data=read_lines(path_join(ucd_dir, 'UnicodeData.txt'), required=True),
    name_aliases=name_aliases,
    jamo=jamo,
    named_sequences=named_sequences,
    standardized_variants=read_lines(path_join(ucd_dir, 'StandardizedVariants.txt')),
    emoji_variation_sequences=read_lines(path_join(emoji_dir, 'emoji-variation-sequences.txt')),
    emoji_test=read_lines(path_join(emoji_dir, 'emoji-test.txt')),
    unicode_version=version,
    **kwargs)
