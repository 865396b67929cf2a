# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Immutable table context consumed by the name resolver.
A table set is built once (see `uninames.build`) or loaded from a JSON asset (see `uninames.load`),
and then shared read-only by every lookup.
'''

from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Tuple, Union

from .codepoints import CodeRanges


# A type trie node is either a leaf category code or a branch of child nodes.
TypeNode = Union[int, Tuple['TypeNode', ...]]

AliasRecord = Dict[str, Tuple[str, ...]]

type_names_default:Tuple[str, ...] = (
  'Reserved', # Code 0 is always reserved.
  'Graphic',
  'Format',
  'Control',
  'Private-use',
  'Surrogate',
  'Noncharacter',
)

type_offsets_default:Tuple[int, ...] = (0x10000, 0x1000, 0x100, 0x10)

alias_categories:Tuple[str, ...] = ('correction', 'control', 'figment', 'alternate', 'abbreviation')

replace_base_default = 0xE000 # Start of the BMP private use area.


class JamoTable(NamedTuple):
  initial:Tuple[str, ...] = ()
  medial:Tuple[str, ...] = ()
  final:Tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeTables:
  trie:TypeNode = ()
  type_names:Tuple[str, ...] = type_names_default
  offsets:Tuple[int, ...] = type_offsets_default


@dataclass(frozen=True)
class NameTables:
  names:Dict[str, str] = field(default_factory=dict)
  words:Tuple[str, ...] = ()
  replace_base:int = replace_base_default
  aliases:Dict[str, AliasRecord] = field(default_factory=dict)
  ranges:Dict[str, CodeRanges] = field(default_factory=dict) # Ordered; first matching prefix wins.
  jamo:JamoTable = JamoTable()


@dataclass(frozen=True)
class SequenceTables:
  sequences:Dict[str, str] = field(default_factory=dict)
  words:Tuple[str, ...] = ()
  replace_base:int = replace_base_default
  not_qualified:Dict[str, str] = field(default_factory=dict) # Maps to a key of `sequences`.


@dataclass(frozen=True)
class UnicodeTables:
  types:TypeTables = TypeTables()
  names:NameTables = NameTables()
  sequences:SequenceTables = SequenceTables()
  unicode_version:str = ''

  @classmethod
  def empty(cls) -> 'UnicodeTables':
    'A table set with no data; every lookup against it comes up empty.'
    return cls()

  def summary(self) -> str:
    version = self.unicode_version or 'unknown'
    n = self.names
    return (f'Unicode {version}: {len(n.names)} names; {len(n.aliases)} aliased; {len(n.ranges)} range prefixes; '
      f'{len(self.sequences.sequences)} sequences; {len(self.sequences.not_qualified)} not fully qualified.')
