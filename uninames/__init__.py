# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Unicode names for code points and code point sequences.

The module-level functions resolve against the default table asset (see `uninames.load`).
To use a specific table set, construct `UnicodeNames(tables)` directly.
'''

from functools import lru_cache
from typing import Any, Optional

from .load import default_tables, load_tables, TablesLoadError
from .resolver import UnicodeNames
from .tables import AliasRecord, UnicodeTables


__all__ = [
  'aliases',
  'base_name',
  'char_type',
  'correct_name',
  'default_names',
  'label',
  'load_tables',
  'name',
  'qualified_sequence_name',
  'readable_name',
  'sequence_name',
  'TablesLoadError',
  'UnicodeNames',
  'UnicodeTables',
]


@lru_cache(maxsize=None)
def default_names() -> UnicodeNames:
  return UnicodeNames(default_tables())


def base_name(char:Any) -> Optional[str]: return default_names().base_name(char)

def correct_name(char:Any) -> Optional[str]: return default_names().correct_name(char)

def aliases(char:Any) -> Optional[AliasRecord]: return default_names().aliases(char)

def char_type(char:Any) -> Optional[str]: return default_names().char_type(char)

def label(char:Any) -> Optional[str]: return default_names().label(char)

def readable_name(char:Any) -> Optional[str]: return default_names().readable_name(char)

def sequence_name(seq:Any) -> Optional[str]: return default_names().sequence_name(seq)

def qualified_sequence_name(seq:Any) -> Optional[str]: return default_names().qualified_sequence_name(seq)

def name(char:Any) -> Optional[str]: return default_names().name(char)
