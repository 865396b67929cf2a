# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Name resolution over a table set.

Every method accepts an integer code point or a string, and returns None rather than raising
when the argument is invalid or the tables have no answer.
'''

from typing import Any, Optional

from .classify import type_name
from .codepoints import char_for, code_hex, scalar_code, sequence_str
from .synth import hangul_name, range_name
from .tables import AliasRecord, UnicodeTables
from .words import insert_words


readable_alias_categories = ('control', 'figment', 'alternate', 'abbreviation')

unlabeled_types = frozenset(['Graphic', 'Format'])


class UnicodeNames:
  '''
  Resolver bound to a single immutable table set.
  Instances hold no other state and can be shared freely between threads.
  '''

  def __init__(self, tables:UnicodeTables) -> None:
    self.tables = tables


  def __repr__(self) -> str: return f'UnicodeNames({self.tables.unicode_version or "?"})'


  def base_name(self, char:Any) -> Optional[str]:
    '''
    The name assigned to a code point in the Unicode Character Database, if any.
    Some common code points have no name, e.g. the C0 control characters.
    '''
    c = char_for(char)
    if c is None: return None
    n = self.tables.names
    compressed = n.names.get(c)
    if compressed is not None:
      return insert_words(compressed, n.words, n.replace_base)
    code = scalar_code(c)
    if code is None: return None
    return range_name(n.ranges, code) or hangul_name(n.jamo, code)


  def correct_name(self, char:Any) -> Optional[str]:
    'The latest correction alias if one exists, otherwise the base name.'
    record = self.aliases(char)
    if record:
      corrections = record.get('correction')
      if corrections and corrections[-1]: return corrections[-1]
    return self.base_name(char)


  def aliases(self, char:Any) -> Optional[AliasRecord]:
    'The aliases of a code point grouped by category: correction, control, figment, alternate, abbreviation.'
    c = char_for(char)
    if c is None: return None
    return self.tables.names.aliases.get(c)


  def char_type(self, char:Any) -> Optional[str]:
    'The basic type of a code point: Graphic, Format, Control, Private-use, Surrogate, Noncharacter or Reserved.'
    c = char_for(char)
    if c is None: return None
    code = scalar_code(c)
    if code is None: return None
    return type_name(self.tables.types, code)


  def label(self, char:Any) -> Optional[str]:
    'A generic label of the form <type-HEX> for code points that are not Graphic or Format.'
    c = char_for(char)
    if c is None: return None
    code = scalar_code(c)
    if code is None: return None
    t = type_name(self.tables.types, code)
    if t in unlabeled_types: return None
    return f'<{t.lower()}-{code_hex(code)}>'


  def readable_name(self, char:Any) -> Optional[str]:
    'The corrected name, else the most readable alias, else the label.'
    name = self.correct_name(char)
    if name: return name
    record = self.aliases(char)
    if record:
      for category in readable_alias_categories:
        names = record.get(category)
        if names and names[0]: return names[0]
    return self.label(char)


  def sequence_name(self, seq:Any) -> Optional[str]:
    '''
    The name of a character made of a code point sequence.
    Emoji sequences that lack one or more VS16 selectors resolve to their fully qualified form.
    '''
    s = sequence_str(seq)
    if s is None: return None
    st = self.tables.sequences
    compressed = st.sequences.get(s)
    if compressed is None:
      qualified = st.not_qualified.get(s)
      if qualified is None: return None
      compressed = st.sequences.get(qualified)
      if compressed is None: return None
    return insert_words(compressed, st.words, st.replace_base)


  def qualified_sequence_name(self, seq:Any) -> Optional[str]:
    'Like `sequence_name`, but only fully qualified emoji sequences match.'
    s = sequence_str(seq)
    if s is None: return None
    st = self.tables.sequences
    compressed = st.sequences.get(s)
    if compressed is None: return None
    return insert_words(compressed, st.words, st.replace_base)


  def name(self, char:Any) -> Optional[str]:
    'The best name for a code point or code point sequence.'
    return self.sequence_name(char) or self.readable_name(char)
