# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from sample_ucd import sample_names, sample_tables
from uninames.resolver import UnicodeNames
from uninames.tables import NameTables, SequenceTables, UnicodeTables
from utest import utest, utest_val


names = sample_names()

# Base names.
utest('LATIN CAPITAL LETTER A', names.base_name, 'A')
utest('LATIN CAPITAL LETTER A', names.base_name, 0x41)
utest('AERIAL TRAMWAY', names.base_name, '🚡')
utest('REPLACEMENT CHARACTER', names.base_name, '�')
utest('LATIN CAPITAL LETTER OI', names.base_name, 'Ƣ')
utest('CJK UNIFIED IDEOGRAPH-4E01', names.base_name, '丁')
utest('CJK UNIFIED IDEOGRAPH-4E01', names.base_name, 0x4E01)
utest('SQUARED CJK UNIFIED IDEOGRAPH-6709', names.base_name, '🈶')
utest('HANGUL SYLLABLE HAN', names.base_name, '한')
utest('HANGUL SYLLABLE GAG', names.base_name, '각')
utest('HANGUL SYLLABLE GA', names.base_name, 0xAC00)
utest('HANGUL SYLLABLE HIH', names.base_name, 0xD7A3)
utest('EGYPTIAN HIEROGLYPH-143F5', names.base_name, '\U000143F5')
utest('KHITAN SMALL SCRIPT CHARACTER-18C12', names.base_name, '\U00018C12')
utest('TANGUT IDEOGRAPH-18D00', names.base_name, '\U00018D00')
utest('NUSHU CHARACTER-1B171', names.base_name, '\U0001B171')
utest('CJK COMPATIBILITY IDEOGRAPH-2F9B1', names.base_name, '\U0002F9B1')
utest('CJK COMPATIBILITY IDEOGRAPH-F978', names.base_name, '\uF978')
utest('CJK UNIFIED IDEOGRAPH-20000', names.base_name, 0x20000)
utest('AERIAL TRAMWAY', names.base_name, '\uD83D\uDEA1') # Surrogate pair.
utest(None, names.base_name, '\0')
utest(None, names.base_name, 68688)
utest(None, names.base_name, 0xD800)
utest(None, names.base_name, 'AB') # Multiple code points.
utest(None, names.base_name, '')
utest(None, names.base_name, None)
utest(None, names.base_name, 0x110000)
utest(None, names.base_name, '丁丁')
utest(names.base_name('A'), names.base_name, 'A') # Repeated lookups agree.

# Corrected names.
utest('LATIN CAPITAL LETTER A', names.correct_name, 'A')
utest('LATIN CAPITAL LETTER GHA', names.correct_name, 'Ƣ')
utest('LATIN SMALL LETTER GHA', names.correct_name, 0x01A3)
utest(None, names.correct_name, '\0')
utest(None, names.correct_name, '')

# Aliases.
utest(None, names.aliases, 'A')
utest({'control': ('NULL',), 'abbreviation': ('NUL',)}, names.aliases, '\0')
utest({'control': ('NULL',), 'abbreviation': ('NUL',)}, names.aliases, 0)
utest(('CHARACTER TABULATION', 'HORIZONTAL TABULATION'), lambda c: names.aliases(c)['control'], '\t')
utest(None, names.aliases, '')

# Types.
utest('Graphic', names.char_type, 'A')
utest('Format', names.char_type, '\u00AD')
utest('Control', names.char_type, 0)
utest('Noncharacter', names.char_type, '\U0010FFFF')
utest('Reserved', names.char_type, '\U00010C50')
utest('Reserved', names.char_type, '\U000E0326')
utest('Surrogate', names.char_type, 55296)
utest('Private-use', names.char_type, '\U000FFFFD')
utest(None, names.char_type, '')
utest(None, names.char_type, 'AB')
utest(None, names.char_type, -1)

# Labels.
utest(None, names.label, 'A')
utest(None, names.label, '\u00AD')
utest(None, names.label, '\0\0')
utest(None, names.label, '')
utest('<control-0000>', names.label, '\0')
utest('<control-0000>', names.label, 0)
utest('<private-use-FFFFD>', names.label, '\U000FFFFD')
utest('<surrogate-D800>', names.label, 55296)
utest('<noncharacter-FFFFF>', names.label, '\U000FFFFF')
utest('<noncharacter-FDD0>', names.label, 0xFDD0)
utest('<reserved-10C50>', names.label, '\U00010C50')

# Readable names.
utest('LATIN CAPITAL LETTER A', names.readable_name, 'A')
utest('LATIN CAPITAL LETTER GHA', names.readable_name, 'Ƣ')
utest('NULL', names.readable_name, '\0')
utest('CHARACTER TABULATION', names.readable_name, '\t')
utest('PADDING CHARACTER', names.readable_name, 0x80) # Figment before abbreviation.
utest('ZERO WIDTH NO-BREAK SPACE', names.readable_name, '\uFEFF') # Base name before alternate alias.
utest('<noncharacter-FFFFF>', names.readable_name, '\U000FFFFF')
utest('<reserved-10C50>', names.readable_name, '\U00010C50')
utest('<private-use-FFFFD>', names.readable_name, '\U000FFFFD')
utest(None, names.readable_name, '')
utest(None, names.readable_name, 'AB')

# Sequence names.
utest('DOUBLE EXCLAMATION MARK (text style)', names.sequence_name, '‼\uFE0E')
utest('CJK COMPATIBILITY IDEOGRAPH-2F81F', names.sequence_name, '\u34DF\uFE00')
utest('MYANMAR LETTER NGA (dotted form)', names.sequence_name, '\u1004\uFE00')
utest('LEFT SINGLE QUOTATION MARK (right-justified fullwidth form)', names.sequence_name, '‘\uFE01')
utest('TAMIL SYLLABLE NI', names.sequence_name, '\u0BA8\u0BBF')
utest('FLAG: UNITED NATIONS', names.sequence_name, '🇺🇳')
utest('FLAG: ÅLAND ISLANDS', names.sequence_name, '🇦🇽')
utest('HEART ON FIRE', names.sequence_name, '❤\uFE0F\u200D\U0001F525')
utest('HEAD SHAKING HORIZONTALLY', names.sequence_name, '\U0001F642\u200D↔\uFE0F')
utest('MAN JUDGE', names.sequence_name, '\U0001F468\u200D⚖\uFE0F')
utest(None, names.sequence_name, 'ai')
utest(None, names.sequence_name, '\U00010C50')
utest(None, names.sequence_name, '⏳')
utest(None, names.sequence_name, '')
utest(None, names.sequence_name, 0x41)

# Sequences missing VS16 resolve through their fully qualified form.
couple_unqualified = '\U0001F469\U0001F3FF\u200D❤\u200D\U0001F469\U0001F3FD'
utest('COUPLE WITH HEART: WOMAN, WOMAN, DARK SKIN TONE, MEDIUM SKIN TONE', names.sequence_name, couple_unqualified)
utest('MAN JUDGE', names.sequence_name, '\U0001F468\u200D⚖')
utest('WOMAN BOUNCING BALL', names.sequence_name, '⛹\u200D♀\uFE0F') # First VS16 missing.
utest('WOMAN BOUNCING BALL', names.sequence_name, '⛹\uFE0F\u200D♀') # Second VS16 missing.
utest('WOMAN BOUNCING BALL', names.sequence_name, '⛹\u200D♀') # Both missing.
utest('HEART ON FIRE', names.sequence_name, '❤\u200D\U0001F525')

# Qualified sequence names ignore the not fully qualified index.
utest('DOUBLE EXCLAMATION MARK (text style)', names.qualified_sequence_name, '‼\uFE0E')
utest('CJK COMPATIBILITY IDEOGRAPH-2F81F', names.qualified_sequence_name, '\u34DF\uFE00')
utest('WOMAN BOUNCING BALL', names.qualified_sequence_name, '⛹\uFE0F\u200D♀\uFE0F')
utest(None, names.qualified_sequence_name, couple_unqualified)
utest(None, names.qualified_sequence_name, '\U0001F468\u200D⚖')
utest(None, names.qualified_sequence_name, '⛹\u200D♀\uFE0F')
utest(None, names.qualified_sequence_name, '⛹\uFE0F\u200D♀')
utest(None, names.qualified_sequence_name, '')
utest(None, names.qualified_sequence_name, None)

for seq in sample_tables().sequences.not_qualified:
  utest_val(None, names.qualified_sequence_name(seq), f'qualified_sequence_name({seq!r})')
  utest_val(True, bool(names.sequence_name(seq)), f'sequence_name({seq!r})')

# Top level names.
utest('LATIN CAPITAL LETTER A', names.name, 'A')
utest('LATIN CAPITAL LETTER A', names.name, 0x41)
utest('NULL', names.name, 0)
utest('LATIN CAPITAL LETTER GHA', names.name, 'Ƣ')
utest('HANGUL SYLLABLE HAN', names.name, '한')
utest('<reserved-10C50>', names.name, '\U00010C50')
utest('MAN JUDGE', names.name, '\U0001F468\u200D⚖')
utest('RED HEART', names.name, '❤\uFE0F') # The sequence name beats the first code point's name.
utest('HEAVY BLACK HEART', names.name, '❤')
utest(None, names.name, 'ai')
utest(None, names.name, '')

for seq in sample_tables().sequences.sequences:
  utest_val(names.sequence_name(seq), names.name(seq), f'name({seq!r})')


# Hand built tables: the last correction wins, and corrections always beat base names.
hand = UnicodeNames(UnicodeTables(
  names=NameTables(
    names={'x': 'OLD NAME'},
    aliases={
      'x': {'correction': ('FIRST FIX', 'SECOND FIX')},
      'y': {'correction': ('ONLY FIX',), 'abbreviation': ('Y',)},
      'z': {'correction': ('',), 'alternate': ('ZED',)},
    }),
  sequences=SequenceTables(
    sequences={'ab': 'AB SEQUENCE'},
    not_qualified={'a\uFE0Fb': 'missing', 'ac': 'ab'})))

utest('SECOND FIX', hand.correct_name, 'x')
utest('OLD NAME', hand.base_name, 'x')
utest('ONLY FIX', hand.correct_name, 'y')
utest('ONLY FIX', hand.readable_name, 'y')
utest('ZED', hand.readable_name, 'z') # Empty corrections are skipped.
utest('AB SEQUENCE', hand.sequence_name, 'ac')
utest(None, hand.sequence_name, 'a\uFE0Fb') # Index entry pointing at a missing sequence.
utest('Reserved', hand.char_type, 'q') # No type trie at all.
utest('<reserved-0071>', hand.label, 'q')

# Empty tables answer nothing but labels.
empty = UnicodeNames(UnicodeTables.empty())
utest(None, empty.base_name, 'A')
utest(None, empty.correct_name, 'A')
utest(None, empty.aliases, 'A')
utest(None, empty.sequence_name, 'ab')
utest(None, empty.base_name, 0xAC00)
utest('<reserved-0041>', empty.readable_name, 'A')
