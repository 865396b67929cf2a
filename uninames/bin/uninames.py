# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Look up Unicode names, or build the table asset from the Unicode Character Database.'

import re
from argparse import _SubParsersAction, ArgumentParser, Namespace
from functools import cached_property
from typing import Any, Callable, Sequence

from .. import default_names
from ..build import build_tables, UcdParseError
from ..codepoints import code_desc, codes_desc
from ..io import errL, outSL
from ..load import load_tables, report_overlaps, TablesLoadError, write_tables
from ..resolver import UnicodeNames


class CommandParser(ArgumentParser):
  'ArgumentParser configured with subcommands; each subcommand sets a `main_fn` default.'

  @cached_property
  def _commands(self) -> _SubParsersAction:
    commands = self.add_subparsers(required=True, dest='command', help='Available commands.')
    self.epilog = "For help with a specific command, pass '-h' to that command."
    return commands

  def add_command(self, main_fn:Callable[[Namespace],None], **kwargs:Any) -> ArgumentParser:
    'The command name is derived from `main_fn` by removing the `main_` prefix.'
    name = main_fn.__name__.removeprefix('main_').replace('_', '-')
    command = self._commands.add_parser(name, **kwargs)
    command.set_defaults(main_fn=main_fn)
    return command

  def parse_and_run_command(self, args:Sequence[str]|None=None) -> Namespace:
    ns = self.parse_args(args)
    ns.main_fn(ns)
    return ns


def main() -> None:
  parser = CommandParser(description='Unicode names for code points and code point sequences.')

  name_cmd = parser.add_command(main_name, help='Print names for code points (U+XXXX, 0xXXXX) or literal text.')
  name_cmd.add_argument('-data', help='Table asset path; defaults to $UNINAMES_DATA or the packaged asset.')
  name_cmd.add_argument('-all', action='store_true', help='Also print base name, type, label and aliases.')
  name_cmd.add_argument('chars', nargs='+', help='Code points or characters to name.')

  build_cmd = parser.add_command(main_build, help='Build the table asset from Unicode Character Database files.')
  build_cmd.add_argument('ucd_dir', help='Directory containing UnicodeData.txt and related files.')
  build_cmd.add_argument('-emoji', help='Directory containing the emoji data files; defaults to UCD_DIR/emoji.')
  build_cmd.add_argument('-unicode-version', default='', help='Version to record; defaults to the version in the file headers.')
  build_cmd.add_argument('-out', required=True, help='Output JSON path.')

  parser.parse_and_run_command()


_code_arg_re = re.compile(r'(?:[Uu]\+|0x)(?P<hex>[0-9A-Fa-f]{1,6})')

def parse_char_arg(arg:str) -> int|str:
  'Code point arguments become integers; anything else is literal text.'
  m = _code_arg_re.fullmatch(arg)
  return int(m['hex'], 16) if m else arg


def main_name(args:Namespace) -> None:
  if args.data:
    try: names = UnicodeNames(load_tables(args.data))
    except TablesLoadError as e: exit(f'uninames: {e}; cause: {e.__cause__}')
  else:
    names = default_names()
  for arg in args.chars:
    char = parse_char_arg(arg)
    desc = code_desc(char) if isinstance(char, int) else codes_desc(char)
    outSL(desc, names.name(char) or '?')
    if args.all:
      outSL('  base name:', names.base_name(char) or '-')
      outSL('  type:', names.char_type(char) or '-')
      outSL('  label:', names.label(char) or '-')
      for category, aliases in (names.aliases(char) or {}).items():
        outSL(f'  {category}:', ', '.join(aliases))


def main_build(args:Namespace) -> None:
  try: tables = build_tables(args.ucd_dir, emoji_dir=args.emoji, unicode_version=args.unicode_version)
  except FileNotFoundError as e: exit(f'uninames build: missing required file: {e}')
  except UcdParseError as e: exit(f'uninames build: {e}')
  report_overlaps(tables, label=args.ucd_dir)
  write_tables(args.out, tables)
  errL(f'uninames build: wrote {args.out}: {tables.summary()}')


if __name__ == '__main__': main()
