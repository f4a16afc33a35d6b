# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/13 16:40:11
# @Author : Kariko Lin

"""`python -m inidoc FILE` prints a parsed INI file as YAML (or JSON)."""

import argparse
import codecs
import sys
from typing import Sequence

from .export import dump_json, dump_yaml
from .ini import IniError, load


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='inidoc',
        description='Parse an INI file and print what was read.')
    p.add_argument('file', help='path to the INI file')
    p.add_argument(
        '-e', '--encoding', default=None,
        help='file encoding (guessed when omitted)')
    p.add_argument(
        '-f', '--format', choices=('yaml', 'json'), default='yaml',
        help='output format (default: %(default)s)')
    p.add_argument(
        '-g', '--get', nargs=2, metavar=('SECTION', 'KEY'),
        help='print a single value instead, use "" for the default section')
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.encoding is not None:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            parser.error(f'unknown encoding: {args.encoding}')
    try:
        doc = load(args.file, args.encoding)
    except (IniError, OSError, UnicodeDecodeError) as e:
        print(f'inidoc: {args.file}: {e}', file=sys.stderr)
        return 1

    if args.get is not None:
        value, found = doc.get(*args.get)
        if not found:
            print('inidoc: [%s] %s: not found' % tuple(args.get),
                  file=sys.stderr)
            return 1
        print(value)
        return 0

    if args.format == 'json':
        print(dump_json(doc))
    else:
        dump_yaml(doc, sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
