# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:31:05
# @Author : Kariko Lin

"""Line based INI reader.

Each line is one of: blank, comment (`;` or `#`), `key = value`, `[section]`.
Anything else stops the reading at once, with `IniSyntaxError`.

Note that `key = value` is checked BEFORE `[section]`,
so `[foo]=bar` is a pair whose key is `[foo]`, not a section.
"""

import logging
from io import StringIO, TextIOBase
from re import compile as regex
from typing import IO, NamedTuple

from chardet import detect as guess_codec

from .model import IniDocument
from ..abstract import SourceHandler

__all__ = [
    'IniError', 'IniSyntaxError', 'ParseResult', 'IniParser',
    'parse', 'parse_partial', 'load'
]

SECTION_PATTERN = regex(r'\[(.*)\]')
ASSIGN_PATTERN = regex(r'([^=]+)=(.*)')


class IniError(Exception):
    """Base of errors raised by this package."""
    pass


class IniSyntaxError(IniError):
    """A line that is neither a pair nor a section declaration."""
    def __init__(
        self, lineno: int, source: str,
        document: IniDocument | None = None
    ) -> None:
        super().__init__(f'invalid INI syntax on line {lineno}: {source}')
        self.__lineno = lineno
        self.__source = source
        self.__doc = document

    @property
    def lineno(self) -> int:
        """1-based."""
        return self.__lineno

    @property
    def source(self) -> str:
        """The erroneous line, without leading or trailing whitespace."""
        return self.__source

    @property
    def document(self) -> IniDocument | None:
        """What had been read before the failure."""
        return self.__doc


class ParseResult(NamedTuple):
    document: IniDocument
    error: Exception | None = None


class IniParser(SourceHandler[IniDocument]):
    def __init__(self, rootfile: str, encoding: str | None = None) -> None:
        super().__init__(rootfile)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: IO[str] | IO[bytes] | TextIOBase,
        ins: IniDocument | None = None,
        encoding: str = 'utf-8'
    ) -> IniDocument:
        """Read lines from `buf` until EOF, filling `ins` (or a new doc).

        `bytes` lines are decoded with `encoding`.
        Errors raised by `buf` itself are left as they are.
        Pairs read before an `IniSyntaxError` are kept in `ins`.
        """
        if ins is None:
            ins = IniDocument()
        this_sect = ''
        lineno = 0
        while line := buf.readline():
            lineno += 1
            if isinstance(line, bytes):
                line = line.decode(encoding)
            line = line.strip()
            if not line or line[0] in ';#':
                continue

            if (groups := ASSIGN_PATTERN.fullmatch(line)) is not None:
                key, val = groups[1].strip(), groups[2].strip()
                ins.section(this_sect)[key] = val
            elif (groups := SECTION_PATTERN.fullmatch(line)) is not None:
                this_sect = groups[1].strip()
                # an empty section is still a section.
                ins.section(this_sect)
                logging.debug(f'line {lineno}: entering [{this_sect}]')
            else:
                raise IniSyntaxError(lineno, line, ins)
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = guess_codec(raw)
        if (
            codec is None
            or codec['encoding'] is None
            or codec['confidence'] < 0.8
        ):
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logging.debug(
            f'{filename}: decoding as {codec["encoding"]} '
            f'({codec["confidence"]:.2f})')
        return StringIO(raw.decode(codec['encoding']))

    def read(self) -> IniDocument:
        """Read the file this `IniParser` is bound to.

        If no encoding was given, the codec is guessed with `chardet`
        (UTF-8 when unsure).
        """
        try:
            if self._codec is None:
                return self.readstream(self._decode_file(self._fn))
            # only '\n' ends a line, a bare '\r' stays in the text.
            with open(
                self._fn, 'r', encoding=self._codec, newline='\n'
            ) as fp:
                return self.readstream(fp)
        except IniSyntaxError as e:
            logging.warning(f'{self._fn}: {e}')
            raise

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"


def parse(
    stream: IO[str] | IO[bytes] | TextIOBase, encoding: str = 'utf-8'
) -> IniDocument:
    """Parse an INI stream, raising on the first bad line."""
    return IniParser.readstream(stream, encoding=encoding)


def parse_partial(
    stream: IO[str] | IO[bytes] | TextIOBase, encoding: str = 'utf-8'
) -> ParseResult:
    """Like `parse()`, but returns syntax and read errors instead.

    Read errors are `OSError` and `ValueError` (decoding failures,
    closed streams). The document returned holds everything read
    before `error` (if any).
    """
    doc = IniDocument()
    try:
        IniParser.readstream(stream, doc, encoding)
    except (IniSyntaxError, OSError, ValueError) as e:
        return ParseResult(doc, e)
    return ParseResult(doc)


def load(path: str, encoding: str | None = None) -> IniDocument:
    """Read an INI file from disk."""
    return IniParser(path, encoding).read()
