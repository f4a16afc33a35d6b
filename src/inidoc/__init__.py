# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:05:26
# @Author : Kariko Lin

import logging

from .ini import (
    IniDocument, IniSection,
    IniError, IniSyntaxError, IniParser, ParseResult,
    parse, parse_partial, load
)
from .export import to_plain, dump_yaml, dump_json

__all__ = [
    'IniDocument', 'IniSection',
    'IniError', 'IniSyntaxError', 'IniParser', 'ParseResult',
    'parse', 'parse_partial', 'load',
    'to_plain', 'dump_yaml', 'dump_json'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
