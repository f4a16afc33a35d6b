# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:09:37
# @Author : Kariko Lin

from .model import IniSection, IniDocument
from .parser import (
    IniError,
    IniSyntaxError,
    IniParser,
    ParseResult,
    parse,
    parse_partial,
    load
)
