# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/10/13 15:02:48
# @Author : Kariko Lin

"""Convert a parsed `IniDocument` into other formats.

There is no way back to INI text, on purpose.
"""

import json
from typing import IO

import yaml

from .ini.model import IniDocument

__all__ = ['to_plain', 'dump_yaml', 'dump_json']


def to_plain(doc: IniDocument) -> dict[str, dict[str, str]]:
    """Nested builtin dicts, keeping the section order."""
    return {name: sect.to_dict() for name, sect in doc.items()}


def dump_yaml(doc: IniDocument, stream: IO[str] | None = None) -> str | None:
    """Dump as YAML. Returns the text when `stream` is None.

    All values stay strings, e.g. `1` is written as `'1'`.
    """
    return yaml.safe_dump(
        to_plain(doc), stream,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False)


def dump_json(doc: IniDocument, stream: IO[str] | None = None,
              indent: int = 2) -> str | None:
    if stream is None:
        return json.dumps(to_plain(doc), ensure_ascii=False, indent=indent)
    json.dump(to_plain(doc), stream, ensure_ascii=False, indent=indent)
    return None
