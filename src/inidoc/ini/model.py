# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 21:15:40
# @Author : Kariko Lin

"""
Basically a plain INI structure: sections of string pairs.

Pairs declared before any `[section]` live in the section named `""`.
"""

from collections.abc import Mapping, MutableMapping
from typing import Iterator

__all__ = ['IniSection', 'IniDocument']


class IniSection(MutableMapping[str, str]):
    """A dict of one section's pairs.

    Setting an existing key just overrides it, the last one wins.
    """
    def __init__(
        self, section_name: str = '', /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """A whole INI file, i.e. section names to `IniSection`.

        ```ini
        key = val  ; goes to section ""

        [section]
        key233 = val666
        ```

    `self[name]` never creates anything; use `self.section(name)` for that.
    """
    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = IniSection(key, dict(value))

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return 'IniDocument(%r)' % list(self.__raw)

    def section(self, name: str) -> IniSection:
        """Get the section named `name`, registering an empty one if absent.

        The very same object is handed out on every call,
        so pairs set through it are kept by the document.
        """
        if (ret := self.__raw.get(name)) is None:
            ret = self.__raw[name] = IniSection(name)
        return ret

    # NOTE: unlike `Mapping.get()`, this is a two-level lookup.
    def get(self, section: str, key: str) -> tuple[str, bool]:  # type: ignore[override]
        """Look up `key` in `section` without creating either.

        Returns:
            `(value, True)` if found, otherwise `("", False)`.
        """
        if (sect := self.__raw.get(section)) is not None and key in sect:
            return sect[key], True
        return '', False
