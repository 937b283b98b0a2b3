from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Union

from xdglaunch.parsers import Key, Locale, decode_text, parse_keyfile, parse_locale

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview, str]


class KeyFile:
    """
    Read-only view of a parsed key file: group name -> {Key -> raw value}.

    Duplicate keys, inside one group or across repeated headers of the same
    group, collapse to the value parsed last.
    """

    __slots__ = ("_groups",)

    def __init__(self, groups: Mapping[str, Mapping[Key, str]]) -> None:
        self._groups: Mapping[str, Mapping[Key, str]] = MappingProxyType(
            {name: MappingProxyType(dict(entries)) for name, entries in groups.items()}
        )

    @classmethod
    def parse(cls, data: Buffer) -> "KeyFile":
        """Parse a whole buffer. Raises StructuralParseError; never partial."""
        text = decode_text(data)

        merged: Dict[str, Dict[Key, str]] = {}
        for group in parse_keyfile(text):
            target = merged.setdefault(group.name, {})
            for key, value in group.entries:
                target[key] = value

        return cls(merged)

    # ----------------------------
    # Introspection
    # ----------------------------

    def groups(self) -> List[str]:
        return list(self._groups)

    def has_group(self, group_name: str) -> bool:
        return group_name in self._groups

    def keys(self, group_name: str) -> Iterator[Key]:
        return iter(self._groups.get(group_name, {}))

    def __contains__(self, group_name: object) -> bool:
        return group_name in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyFile):
            return NotImplemented
        return {k: dict(v) for k, v in self._groups.items()} == {
            k: dict(v) for k, v in other._groups.items()
        }

    def __repr__(self) -> str:
        return f"KeyFile(groups={self.groups()!r})"

    # ----------------------------
    # Lookups
    # ----------------------------

    def _get_value(
        self, group_name: str, key: str, locale: Optional[Locale]
    ) -> Optional[str]:
        group = self._groups.get(group_name)
        if group is None:
            return None
        return group.get(Key(name=key, locale=locale))

    def get_default_string(self, group_name: str, key: str) -> Optional[str]:
        return self._get_value(group_name, key, None)

    def get_localized_string(
        self, group_name: str, key: str, locale: str
    ) -> Optional[str]:
        """
        Exact match on `key[locale]` only. An unparsable locale, or a locale
        with no value of its own, gives None (no fallback to less specific
        locales or to the default value).
        """
        parsed = parse_locale(locale)
        if parsed is None:
            logger.debug("ignoring invalid locale query %r", locale)
            return None
        return self._get_value(group_name, key, parsed)

    def get_boolean(self, group_name: str, key: str) -> Optional[bool]:
        value = self._get_value(group_name, key, None)
        if value == "true":
            return True
        if value == "false":
            return False
        return None
