from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Locale:
    """A `lang[_COUNTRY][@modifier]` tag. Compared component-wise, as written."""
    lang: str
    country: Optional[str] = None
    modifier: Optional[str] = None

    def __str__(self) -> str:
        out = self.lang
        if self.country is not None:
            out += f"_{self.country}"
        if self.modifier is not None:
            out += f"@{self.modifier}"
        return out


@dataclass(frozen=True)
class Key:
    """A key name plus its optional locale annotation."""
    name: str
    locale: Optional[Locale] = None

    def __str__(self) -> str:
        return self.name if self.locale is None else f"{self.name}[{self.locale}]"


@dataclass(frozen=True)
class ParsedGroup:
    """One `[Group]` section in file order, before duplicates are collapsed."""
    name: str
    entries: Tuple[Tuple[Key, str], ...] = ()
