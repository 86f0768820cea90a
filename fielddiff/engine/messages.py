"""Change message templates, keyed by locale."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageTemplates:
    """``str.format`` templates used to render change records."""

    changed: str
    added: str
    removed: str


LOCALES: dict[str, MessageTemplates] = {
    "en": MessageTemplates(
        changed="{path} changed from [{old}] to [{new}]",
        added="{path}[{key}] added: [{desc}]",
        removed="{path}[{key}] removed: [{desc}]",
    ),
    "zh": MessageTemplates(
        changed="{path} 由 [{old}] 变更成 [{new}]",
        added="{path}[{key}] 新增：[{desc}]",
        removed="{path}[{key}] 删除：[{desc}]",
    ),
}


def templates_for(locale: str) -> MessageTemplates:
    """Return the templates for *locale*; raises ValueError when unknown."""
    try:
        return LOCALES[locale.lower()]
    except KeyError:
        raise ValueError(f"Unknown locale: {locale}. Must be one of {sorted(LOCALES)}") from None
