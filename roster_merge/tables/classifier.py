"""
HeaderClassifier: map a header cell's text to the field groups it names.
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from roster_merge.tables.config import DEFAULT_HEADER_PHRASES, FIELD_ORDER, FieldGroup, PhraseTable


class HeaderClassifier:
    """
    Case-insensitive substring matcher over a phrase table.

    Groups are independent: a text may match several of them (``"Nombre"``
    contains ``"nom"`` and lands in both ``name`` and ``dayCount``).
    """

    def __init__(self, phrases: Optional[PhraseTable] = None):
        source = phrases if phrases is not None else DEFAULT_HEADER_PHRASES
        self._phrases = {
            group: tuple(p.lower() for p in source.get(group, ()) if p)
            for group in FIELD_ORDER
        }

    @property
    def phrases(self) -> PhraseTable:
        return dict(self._phrases)

    def classify(self, text: Optional[str]) -> FrozenSet[FieldGroup]:
        if not text:
            return frozenset()
        lowered = str(text).lower()
        return frozenset(
            group
            for group, phrases in self._phrases.items()
            if any(p in lowered for p in phrases)
        )

    def is_header_text(self, text: Optional[str]) -> bool:
        return bool(self.classify(text))
