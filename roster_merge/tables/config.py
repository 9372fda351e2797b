"""
Centralised configuration for roster table detection.

The header phrase table, the field order and the output naming rules live
here so that the detector and merger stay free of hard-coded values.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml


# ---------------------------------------------------------------------------
# Field groups
# ---------------------------------------------------------------------------

class FieldGroup(str, Enum):
    """Semantic bucket an output column belongs to."""

    REGISTRATION = "registration"
    NAME = "name"
    DAY_COUNT = "dayCount"
    STATUS = "status"


# Order in which groups are read from a sheet and laid out in the output.
FIELD_ORDER: Tuple[FieldGroup, ...] = (
    FieldGroup.REGISTRATION,
    FieldGroup.NAME,
    FieldGroup.DAY_COUNT,
    FieldGroup.STATUS,
)


# ---------------------------------------------------------------------------
# Header phrases (matched as lower-case substrings)
# ---------------------------------------------------------------------------

PhraseTable = Mapping[FieldGroup, Tuple[str, ...]]

DEFAULT_HEADER_PHRASES: Dict[FieldGroup, Tuple[str, ...]] = {
    FieldGroup.REGISTRATION: (
        "n° immatricul",
        "immatricul",
        "ﺭﻗﻢ",  # "raqm" in Arabic presentation forms
        "رقم",  # "raqm"
    ),
    FieldGroup.NAME: ("nom", "prénom", "prenom"),
    FieldGroup.DAY_COUNT: ("nombre", "jours", "jour"),
    FieldGroup.STATUS: ("situation",),
}


# ---------------------------------------------------------------------------
# Output layout
# ---------------------------------------------------------------------------

OUTPUT_SHEET_NAME = "Combined"
HEADER_LABEL_FORMAT = "{group}_{index}"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def header_label(group: FieldGroup, index: int) -> str:
    """Column label for the *index*-th (1-based) column of *group*."""
    return HEADER_LABEL_FORMAT.format(group=group.value, index=index)


# ---------------------------------------------------------------------------
# Phrase overrides
# ---------------------------------------------------------------------------

def _coerce_group(key: Any) -> FieldGroup:
    text = str(key).strip()
    for group in FieldGroup:
        if text == group.value or text.lower() == group.name.lower():
            return group
    raise ValueError(f"Unknown field group in phrase table: {key!r}")


def load_header_phrases(path: Optional[Union[str, Path]]) -> Dict[FieldGroup, Tuple[str, ...]]:
    """
    Load phrase overrides from a JSON or YAML mapping of group -> phrases.

    Groups present in the file replace the default phrases of that group;
    groups absent from it keep :data:`DEFAULT_HEADER_PHRASES`.
    """
    phrases = dict(DEFAULT_HEADER_PHRASES)
    if not path:
        return phrases
    source = Path(path).expanduser()
    raw_text = source.read_text(encoding="utf-8")
    try:
        if source.suffix.lower() == ".json":
            data = json.loads(raw_text)
        else:
            data = yaml.safe_load(raw_text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ValueError(f"Invalid phrase table {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Phrase table must be a mapping: {source}")
    for key, values in data.items():
        group = _coerce_group(key)
        if isinstance(values, str):
            values = [values]
        cleaned = tuple(str(v).strip().lower() for v in (values or []) if str(v).strip())
        phrases[group] = cleaned
    return phrases
