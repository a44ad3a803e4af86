"""
Phrase Loader: YAML phrase documents to caller input.

Lets the CLI driver evaluate phrases written as data. Leaves are boolean
literals (mapped to TRUE_A / FALSE_A), operators are token strings or names,
nesting uses YAML lists. This is structured data, not a textual boolean
syntax: the document already has the phrase's shape.

YAML Schema:
```yaml
phrase:
  - true
  - AND
  - [false, "|", true]
  - OR
  - ["!", false]
```

Operator tokens that start with YAML indicator characters ("&", "!", "|")
must be quoted; the names AND, OR, XOR, NAND, NOR and NOT need no quoting.
A bare top-level list is accepted as well as the `phrase:` mapping.

Usage:
    raw = load_phrase_file("phrases/sample.yaml")
    result = await evaluate(raw)
"""

from __future__ import annotations

from pathlib import Path as FilePath
from typing import Any

import yaml

from .nodes import FALSE_A, TRUE_A, Operator
from .types import Path, PhraseError


class PhraseLoadError(PhraseError):
    """Phrase document cannot be read or holds unsupported values."""

    label = "Unloadable phrase"


def phrase_from_data(data: Any, path: Path = ()) -> Any:
    """
    Convert parsed YAML data to caller input for build_phrase().

    Args:
        data: Parsed YAML node (bool, str, list)
        path: Position within the document, for error messages

    Returns:
        Nested lists of TRUE_A / FALSE_A predicates and operator tokens

    Raises:
        PhraseLoadError: If a value is neither a boolean, operator token nor list
    """
    if isinstance(data, bool):
        return TRUE_A if data else FALSE_A

    if isinstance(data, str):
        if Operator.from_token(data) is None:
            raise PhraseLoadError(path, f"unknown token {data!r}")
        return data

    if isinstance(data, list):
        return [phrase_from_data(item, path + (i,)) for i, item in enumerate(data)]

    raise PhraseLoadError(
        path,
        f"unsupported {type(data).__name__} value {data!r}; "
        "use true/false, operator tokens or lists",
    )


def load_phrase(text: str) -> Any:
    """Parse a YAML phrase document from a string."""
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PhraseLoadError((), f"invalid YAML: {e}") from e

    if isinstance(raw, dict):
        if "phrase" not in raw:
            raise PhraseLoadError((), "mapping document requires a 'phrase' key")
        raw = raw["phrase"]

    if raw is None:
        raise PhraseLoadError((), "document is empty")

    return phrase_from_data(raw)


def load_phrase_file(file_path: str | FilePath) -> Any:
    """
    Load a YAML phrase document from disk.

    Raises:
        PhraseLoadError: If the file is missing or its content is invalid
    """
    file_path = FilePath(file_path)
    if not file_path.exists():
        raise PhraseLoadError((), f"file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return load_phrase(f.read())


__all__ = [
    "PhraseLoadError",
    "phrase_from_data",
    "load_phrase",
    "load_phrase_file",
]
