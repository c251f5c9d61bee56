import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

LEXICON_PATH = Path(__file__).resolve().parent.parent / "data" / "lexicon_es.json"


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def load_lexicon(path: Path = LEXICON_PATH) -> Mapping[str, Any]:
    """
    Loads a lexicon file (phrase lists, synonym bank, templates) into
    read-only mappings and tuples.
    """
    with open(path, "r", encoding="utf-8") as f:
        return _freeze(json.load(f))


@lru_cache(maxsize=1)
def default_lexicon() -> Mapping[str, Any]:
    return load_lexicon()
