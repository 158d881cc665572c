"""Plain-text word lists, one word per line."""

from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Union


@lru_cache(maxsize=8)
def _load(path: Path, min_length: int) -> FrozenSet[str]:
    words = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if len(word) >= min_length and word.isalpha():
                words.add(word)
    return frozenset(words)


def load_word_list(path: Union[str, Path], min_length: int = 1) -> FrozenSet[str]:
    """
    Load the upper-cased words of the list at `path`.

    Lines shorter than `min_length` or containing non-letters are skipped.
    Results are cached per resolved path.

    Raises:
        FileNotFoundError: If the list does not exist
    """
    path = Path(path).resolve()
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")
    return _load(path, min_length)

