"""Word list loading."""

from .wordlist import load_word_list

__all__ = ["load_word_list"]
