# ruletok/normalizers.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

import regex as re
from typing import List, Optional

from .errors import InvalidInputTypeError

class Normalizer:
    """Base class for Normalizers (Optional Interface)."""
    def normalize_str(self, text: str) -> str:
        raise NotImplementedError

class Lowercase(Normalizer):
    """Converts the input string to lowercase."""
    def normalize_str(self, text: str) -> str:
        """
        Converts the input string to lowercase.

        Args:
            text (str): The input string.

        Returns:
            str: The lowercased string.
        """
        return text.lower()

class Strip(Normalizer):
    """
    Removes leading and trailing characters.

    Args:
        chars (Optional[str], optional): Characters to remove, as for `str.strip`.
            Defaults to None (any whitespace).
    """
    def __init__(self, chars: Optional[str] = None):
        self.chars = chars

    def normalize_str(self, text: str) -> str:
        return text.strip(self.chars)

class CollapseWhitespace(Normalizer):
    """
    Replaces every maximal run of whitespace (spaces, tabs, newlines)
    with a single ASCII space.
    """
    _WHITESPACE_RUN = re.compile(r"\s+")

    def normalize_str(self, text: str) -> str:
        """
        Collapses whitespace runs.

        Args:
            text (str): The input string.

        Returns:
            str: The string with each whitespace run replaced by " ".
        """
        return self._WHITESPACE_RUN.sub(" ", text)

class Sequence(Normalizer):
    """
    Applies a sequence of normalizers in the order they are given.

    Args:
        normalizers (List[Normalizer]): A list of normalizer objects to apply.
    """
    def __init__(self, normalizers: List[Normalizer]):
        if not isinstance(normalizers, list) or not all(isinstance(n, Normalizer) for n in normalizers):
             raise TypeError("Expected a list of Normalizer instances.")
        self.normalizers = normalizers

    def normalize_str(self, text: str) -> str:
        """
        Applies each normalizer in the sequence to the text.

        Args:
            text (str): The input string.

        Returns:
            str: The normalized string after applying all normalizers.
        """
        for normalizer in self.normalizers:
            text = normalizer.normalize_str(text)
        return text


def default_normalizer() -> Sequence:
    """Lowercase, collapse whitespace, then trim the single edge spaces left over."""
    # Collapsing first leaves only " " at the edges, so one \s class covers both steps
    return Sequence([Lowercase(), CollapseWhitespace(), Strip(" ")])

_DEFAULT_NORMALIZER = default_normalizer()

def normalize(text: str) -> str:
    """Applies the default normalizer to `text`. Idempotent."""
    if not isinstance(text, str):
        raise InvalidInputTypeError(text)
    return _DEFAULT_NORMALIZER.normalize_str(text)
