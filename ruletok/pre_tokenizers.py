# ruletok/pre_tokenizers.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
 Twitter: @Mmorgan_ML
"""

import logging
import regex as re
from typing import List, Literal, Optional

import numpy as np # For return_tensors='np'

from .errors import InvalidInputTypeError, MalformedRuleError

logger = logging.getLogger(__name__)

# Words, or a single common punctuation mark
ADVANCED_PATTERN = r"""\w+|[.,!?;:"'(){}\[\]]"""

class PreTokenizer:
    """Base class for the standalone splitters (Optional Interface)."""
    def pre_tokenize_str(self, text: str) -> List[str]:
        """
        Splits the input string into tokens.

        Args:
            text (str): The input string. Not normalized.

        Returns:
            List[str]: A list of string splits.
        """
        raise NotImplementedError

class SpaceSplit(PreTokenizer):
    """
    Splits on literal single spaces.

    Consecutive spaces produce empty strings, and punctuation stays attached
    to the neighbouring word.
    """
    def pre_tokenize_str(self, text: str) -> List[str]:
        return text.split(" ")

class RegexSplit(PreTokenizer):
    """
    Returns every non-overlapping match of one pattern.

    Args:
        pattern (str): Pattern to match. Defaults to ADVANCED_PATTERN.
    """
    def __init__(self, pattern: str = ADVANCED_PATTERN):
        try:
            self._regex_pattern = re.compile(pattern)
        except re.error as e:
            raise MalformedRuleError(f"Could not compile pattern {pattern!r}: {e}") from e

    def pre_tokenize_str(self, text: str) -> List[str]:
        """
        Finds all matches of the pattern in `text`.

        Args:
            text (str): The input string.

        Returns:
            List[str]: Matched substrings; empty if nothing matches.
        """
        return [m.group(0) for m in self._regex_pattern.finditer(text) if m.group(0)]


def split_on_spaces(text: str) -> List[str]:
    """Splits `text` on single space characters, keeping empty strings."""
    return SpaceSplit().pre_tokenize_str(text)

def regex_tokenize(text: str, pattern: str = ADVANCED_PATTERN) -> List[str]:
    """Returns all matches of `pattern` in the raw `text` (no normalization)."""
    return RegexSplit(pattern).pre_tokenize_str(text)

def char_codes(
    text: str,
    return_tensors: Optional[Literal["pt", "np"]] = None,
    strict: bool = False,
):
    """
    Converts each character (code point) of `text` to its numeric code point.

    A non-string input is an InvalidInputTypeError: it is logged and an empty
    result is returned, or raised when `strict` is True.

    Args:
        text (str): The input string.
        return_tensors (Optional[Literal["pt", "np"]], optional): Return a torch
            tensor or numpy array instead of a list. Defaults to None.
        strict (bool, optional): Raise instead of logging. Defaults to False.

    Returns:
        List[int] (or tensor/array): One code point per character.
    """
    if not isinstance(text, str):
        error = InvalidInputTypeError(text)
        if strict:
            raise error
        logger.error("%s: %s", error.__class__.__name__, error)
        codes = []
    else:
        codes = [ord(char) for char in text]

    if return_tensors == "pt":
        import torch # Optional dependency, only needed for tensors
        return torch.tensor(codes, dtype=torch.long)
    elif return_tensors == "np":
        return np.array(codes, dtype=np.int64)
    elif return_tensors is not None:
        raise ValueError(f"Unsupported return_tensors: {return_tensors!r}")
    return codes
