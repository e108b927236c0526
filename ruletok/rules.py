# ruletok/rules.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

import logging
import re as std_re
import regex as re
from typing import List, NamedTuple, Optional, Union

from .errors import MalformedRuleError

logger = logging.getLogger(__name__)

PatternLike = Union[str, "re.Pattern", "std_re.Pattern"]

_REGEX_PATTERN = type(re.compile(""))
_STD_PATTERN = type(std_re.compile(""))
# Flags that mean the same thing in both engines (their bit values differ, e.g. ASCII)
_SHARED_FLAGS = ("IGNORECASE", "LOCALE", "MULTILINE", "DOTALL", "VERBOSE", "ASCII")


def _translate_flags(std_flags: int) -> int:
    """Converts `re` module flag bits into the equivalent `regex` flag bits."""
    flags = 0
    for flag_name in _SHARED_FLAGS:
        if std_flags & getattr(std_re, flag_name):
            flags |= getattr(re, flag_name)
    return flags


class Match(NamedTuple):
    """A single occurrence of a rule's pattern: the matched text and its start offset."""
    text: str
    index: int


class Rule:
    """
    A pattern-matching unit over text.

    The pattern is compiled once, at construction, so a malformed pattern is
    reported before any text is tokenized. Patterns compiled with the standard
    `re` module are recompiled with `regex`, keeping their flags, so every rule
    runs on one engine and can be saved and reloaded unchanged.

    Args:
        pattern (Union[str, Pattern]): A pattern string or an already compiled
            pattern (from `regex` or the standard `re` module).
        name (Optional[str], optional): Label used in logs and repr. Defaults
            to the pattern string.
        flags (int, optional): `regex` flags for a pattern string. Defaults to 0.
    """
    __slots__ = ("_pattern", "name")

    def __init__(self, pattern: PatternLike, name: Optional[str] = None, flags: int = 0):
        if isinstance(pattern, _REGEX_PATTERN):
            compiled = pattern
        elif isinstance(pattern, (str, _STD_PATTERN)):
            if isinstance(pattern, _STD_PATTERN):
                pattern, flags = pattern.pattern, _translate_flags(pattern.flags)
            if not isinstance(pattern, str):
                raise MalformedRuleError("Rule patterns must match text, not bytes.")
            try:
                compiled = re.compile(pattern, flags)
            except (re.error, ValueError) as e:
                raise MalformedRuleError(f"Could not compile rule pattern {pattern!r}: {e}") from e
        else:
            raise MalformedRuleError(
                f"Rule pattern must be a string or compiled pattern, got {type(pattern).__name__}."
            )
        if not isinstance(compiled.pattern, str):
            raise MalformedRuleError("Rule patterns must match text, not bytes.")
        self._pattern = compiled
        self.name = name if name is not None else compiled.pattern

    @property
    def pattern(self) -> str:
        """The source string of the compiled pattern."""
        return self._pattern.pattern

    @property
    def flags(self) -> int:
        """The `regex` flags of the compiled pattern; passing them back to Rule recreates it."""
        return self._pattern.flags

    def find_matches(self, text: str) -> List[Match]:
        """
        Scans `text` left to right and returns every non-overlapping match.

        Each scan starts at offset 0 and uses no state shared between calls.
        Zero-length matches are skipped, so every returned match is non-empty.

        Args:
            text (str): The (normalized) text to scan.

        Returns:
            List[Match]: Matches in order of discovery.
        """
        matches = [Match(m.group(0), m.start()) for m in self._pattern.finditer(text) if m.end() > m.start()]
        logger.debug("Rule %s found %d matches", self.name, len(matches))
        return matches

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self.pattern == other.pattern and self.flags == other.flags

    def __hash__(self):
        return hash((self.pattern, self.flags))

    def __repr__(self) -> str:
        if self.name != self.pattern:
            return f"Rule({self.pattern!r}, name={self.name!r})"
        return f"Rule({self.pattern!r})"


def as_rule(rule: Union[Rule, PatternLike]) -> Rule:
    """Returns `rule` unchanged if it is already a Rule, otherwise compiles it into one."""
    return rule if isinstance(rule, Rule) else Rule(rule)


# --- Default rule set ---
# Words, allowing internal apostrophes and hyphens
WORD_RULE = Rule(r"\b[\w'-]+\b", name="word")
# Runs of decimal digits
NUMBER_RULE = Rule(r"\d+", name="number")
# Runs of characters that are neither whitespace nor word characters
SYMBOL_RULE = Rule(r"[^\s\w]+", name="symbol")

DEFAULT_RULES = (WORD_RULE, NUMBER_RULE, SYMBOL_RULE)
