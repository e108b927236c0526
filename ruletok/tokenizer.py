# ruletok/tokenizer.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

import dataclasses
import logging
from typing import FrozenSet, Iterable, List, Optional

from .config import TokenizerConfig
from .errors import InvalidInputTypeError
from .normalizers import Normalizer, default_normalizer
from .rules import Match

logger = logging.getLogger(__name__)

class RuleBasedTokenizer:
    """
    Orchestrates the rule-based tokenization pipeline.

    raw text -> normalization -> per-rule matching -> merge/sort -> optional stop-word filter

    Args:
        config (Optional[TokenizerConfig], optional): Rules, stop words and filter
            flag. Defaults to `TokenizerConfig()`.
        normalizer (Optional[Normalizer], optional): Normalizer instance. Defaults to
            lowercase + trim + whitespace collapse.
    """
    def __init__(self, config: Optional[TokenizerConfig] = None, normalizer: Optional[Normalizer] = None):
        self.config = config if config is not None else TokenizerConfig()
        self.normalizer = normalizer if normalizer is not None else default_normalizer()

    def normalize(self, text: str) -> str:
        if not isinstance(text, str):
            raise InvalidInputTypeError(text)
        return self.normalizer.normalize_str(text)

    def find_matches(self, text: str) -> List[Match]:
        """
        Normalizes `text` and returns the merged matches of every rule, ordered by offset.

        Matches from different rules may overlap and are all kept. When two
        matches start at the same offset the one from the earlier rule comes
        first (`sorted` is stable and matches are collected in rule order).

        Args:
            text (str): Raw input text.

        Returns:
            List[Match]: Unfiltered matches with offsets into the normalized text.
        """
        normalized = self.normalize(text)
        matches: List[Match] = []
        for rule in self.config.rules:
            matches.extend(rule.find_matches(normalized))
        return sorted(matches, key=lambda m: m.index)

    def filter_stop_words(self, tokens: Iterable[str]) -> List[str]:
        """Drops stop words from `tokens` when filtering is enabled; identity otherwise."""
        tokens = list(tokens)
        if not self.config.should_filter:
            return tokens
        stop_words: FrozenSet[str] = self.config.stop_words
        kept = [token for token in tokens if token not in stop_words]
        logger.debug("Stop-word filter removed %d of %d tokens", len(tokens) - len(kept), len(tokens))
        return kept

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenizes `text` into an ordered list of token strings.

        Args:
            text (str): Raw input text.

        Returns:
            List[str]: Tokens in left-to-right order; empty for empty input.
        """
        return self.filter_stop_words(match.text for match in self.find_matches(text))

    __call__ = tokenize

    # --- Saving and Loading ---

    def save_pretrained(self, save_directory: str):
        """Saves the tokenizer configuration to `save_directory`."""
        self.config.save_pretrained(save_directory)

    @classmethod
    def from_pretrained(cls, load_directory: str) -> "RuleBasedTokenizer":
        """Loads a tokenizer whose configuration was saved with `save_pretrained`."""
        return cls(TokenizerConfig.from_pretrained(load_directory))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.config!r})"


def tokenize(
    text: str,
    config: Optional[TokenizerConfig] = None,
    *,
    rules=None,
    stop_words=None,
    should_filter: Optional[bool] = None,
) -> List[str]:
    """
    Tokenizes `text` with the default configuration or `config`.

    Each keyword given overrides the matching field of `config`; overrides are
    validated like a fresh configuration, so a malformed rule raises
    MalformedRuleError before anything is tokenized.

    Example:
        >>> tokenize("The cat sat on the mat", should_filter=True)
        ['cat', 'sat', 'mat']
    """
    config = config if config is not None else TokenizerConfig()
    overrides = {}
    if rules is not None:
        overrides["rules"] = rules
    if stop_words is not None:
        overrides["stop_words"] = stop_words
    if should_filter is not None:
        overrides["should_filter"] = should_filter
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return RuleBasedTokenizer(config).tokenize(text)
