# ruletok/__init__.py

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

"""
Rule-based Tokenizer Package.

Provides the RuleBasedTokenizer and its components: text normalization,
pattern rules, configuration, and the standalone space/regex/char-code
splitters.
"""

from .errors import TokenizerError, MalformedRuleError, InvalidInputTypeError
from .normalizers import normalize
from .rules import Rule, Match, WORD_RULE, NUMBER_RULE, SYMBOL_RULE, DEFAULT_RULES
from .config import TokenizerConfig, DEFAULT_STOP_WORDS
from .tokenizer import RuleBasedTokenizer, tokenize
from .pre_tokenizers import split_on_spaces, regex_tokenize, char_codes, ADVANCED_PATTERN

# Define the public API of the package
__all__ = [
    "RuleBasedTokenizer",
    "TokenizerConfig",
    "tokenize",
    "normalize",
    "split_on_spaces",
    "regex_tokenize",
    "char_codes",
    "Rule",
    "Match",
    "WORD_RULE",
    "NUMBER_RULE",
    "SYMBOL_RULE",
    "DEFAULT_RULES",
    "DEFAULT_STOP_WORDS",
    "ADVANCED_PATTERN",
    "TokenizerError",
    "MalformedRuleError",
    "InvalidInputTypeError",
]
