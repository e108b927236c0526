# ruletok/config.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.25
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple

from .rules import DEFAULT_RULES, Rule, as_rule

CONFIG_FILE_NAME = "tokenizer_config.json"

DEFAULT_STOP_WORDS: FrozenSet[str] = frozenset(
    ["a", "an", "the", "is", "in", "on", "at", "of", "for", "to"]
)

@dataclass(frozen=True)
class TokenizerConfig:
    """
    Configuration for the RuleBasedTokenizer.

    Read-only after construction, so one instance can be shared between
    threads and calls.
    """
    # Ordered; at equal offsets the earlier rule's token comes first
    rules: Tuple[Rule, ...] = DEFAULT_RULES
    stop_words: FrozenSet[str] = field(default=DEFAULT_STOP_WORDS)
    should_filter: bool = False

    def __post_init__(self):
        """Compiles pattern strings into Rules and lowercases the stop words."""
        if isinstance(self.rules, (str, Rule)):
            raise TypeError("rules must be a sequence of rules, not a single rule.")
        # as_rule raises MalformedRuleError here, before any tokenization
        object.__setattr__(self, "rules", tuple(as_rule(r) for r in self.rules))

        if isinstance(self.stop_words, str):
            raise TypeError("stop_words must be a collection of strings, not a single string.")
        object.__setattr__(self, "stop_words", frozenset(w.lower() for w in self.stop_words))
        object.__setattr__(self, "should_filter", bool(self.should_filter))

    def to_dict(self) -> Dict[str, Any]:
        """Returns a JSON-serializable dictionary of this configuration."""
        return {
            "rules": [{"pattern": r.pattern, "name": r.name, "flags": r.flags} for r in self.rules],
            "stop_words": sorted(self.stop_words),
            "should_filter": self.should_filter,
        }

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "TokenizerConfig":
        """Builds a configuration from `to_dict` output. Missing keys fall back to defaults."""
        kwargs = {}
        if "rules" in config:
            rules = []
            for entry in config["rules"]:
                if isinstance(entry, dict):
                    rules.append(Rule(entry["pattern"], name=entry.get("name"), flags=entry.get("flags", 0)))
                else:
                    rules.append(Rule(entry))
            kwargs["rules"] = rules
        if "stop_words" in config:
            kwargs["stop_words"] = config["stop_words"]
        if "should_filter" in config:
            kwargs["should_filter"] = config["should_filter"]
        return cls(**kwargs)

    def save_pretrained(self, save_directory: str):
        """Writes the configuration to `tokenizer_config.json` inside `save_directory`."""
        if not os.path.isdir(save_directory):
            os.makedirs(save_directory)
        config_file = os.path.join(save_directory, CONFIG_FILE_NAME)
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)

    @classmethod
    def from_pretrained(cls, load_directory: str) -> "TokenizerConfig":
        """Loads a configuration saved with `save_pretrained`."""
        if not os.path.isdir(load_directory):
            raise EnvironmentError(f"Directory not found: {load_directory}")
        config_file = os.path.join(load_directory, CONFIG_FILE_NAME)
        if not os.path.exists(config_file):
            raise EnvironmentError(f"{CONFIG_FILE_NAME} not found in {load_directory}.")
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
        return cls.from_dict(config)
