# ruletok/errors.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

class TokenizerError(Exception):
    """Base class for errors raised by the ruletok package."""


class MalformedRuleError(TokenizerError, ValueError):
    """Raised when a rule pattern cannot be compiled."""


class InvalidInputTypeError(TokenizerError, TypeError):
    """Raised (or logged) when a tokenizer entry point receives a non-string input."""
    def __init__(self, value):
        self.value = value
        super().__init__(f"Input must be a string, got {type(value).__name__}.")
