"""Name preprocessing applied before any similarity algorithm runs."""

from typing import Any
import pandas as pd
import regex as re

class NamePreprocessor:
    """Normalizes names into uppercase alphabetic text.

    Every character that is not an alphabetic letter is replaced with a single
    space, surrounding whitespace is trimmed and the result is upper-cased.
    Runs of spaces inside the name are left as they are.
    """

    NON_ALPHABETIC = re.compile(r'\P{Alphabetic}')

    def process(self, value: Any) -> str:
        if self._handle_null(value):
            return ''

        text = value if isinstance(value, str) else str(value)
        text = self.NON_ALPHABETIC.sub(' ', text)
        return text.strip().upper()

    def _handle_null(self, value: Any) -> bool:
        """Check if value is null/empty."""
        if isinstance(value, str):
            return not value
        return pd.isna(value)

# Shared instance used by all matchers
_preprocessor = NamePreprocessor()

def clean(value: Any) -> str:
    """
    Normalize a name for comparison.

    Args:
        value: Raw name, typically a string. None and NaN are treated as empty.

    Returns:
        str: Uppercase name containing only letters and spaces
    """
    return _preprocessor.process(value)
