"""
List tokenizer for list-valued SVG attributes.
"""

import re
from typing import List, Optional

# Commas and whitespace both separate list items
_SEPARATORS = re.compile(r"[\s,]+")


def parse_list(value: Optional[str]) -> List[str]:
    """Split an attribute value into its non-empty tokens.

    Blank, delimiter-only or missing values yield an empty list.
    """
    if not value:
        return []
    return [token for token in _SEPARATORS.split(value) if token]
