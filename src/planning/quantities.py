"""Permissive parsing of user-entered quantities.

Every numeric cell in the planning table is free text. Calculations never
reject input: anything that is not a finite, non-negative number counts as
zero while the raw text stays on the record for redisplay.
"""

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

#: Plain decimal text; ASCII digits only, no exponent or digit separators
NUMBER_PATTERN = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_quantity(raw: Any) -> float:
    """
    Parse a raw cell value into a non-negative number.

    Accepts numbers and numeric text. Surrounding whitespace, a leading '$'
    and thousands separators are ignored so sales can be typed as '$1,250'.

    Args:
        raw: Value as entered (str, int, float or None)

    Returns:
        Parsed value, or 0.0 if empty, unparsable, negative or not finite

    Examples:
        >>> parse_quantity("1000")
        1000.0
        >>> parse_quantity("$1,250.50")
        1250.5
        >>> parse_quantity("abc")
        0.0
        >>> parse_quantity(None)
        0.0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", "")
        if text.startswith("$"):
            text = text[1:].strip()
        if not text:
            return 0.0
        if not NUMBER_PATTERN.fullmatch(text):
            logger.debug(f"Treating unparsable quantity {raw!r} as zero")
            return 0.0
        value = float(text)

    if not math.isfinite(value) or value < 0:
        logger.debug(f"Treating out-of-range quantity {raw!r} as zero")
        return 0.0

    return value
