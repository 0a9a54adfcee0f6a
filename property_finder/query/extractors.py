"""Pull prices and bedroom counts out of free text."""

import re
from decimal import Decimal

_DIGITS = re.compile(r"[0-9]+")
# "500k" -> "500000"; a k that starts a word ("keys") is left alone
_THOUSANDS_SUFFIX = re.compile(r"(?<=[0-9])[kK](?![A-Za-z])")

MAX_BEDROOMS = 10


def extract_numeric_value(text: str) -> Decimal | None:
    """Return the first number mentioned in ``text``.

    Dollar signs and thousands separators are ignored and a ``k`` suffix
    multiplies by one thousand, so ``"$1,200"`` and ``"$500k"`` style
    amounts are understood.

    Parameters
    ----------
    text : str
        Free text such as ``"under $500k"``.

    Returns
    -------
    Decimal | None
        The first run of digits, or None when the text has none.
    """
    cleaned = text.replace("$", "").replace(",", "")
    cleaned = _THOUSANDS_SUFFIX.sub("000", cleaned)
    match = _DIGITS.search(cleaned)
    if match is None:
        return None
    return Decimal(match.group())


def extract_bedroom_count(text: str) -> int:
    """Return the bedroom count mentioned in ``text``.

    "studio" means zero bedrooms. Otherwise the first number between 0
    and ``MAX_BEDROOMS`` wins; larger numbers (prices, years) are skipped.
    Returns 0 when nothing qualifies.
    """
    if "studio" in text.lower():
        return 0

    for match in _DIGITS.finditer(text):
        count = int(match.group())
        if 0 <= count <= MAX_BEDROOMS:
            return count
    return 0
