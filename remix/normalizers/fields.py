"""
Field extractors.
Each reads one raw fragment and returns a typed value, or None when the
fragment is missing or doesn't match. None of them raise.
"""
import math
import re
from typing import Optional
from urllib.parse import urljoin


_REVIEW_SCORE_RE = re.compile(r"(\d+(?:\.\d+)?) out of 5 stars")
_GROUPED_INT_RE = re.compile(r"\d+(?:,\d+)*")
_PURCHASED_RE = re.compile(r"(\d+(?:,\d+)*(?:\.\d+)?)([Kk])?\+?")
_PURCHASE_MARKERS = ("bought", "reordered")
_PRICE_NOISE_RE = re.compile(r"[^0-9.]")
_LEADING_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def round_half_up(value: float) -> Optional[int]:
    """Round to the nearest integer, with halves rounded up (2.5 -> 3). None for inf/nan."""
    if not math.isfinite(value):
        return None
    return int(math.floor(value + 0.5))


def _parse_int(digits: str) -> Optional[int]:
    # int() refuses digit strings past the interpreter's conversion limit
    try:
        return int(digits)
    except ValueError:
        return None


def _clean_text(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = str(text).strip()
    return text or None


def extract_review_score(label: Optional[str]) -> Optional[float]:
    """Score from a label like "4.6 out of 5 stars". Scores above 5 are unavailable."""
    if not label:
        return None
    match = _REVIEW_SCORE_RE.search(label)
    if not match:
        return None
    score = float(match.group(1))
    return score if score <= 5 else None


def extract_num_ratings(label: Optional[str]) -> Optional[int]:
    """First comma-grouped integer in the ratings label ("12,345 ratings" -> 12345)."""
    if not label:
        return None
    match = _GROUPED_INT_RE.search(label)
    if not match:
        return None
    return _parse_int(match.group(0).replace(",", ""))


def extract_num_purchased(text: Optional[str]) -> Optional[int]:
    """
    Recent purchase count from text like "2K+ bought in past month".

    Only text mentioning "bought" or "reordered" is considered, so unrelated
    secondary lines carrying numbers are ignored. A K suffix multiplies by 1000
    and the product is rounded to the nearest integer ("2.5K" -> 2500).
    """
    if not text or not any(marker in text for marker in _PURCHASE_MARKERS):
        return None

    match = _PURCHASED_RE.search(text)
    if not match:
        return None

    number = match.group(1).replace(",", "")
    if match.group(2):
        return round_half_up(float(number) * 1000)
    return _parse_int(number.split(".")[0])


def extract_price(text: Optional[str]) -> Optional[str]:
    """Offscreen price text, trimmed."""
    return _clean_text(text)


def round_price(price: Optional[str]) -> Optional[int]:
    """
    Whole-number display price from price text ("$19.99" -> 20).

    Everything except digits and dots is dropped before reading the leading
    decimal number, so "$1,299.00" reads as 1299.0.
    """
    if price is None:
        return None
    cleaned = _PRICE_NOISE_RE.sub("", str(price))
    match = _LEADING_DECIMAL_RE.match(cleaned)
    if not match:
        return None
    return round_half_up(float(match.group(0)))


def extract_delivery_date(text: Optional[str]) -> Optional[str]:
    """Delivery estimate as literal text; no date parsing."""
    return _clean_text(text)


def resolve_url(ref: Optional[str], origin: str) -> Optional[str]:
    """Absolute URL for a possibly relative reference."""
    ref = _clean_text(ref)
    if ref is None:
        return None
    return urljoin(origin, ref)
