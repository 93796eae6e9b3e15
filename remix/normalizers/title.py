"""
Product title segmentation.

Splits a free-text title such as
"JBL Clip 3, Black - Waterproof, Durable & Portable Bluetooth Speaker - Up to 10 Hours of Play"
into a base name ("JBL Clip 3") and descriptive attributes
("Black", "Waterproof", ...), using structure alone.
A title that opens with a delimiter word ("For iPhone 15 Case") has an empty base name.
"""
import re
from typing import List, NamedTuple, Optional

from remix.logger import logger


# Non-nested (...) or [...] spans. Mismatched closers are accepted.
BRACKETS_RE = re.compile(r"[\(\[]([^\)\]]+)[\)\]]")

# Applied in this order; every fragment produced so far is re-split by each
# later entry. Reordering changes results.
SPLIT_DELIMITERS = (
    re.compile(r"\s*\bwith\b\s*", re.IGNORECASE),
    re.compile(r"\s*\bfor\b\s*", re.IGNORECASE),
    re.compile(r"\s* - \s*"),
    re.compile(r"\s*[–—]\s*"),
    re.compile(r"\s*,\s*"),
    re.compile(r"\s*\|\s*"),
)

ATTRIBUTE_SPLIT_RE = re.compile(r",|\band\b", re.IGNORECASE)
_EDGE_NOISE_RE = re.compile(r"^[,\s]+|[,\s]+$")


class TitleSegments(NamedTuple):
    base_name: str
    attributes: List[str]


def _split_attribute_text(text: str) -> List[str]:
    pieces = (piece.strip() for piece in ATTRIBUTE_SPLIT_RE.split(text))
    return [piece for piece in pieces if piece]


def _clean_attribute(attr: str) -> str:
    attr = _EDGE_NOISE_RE.sub("", attr)
    if attr.startswith("and "):
        attr = attr[4:]
    return attr


def segment_title(title: Optional[str]) -> TitleSegments:
    """
    Split a product title into base name and attributes.

    Bracketed asides are harvested first and removed from the title; the rest
    is cut by the delimiter cascade. The first fragment is the base name, the
    others become attributes. Attribute order is accumulation order: bracket
    content first, then delimiter fragments left to right.

    Args:
        title: Raw product title, may be None

    Returns:
        TitleSegments(base_name, attributes)
    """
    if not title:
        return TitleSegments("", [])

    attributes: List[str] = []

    for match in BRACKETS_RE.finditer(title):
        attributes.extend(_split_attribute_text(match.group(1)))

    parts = [BRACKETS_RE.sub("", title).strip()]

    for delimiter in SPLIT_DELIMITERS:
        parts = [piece for part in parts for piece in delimiter.split(part)]

    base_name = parts[0].strip()

    for part in parts[1:]:
        attributes.extend(_split_attribute_text(part))

    attributes = [attr for attr in map(_clean_attribute, attributes) if attr]

    logger.debug(
        f"Segmented title into '{base_name}' + {len(attributes)} attributes",
        extra={"extra": {"title": title, "base_name": base_name, "attributes": attributes}}
    )
    return TitleSegments(base_name, attributes)
