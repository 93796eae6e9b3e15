"""
Test product title segmentation.
Base name / attribute splits for real-world title shapes.
"""
import pytest

from remix.normalizers.title import segment_title, TitleSegments


def test_typical_amazon_title():
    """Test the dash/comma cascade on a typical listing title."""
    result = segment_title(
        "JBL Clip 3, Black - Waterproof, Durable & Portable Bluetooth Speaker - Up to 10 Hours of Play"
    )
    
    assert result.base_name == "JBL Clip 3"
    assert result.attributes == [
        "Black",
        "Waterproof",
        "Durable & Portable Bluetooth Speaker",
        "Up to 10 Hours of Play"
    ]


def test_bracket_content_split_on_comma_and_and():
    """Test bracketed asides become attributes without the 'and' token."""
    result = segment_title("Widget (Red, Large and Heavy)")
    
    assert result.base_name == "Widget"
    assert result.attributes == ["Red", "Large", "Heavy"]


def test_plain_title_is_untouched():
    """Test titles without brackets or delimiters."""
    result = segment_title("  Apple AirPods Pro  ")
    
    assert result == TitleSegments("Apple AirPods Pro", [])


def test_only_brackets_gives_empty_base_name():
    result = segment_title("(Renewed)")
    
    assert result.base_name == ""
    assert result.attributes == ["Renewed"]


@pytest.mark.parametrize("title", [None, ""])
def test_missing_title(title):
    assert segment_title(title) == TitleSegments("", [])


def test_with_and_for_cascade():
    """Test 'with' splits before 'for', and fragments are re-split."""
    result = segment_title("Phone Case with Kickstand for iPhone 15")
    
    assert result.base_name == "Phone Case"
    assert result.attributes == ["Kickstand", "iPhone 15"]


def test_delimiter_words_are_case_insensitive():
    result = segment_title("Speaker WITH Mic")
    
    assert result.base_name == "Speaker"
    assert result.attributes == ["Mic"]


def test_delimiter_words_need_word_boundaries():
    """'with'/'for' inside other words don't split."""
    result = segment_title("Without Borders Forest Lamp")
    
    assert result.base_name == "Without Borders Forest Lamp"
    assert result.attributes == []


def test_hyphenated_words_are_not_split():
    result = segment_title("Wi-Fi Smart Plug")
    
    assert result.base_name == "Wi-Fi Smart Plug"
    assert result.attributes == []


def test_bracket_attributes_come_first():
    result = segment_title("Lamp - Warm White (2 Pack)")
    
    assert result.base_name == "Lamp"
    assert result.attributes == ["2 Pack", "Warm White"]


def test_bracket_content_skips_delimiter_cascade():
    result = segment_title("Cable (USB-C - Lightning | 6ft)")
    
    assert result.base_name == "Cable"
    assert result.attributes == ["USB-C - Lightning | 6ft"]


def test_trailing_and_residue_is_dropped():
    result = segment_title("Mug, Black, and Blue")
    
    assert result.base_name == "Mug"
    assert result.attributes == ["Black", "Blue"]


def test_pipe_and_en_dash():
    result = segment_title("Desk Lamp | LED – Dimmable")
    
    assert result.base_name == "Desk Lamp"
    assert result.attributes == ["LED", "Dimmable"]


def test_and_in_base_name_is_kept():
    """Only attribute fragments are split on 'and'."""
    result = segment_title("Salt and Pepper Grinder Set")
    
    assert result.base_name == "Salt and Pepper Grinder Set"
    assert result.attributes == []


@pytest.mark.parametrize("title, base_name, attributes", [
    ("Charger [2 Pack, USB-C]", "Charger", ["2 Pack", "USB-C"]),
    ("Socks (Black) - Cotton [6 Pairs]", "Socks", ["Black", "6 Pairs", "Cotton"]),
    ("Mug (Red]", "Mug", ["Red"]),
    ("Widget (Red AND Blue)", "Widget", ["Red", "Blue"]),
    ("Desk Lamp — Dimmable", "Desk Lamp", ["Dimmable"]),
])
def test_bracket_and_dash_variants(title, base_name, attributes):
    """Test square brackets, several spans, mismatched closers, AND and the em dash."""
    assert segment_title(title) == TitleSegments(base_name, attributes)


def test_leading_delimiter_word_gives_empty_base_name():
    result = segment_title("For iPhone 15 Case, Clear")
    
    assert result.base_name == ""
    assert result.attributes == ["iPhone 15 Case", "Clear"]


@pytest.mark.parametrize("title", [
    "JBL Clip 3, Black - Waterproof - Up to 10 Hours of Play",
    "Widget (Red, Large and Heavy)",
    "Phone Case with Kickstand for iPhone 15",
    "Desk Lamp | LED – Dimmable",
])
def test_segmenting_base_name_again_is_stable(title):
    """Test that a base name segments to itself."""
    base_name = segment_title(title).base_name
    
    assert segment_title(base_name) == TitleSegments(base_name, [])


if __name__ == "__main__":
    test_typical_amazon_title()
    test_bracket_content_split_on_comma_and_and()
    test_plain_title_is_untouched()
    test_with_and_for_cascade()
    print("\nAll segmentation tests passed!")
