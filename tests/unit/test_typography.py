"""Unit tests for typography scale extraction."""

import logging

import pytest

from figma_tokens.errors import ErrorCategory, MissingFontsError
from figma_tokens.extractors import (
    get_font_families,
    get_font_sizes,
    get_letter_spacing,
    get_line_heights,
)

from tests.conftest import text


class TestFontFamilies:
    """Tests for font family extraction."""

    def test_fonts(self, make_canvas, reporter):
        """Test every "font-*" text defines a font."""
        page = make_canvas(
            text("font-body", fontFamily="Inter"),
            text("font-heading", fontFamily="Playfair Display"),
            text("font-mono", fontFamily="JetBrains Mono"),
        )

        fonts = get_font_families(page, reporter)

        assert fonts == {
            "body": "Inter",
            "heading": "Playfair Display",
            "mono": "JetBrains Mono",
        }
        assert not reporter.has_errors

    def test_missing_body_font(self, make_canvas, reporter):
        """Test a missing body font is reported once and aborts."""
        page = make_canvas(text("font-heading", fontFamily="Playfair Display"))

        with pytest.raises(MissingFontsError) as exc_info:
            get_font_families(page, reporter)

        assert exc_info.value.category is ErrorCategory.TYPOGRAPHY
        assert exc_info.value.details == {"roles": ["body"]}
        assert len(reporter.errors) == 1
        assert reporter.errors[0].message == 'Body font not found in "Typography" page'
        assert reporter.errors[0].hint == '- Please add a text element named "font-body".'

    def test_both_fonts_missing(self, make_canvas, reporter):
        """Test both missing fonts are reported before aborting."""
        with pytest.raises(MissingFontsError):
            get_font_families(make_canvas(), reporter)

        assert [e.message for e in reporter.errors] == [
            'Body font not found in "Typography" page',
            'Heading font not found in "Typography" page',
        ]


class TestFontSizes:
    """Tests for font size extraction."""

    def test_sorted_ascending(self, make_canvas):
        """Test font sizes are sorted by pixel size."""
        page = make_canvas(
            text("fontSize-xl", fontSize=32),
            text("fontSize-sm", fontSize=14),
            text("fontSize-md", fontSize=16),
        )

        assert list(get_font_sizes(page).items()) == [
            ("sm", "0.875rem"),
            ("md", "1rem"),
            ("xl", "2rem"),
        ]

    def test_logs_counts(self, make_canvas, caplog):
        """Test each typography scale logs how many values it extracted."""
        page = make_canvas(
            text("fontSize-sm", fontSize=14),
            text("fontSize-md", fontSize=16),
            text("lineHeight-tight", lineHeightPx=20),
            text("letterSpacing-wide", letterSpacing=0.8),
        )

        with caplog.at_level(logging.DEBUG, logger="figma_tokens.extractors"):
            get_font_sizes(page)
            get_line_heights(page)
            get_letter_spacing(page)

        assert caplog.messages == [
            "Extracted 2 font sizes",
            "Extracted 1 line heights",
            "Extracted 1 letter spacings",
        ]


class TestLineHeights:
    """Tests for line height extraction."""

    def test_line_height_units(self, make_canvas):
        """Test each line height unit maps to its CSS value."""
        page = make_canvas(
            text("lineHeight-tight", lineHeightPx=20, lineHeightUnit="PIXELS"),
            text(
                "lineHeight-relaxed",
                lineHeightPercentFontSize=175,
                lineHeightUnit="FONT_SIZE_%",
            ),
            text("lineHeight-normal", lineHeightUnit="INTRINSIC_%"),
        )

        assert get_line_heights(page) == {
            "tight": "1.25rem",
            "relaxed": "1.75",
            "normal": "normal",
        }

    def test_unknown_and_unset_units_are_empty(self, make_canvas):
        """Test an unrecognized or missing unit yields an empty value."""
        page = make_canvas(
            text("lineHeight-auto", lineHeightUnit="PERCENT"),
            text("lineHeight-unset", lineHeightUnit=None),
        )

        assert get_line_heights(page) == {"auto": "", "unset": ""}


class TestLetterSpacing:
    """Tests for letter spacing extraction."""

    def test_relative_to_font_size(self, make_canvas):
        """Test spacing is divided by the font size and sorted."""
        page = make_canvas(
            text("letterSpacing-wide", letterSpacing=0.8, fontSize=16),
            text("letterSpacing-tight", letterSpacing=-0.64, fontSize=32),
            text("letterSpacing-none", letterSpacing=0, fontSize=16),
        )

        assert list(get_letter_spacing(page).items()) == [
            ("tight", "-0.02em"),
            ("none", "0"),
            ("wide", "0.05em"),
        ]

    def test_ties_round_away_from_zero(self, make_canvas):
        """Test a 1px spacing at 16px becomes 0.063em."""
        page = make_canvas(text("letterSpacing-loose", letterSpacing=1, fontSize=16))

        assert get_letter_spacing(page) == {"loose": "0.063em"}
