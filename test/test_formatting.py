"""
Formatting module behavioral tests (word wrapping and placeholders).

Scope
- Validate the greedy single-paragraph wrapper: width bound, dropped long words,
  whitespace normalization, empty input, and the non-negative width precondition.
- Validate the multi-paragraph wrapper: blank separators, discarded empty paragraphs.
- Validate placeholder rendering and parsing, and the indent helper.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import re
import unittest
from unittest import TestCase

from synopsis import (
    chop_single_paragraph,
    chop_multiple_paragraphs,
    format_placeholders,
    parse_placeholders,
    indent,
)

# A line is empty or words separated by exactly one space.
TIDY = re.compile(r"^(((\S+ )+)?\S+)?$")


class TestChopSingleParagraph(TestCase):
    """Behavioral tests for chop_single_paragraph."""

    def testBreaksBeforeOverflow(self):
        self.assertEqual(chop_single_paragraph("foo bar baz", 7), ["foo bar", "baz"])

    def testFillsLineExactlyToWidth(self):
        self.assertEqual(chop_single_paragraph("aaa bbb", 7), ["aaa bbb"])
        self.assertEqual(chop_single_paragraph("aaa bbbb", 7), ["aaa", "bbbb"])

    def testWordAsWideAsTheLineIsKept(self):
        self.assertEqual(chop_single_paragraph("abcdefg", 7), ["abcdefg"])

    def testLinesStayWithinWidthAndTidy(self):
        text = (
            "This is just a couple sentences for the `chopSingleParagraph` test. Note"
            " the use of the two backticks (`) and even the parantheses to show how unique"
            " characters provided some useful edge cases. Hopefully this will be into lines"
            " no longer than 32 characters."
        )
        lines = chop_single_paragraph(text, 32)
        self.assertGreater(len(lines), 1)
        for line in lines:
            self.assertLessEqual(len(line), 32)
            self.assertRegex(line, TIDY)

    def testLongWordIsDropped(self):
        text = (
            "There should be nothing in between these arrows -> "
            "reallyreallyreallyreallylongword <- because the word is too long"
        )
        self.assertEqual(chop_single_paragraph(text, 30), [
            "There should be nothing in",
            "between these arrows -> <-",
            "because the word is too long",
        ])

    def testWhitespaceIsNormalized(self):
        text = "             \t\tThis \n\n\t is a short sentence.\t\t       "
        self.assertEqual(chop_single_paragraph(text, 32), ["This is a short sentence."])

    def testEmptyTextYieldsSingleEmptyLine(self):
        self.assertEqual(chop_single_paragraph("", 32), [""])
        self.assertEqual(chop_single_paragraph("   \t ", 32), [""])

    def testZeroWidthDropsEveryWord(self):
        text = "The length is set to 0, so there should be a single empty string returned."
        self.assertEqual(chop_single_paragraph(text, 0), [""])

    def testNegativeWidthRejected(self):
        with self.assertRaises(ValueError):
            chop_single_paragraph("anything", -1)

    def testNonIntegerWidthRejected(self):
        with self.assertRaises(TypeError):
            chop_single_paragraph("anything", 3.5)


class TestChopMultipleParagraphs(TestCase):
    """Behavioral tests for chop_multiple_paragraphs."""

    def testBlankEntrySeparatesParagraphs(self):
        self.assertEqual(chop_multiple_paragraphs("a b\n\nc d", 10), ["a b", "", "c d"])

    def testSingleNewlineAlsoSeparates(self):
        self.assertEqual(chop_multiple_paragraphs("a\nb", 10), ["a", "", "b"])

    def testEmptyAndWhitespaceParagraphsDiscarded(self):
        text = (
            "\n\n\t\t   This is    the first   paragraph.\n"
            " \nThis is the second paragraph.  \t\t\n\n\n\n"
            " This is the third and final paragraph.\n\t\n\t"
        )
        self.assertEqual(chop_multiple_paragraphs(text, 32), [
            "This is the first paragraph.",
            "",
            "This is the second paragraph.",
            "",
            "This is the third and final",
            "paragraph.",
        ])

    def testNoTrailingBlank(self):
        lines = chop_multiple_paragraphs("one\n\ntwo\n\n", 10)
        self.assertEqual(lines[-1], "two")

    def testNothingToWrap(self):
        self.assertEqual(chop_multiple_paragraphs("", 10), [])
        self.assertEqual(chop_multiple_paragraphs("\n\n\n", 10), [])

    def testEveryParagraphRespectsWidth(self):
        text = (
            "This is just a couple sentences for the `chopMultipleParagraph` test."
            " Hopefully this will be into lines no longer than 32 characters.\n\nThis"
            " is just another paragraph that serves to test the \"multiple\" part of the new"
            " function because otherwise everything is the same."
        )
        lines = chop_multiple_paragraphs(text, 32)
        self.assertEqual(lines.count(""), 1)
        for line in lines:
            self.assertLessEqual(len(line), 32)
            self.assertRegex(line, TIDY)


class TestPlaceholders(TestCase):
    """Behavioral tests for placeholder rendering and parsing."""

    def testFormatSingle(self):
        self.assertEqual(format_placeholders(["foo"]), "<foo>")

    def testFormatKeepsOrder(self):
        self.assertEqual(format_placeholders(["foo", "bar", "baz"]), "<foo> <bar> <baz>")

    def testFormatNothing(self):
        self.assertEqual(format_placeholders([]), "")

    def testParseReadsBackFormat(self):
        self.assertEqual(parse_placeholders("<src> <dst>"), ["src", "dst"])

    def testParseNothing(self):
        self.assertEqual(parse_placeholders(""), [])

    def testParseMalformedRejected(self):
        with self.assertRaises(ValueError):
            parse_placeholders("src dst")


class TestIndent(TestCase):
    """Behavioral tests for indent."""

    def testPrefixesAndTerminatesEveryLine(self):
        self.assertEqual(indent(["a", "", "b"], 2), "  a\n  \n  b\n")

    def testNoLines(self):
        self.assertEqual(indent([], 4), "")


if __name__ == "__main__":
    unittest.main()
