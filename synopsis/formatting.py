"""
Synopsis text formatting: word wrapping and placeholder rendering.

What this module provides
- chop_single_paragraph(text, width): greedy word wrap of one paragraph.
- chop_multiple_paragraphs(text, width): wrap newline-separated paragraphs
  independently, with a blank line ("") between them.
- format_placeholders(args) / parse_placeholders(text): render an ordered list of
  argument labels as "<a> <b>" and read it back.
- indent(lines, width): prefix every line with spaces and join them into text.

Wrapping policy
- Words are the maximal runs of non-whitespace characters.
- A word longer than the width is dropped on purpose; it is never emitted and never
  forces a line break by itself.
- Lines never exceed the width and never carry leading/trailing spaces.
- A negative width is a programming error and raises ValueError.

Quick example:
    >>> chop_single_paragraph("foo bar baz", 7)
    ['foo bar', 'baz']
    >>> chop_multiple_paragraphs("a b\\n\\nc d", 10)
    ['a b', '', 'c d']
"""
import re

SUMMARY_WIDTH = 68
DESCRIPTION_WIDTH = 64
INDENT = 4


def chop_single_paragraph(text, width, /):
    """
    Greedily pack the words of a single paragraph into lines of at most `width` characters.

    The final line is always flushed, so a paragraph without any viable word
    (empty text, whitespace only, or every word wider than `width`) yields [""].

    Raises
    - TypeError: if width is not an integer.
    - ValueError: if width is negative.
    """
    if not isinstance(width, int):
        raise TypeError("chop width must be an integer")
    if width < 0:
        raise ValueError("chop width must not be negative")

    lines = []
    line = ""
    for word in text.split():
        if len(word) > width:
            continue
        # Start a new line when the word plus its separating space would overflow.
        if line and len(line) + 1 + len(word) > width:
            lines.append(line)
            line = word
        else:
            line = line + " " + word if line else word
    lines.append(line)
    return lines


def chop_multiple_paragraphs(text, width, /):
    """
    Wrap every paragraph of `text` on its own and join the groups with a blank ("") line.

    Paragraphs are separated by runs of newlines; paragraphs holding nothing but
    whitespace are discarded, and no blank line trails the last paragraph.
    """
    lines = []
    for paragraph in re.split(r"\n+", text):
        if not paragraph.strip():
            continue
        if lines:
            lines.append("")
        lines.extend(chop_single_paragraph(paragraph, width))
    return lines


def format_placeholders(args, /):
    """
    Render argument labels in declaration order as "<a> <b> <c>" ("" when there are none).
    """
    return " ".join(f"<{arg}>" for arg in args)


def parse_placeholders(text, /):
    """
    Read back the labels rendered by format_placeholders.

    Examples
    - parse_placeholders("<src> <dst>") -> ["src", "dst"]
    - parse_placeholders("")            -> []
    """
    if not text:
        return []
    if not (text.startswith("<") and text.endswith(">")):
        raise ValueError(f"malformed placeholder string {text!r}")
    return text[1:-1].split("> <")


def indent(lines, width, /):
    """
    Prefix each line with `width` spaces and terminate it with a newline.
    """
    prefix = " " * width
    return "".join(prefix + line + "\n" for line in lines)


__all__ = (
    "SUMMARY_WIDTH",
    "DESCRIPTION_WIDTH",
    "INDENT",
    "chop_single_paragraph",
    "chop_multiple_paragraphs",
    "format_placeholders",
    "parse_placeholders",
    "indent",
)
