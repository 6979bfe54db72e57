"""Escape-sequence tokenizing and SGR interpretation."""

from ansi_svg.codec.tokenizer import EscapeSequence, Segment, tokenize_line, strip_sequences
from ansi_svg.codec.sgr import apply_sgr, parse_params
from ansi_svg.codec.ansi_parser import AnsiParser, parse_lines, split_lines

__all__ = [
    "EscapeSequence",
    "Segment",
    "tokenize_line",
    "strip_sequences",
    "apply_sgr",
    "parse_params",
    "AnsiParser",
    "parse_lines",
    "split_lines",
]
