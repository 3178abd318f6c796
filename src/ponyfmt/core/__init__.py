"""
Core Package.

Contains the formatting pipeline:
- Syntax: Tokenizer, parser and syntax tree
- Formatter: Layout rules composed into ``PonyFormatter``
- Engine: Parse, print and report for one source text
"""
