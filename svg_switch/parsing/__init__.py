"""
Attribute value parsing.

- list_parser: Splits list-valued attributes into tokens.
"""
