#! /usr/bin/env python
"""Character classes and tests for the XML name productions

The ranges are those of the XML 1.0 Fifth Edition, productions [4] and
[4a]; the older letter/digit/combining-character tables of earlier
editions are not supported."""

from .unicode5 import CharClass


name_start_char = CharClass(
    ':', ('A', 'Z'), '_', ('a', 'z'),
    ('\xc0', '\xd6'), ('\xd8', '\xf6'), ('\xf8', '\u02ff'),
    ('\u0370', '\u037d'), ('\u037f', '\u1fff'), ('\u200c', '\u200d'),
    ('\u2070', '\u218f'), ('\u2c00', '\u2fef'), ('\u3001', '\ud7ff'),
    ('\uf900', '\ufdcf'), ('\ufdf0', '\ufffd'),
    ('\U00010000', '\U000effff'))

name_char = CharClass(
    name_start_char, '-', '.', ('0', '9'), '\xb7',
    ('\u0300', '\u036f'), ('\u203f', '\u2040'))


def is_name_start_char(c):
    """Tests if the character *c* matches production [4] NameStartChar"""
    # called for every name, short cut the ASCII letters
    if 'a' <= c <= 'z' or 'A' <= c <= 'Z':
        return True
    return name_start_char.test(c)


def is_name_char(c):
    """Tests if a single character *c* matches production [4a] NameChar"""
    if 'a' <= c <= 'z' or 'A' <= c <= 'Z' or '0' <= c <= '9':
        return True
    return name_char.test(c)


def is_valid_name(name):
    """Tests if name is a string matching production [5] Name"""
    if name:
        if not is_name_start_char(name[0]):
            return False
        for c in name[1:]:
            if not is_name_char(c):
                return False
        return True
    else:
        return False


def is_valid_nmtoken(nm_token):
    """Tests if nm_token is a string matching production [7] Nmtoken"""
    if nm_token:
        for c in nm_token:
            if not is_name_char(c):
                return False
        return True
    else:
        return False


#: The white space characters skipped between declarations.  Carriage
#: returns never reach the scanner as line ends are normalized first.
S_CHARS = ' \t\n\r'


def is_s(c):
    """Tests if a single character *c* matches production [3] S"""
    return c in S_CHARS if c else False
