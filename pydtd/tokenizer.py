#! /usr/bin/env python
"""Splits the text of a markup declaration into tokens"""

from .errors import TokenizationError


#: characters that separate tokens
SEPARATORS = ' \t\n'

#: the reason given when enumeration values are separated by white
#: space instead of '|'
ENUM_SEPARATOR_MSG = (
    "inside an enumeration, values must be separated by the '|' "
    "character, not by whitespace")


def tokenize(text):
    """Splits *text* into a list of tokens

    text
        The interior of an ATTLIST, NOTATION or ENTITY declaration
        after parameter entity references have been expanded.

    The text is split on white space with the following exceptions:

    1.  A double quote opens a quoted string (but only if it follows
        white space or is at the start of the text).  Everything up to
        the matching quote is a single token, even if it is empty or
        contains white space or apostrophes.  The quotes themselves are
        returned as separate, single character, tokens.

    2.  An apostrophe behaves the same way, double quotes inside it are
        just data.

    3.  An opening parenthesis starts an enumeration.  Inside it,
        tokens are separated by white space and by '|', and '(', '|'
        and ')' are all returned as tokens.  Two values separated only
        by white space are an error.

    For example, ``a (x | y) 'v w'`` is returned as::

        ['a', '(', 'x', '|', 'y', ')', "'", 'v w', "'"]

    Raises :class:`~pydtd.errors.TokenizationError` if the text can't
    be split."""
    tokens = []
    # None, '(' or the quote character that opened the current group
    outer = None
    word = []
    after_space = True
    # set when a word inside parentheses has been ended by white space
    need_bar = False
    for c in text:
        if c in SEPARATORS:
            if outer is None:
                if word:
                    tokens.append(''.join(word))
                    word = []
            elif outer == '(':
                if word:
                    if need_bar:
                        raise TokenizationError(ENUM_SEPARATOR_MSG)
                    tokens.append(''.join(word))
                    word = []
                    need_bar = True
            else:
                word.append(c)
            after_space = True
            continue
        if c == '|':
            if outer == '(':
                if word:
                    if need_bar:
                        raise TokenizationError(ENUM_SEPARATOR_MSG)
                    tokens.append(''.join(word))
                    word = []
                tokens.append('|')
                need_bar = False
            else:
                word.append(c)
        elif c == '(':
            if outer is None:
                tokens.append('(')
                outer = '('
                need_bar = False
            else:
                word.append(c)
        elif c == ')':
            if outer is None:
                raise TokenizationError("the ')' character is illegal here")
            elif outer == '(':
                if word:
                    if need_bar:
                        raise TokenizationError(ENUM_SEPARATOR_MSG)
                    tokens.append(''.join(word))
                    word = []
                tokens.append(')')
                outer = None
            else:
                word.append(c)
        elif c == '"' or c == "'":
            if outer is None and after_space:
                tokens.append(c)
                outer = c
            elif outer is not None:
                if outer == c:
                    tokens.append(''.join(word))
                    tokens.append(c)
                    word = []
                    outer = None
                else:
                    word.append(c)
            else:
                raise TokenizationError(
                    "quotes must only appear after whitespace in this "
                    "context")
        else:
            word.append(c)
        after_space = False
    if word:
        tokens.append(''.join(word))
    return tokens
