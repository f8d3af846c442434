#! /usr/bin/env python
"""Parameter entity expansion"""

from .enumeration import Enumeration
from .errors import UndefinedEntityError
from .names import is_name_char, is_name_start_char


class PEStyle(Enumeration):

    """How parameter entity references are replaced

    IgnoreQuotedText
        References inside quoted literals are left alone, the
        replacement text is enlarged by one leading and one trailing
        space (XML section 4.4.8).

    MatchingParentheses
        As IgnoreQuotedText, used for element declarations whose
        content model groups must nest properly with entity boundaries.

    InEntityDeclaration
        Used for the literal value of an entity declaration: references
        are replaced without adding any space (XML section 4.4.5).

    Under every style a reference inside a quoted substring is left
    unexpanded."""
    decode = {
        'IgnoreQuotedText': 0,
        'MatchingParentheses': 1,
        'InEntityDeclaration': 2}


def find_pe_reference(text):
    """Finds the first parameter entity reference in *text*

    References inside a quoted string are not recognized.  The quote
    state is tracked from the start of the text: a quote (or apostrophe)
    opens a literal that runs to the next matching character, so an
    unmatched quote hides every reference that follows it.

    Returns a tuple of (start, end, name) where text[start:end] is the
    complete reference, including the '%' and ';'.  A '%' that is not
    followed by a Name and a ';' is not a reference and is skipped.
    Returns None if there are no references."""
    q = None
    i = 0
    tlen = len(text)
    while i < tlen:
        c = text[i]
        if q is not None:
            if c == q:
                q = None
        elif c == '"' or c == "'":
            q = c
        elif c == '%' and i + 1 < tlen and is_name_start_char(text[i + 1]):
            j = i + 2
            while j < tlen and is_name_char(text[j]):
                j += 1
            if j < tlen and text[j] == ';':
                return i, j + 1, text[i + 1:j]
        i += 1
    return None


def expand_pe_references(text, style, get_replacement):
    """Replaces parameter entity references in *text*

    style
        One of the :class:`PEStyle` constants.

    get_replacement
        A function that takes an entity name and returns its replacement
        text, or None if no such parameter entity has been declared.

    The text is scanned for the first reference, which is replaced, and
    then the whole of the resulting text is scanned again.  As a result
    references in replacement text are expanded too, and expansion
    proceeds from left to right.  Parameter entity values are expanded
    when they are declared so this always terminates.

    If a reference to an undeclared entity is found
    :class:`~pydtd.errors.UndefinedEntityError` is raised, the
    partially expanded text is available from the exception."""
    if style == PEStyle.InEntityDeclaration:
        pad = ''
    elif style in (PEStyle.IgnoreQuotedText, PEStyle.MatchingParentheses):
        pad = ' '
    else:
        raise ValueError("Bad PEStyle: %r" % style)
    while True:
        ref = find_pe_reference(text)
        if ref is None:
            return text
        start, end, name = ref
        replacement = get_replacement(name)
        if replacement is None:
            raise UndefinedEntityError(name, text)
        text = ''.join((text[:start], pad, replacement, pad, text[end:]))


def parentheses_balanced(text):
    """Tests if the parentheses in *text* are properly nested

    Parentheses inside quoted strings are ignored."""
    depth = 0
    q = None
    for c in text:
        if q is not None:
            if c == q:
                q = None
        elif c == '"' or c == "'":
            q = c
        elif c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth < 0:
                return False
    return depth == 0
