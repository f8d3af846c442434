#! /usr/bin/env python

import logging
import unittest

from pydtd import entities
from pydtd.entities import PEStyle
from pydtd.errors import UndefinedEntityError


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(PEReferenceTests),
        loader.loadTestsFromTestCase(ExpansionTests),
    ))


class PEReferenceTests(unittest.TestCase):

    def test_find(self):
        self.assertTrue(entities.find_pe_reference('a %b; c') == (2, 5, 'b'))
        self.assertTrue(
            entities.find_pe_reference('%long.name;') == (0, 11, 'long.name'))
        for text in ('', 'abc', '% a;', '%a', '100%', '%;', '%1a;'):
            self.assertTrue(entities.find_pe_reference(text) is None,
                            "Found reference in %s" % repr(text))

    def test_quoted(self):
        text = '"%a;" %b;'
        self.assertTrue(entities.find_pe_reference(text) == (6, 9, 'b'))
        self.assertTrue(entities.find_pe_reference("'%a;\" %b;") is None)
        # an unmatched apostrophe hides what follows
        self.assertTrue(entities.find_pe_reference("it's %a;") is None)

    def test_parentheses(self):
        for text in ('', 'a', '(a,(b|c))', '("(" )', '(a)*, (b)'):
            self.assertTrue(entities.parentheses_balanced(text), text)
        for text in ('(a', 'a)(', '((a)', '(")"'):
            self.assertFalse(entities.parentheses_balanced(text), text)


class ExpansionTests(unittest.TestCase):

    def setUp(self):        # noqa
        self.pes = {'pe': 'VALUE', 'a': '%b;', 'b': 'B', 'x': '1', 'y': '2'}

    def test_styles(self):
        self.assertTrue(PEStyle.from_str('IgnoreQuotedText') ==
                        PEStyle.IgnoreQuotedText)
        self.assertTrue(PEStyle.to_str(PEStyle.InEntityDeclaration) ==
                        'InEntityDeclaration')
        try:
            entities.expand_pe_references('x', 99, self.pes.get)
            self.fail("Bad style accepted")
        except ValueError:
            pass

    def test_spacing(self):
        for style in (PEStyle.IgnoreQuotedText, PEStyle.MatchingParentheses):
            result = entities.expand_pe_references(
                'a%pe;b', style, self.pes.get)
            self.assertTrue(result == 'a VALUE b', repr(result))
        result = entities.expand_pe_references(
            'a%pe;b', PEStyle.InEntityDeclaration, self.pes.get)
        self.assertTrue(result == 'aVALUEb', repr(result))

    def test_nested(self):
        result = entities.expand_pe_references(
            'x%a;y', PEStyle.InEntityDeclaration, self.pes.get)
        self.assertTrue(result == 'xBy', repr(result))
        result = entities.expand_pe_references(
            'x %a; y', PEStyle.IgnoreQuotedText, self.pes.get)
        self.assertTrue(result == 'x   B   y', repr(result))
        result = entities.expand_pe_references(
            '%x;%y;', PEStyle.InEntityDeclaration, self.pes.get)
        self.assertTrue(result == '12', repr(result))

    def test_quoted_text(self):
        result = entities.expand_pe_references(
            '"%pe;" %pe;', PEStyle.IgnoreQuotedText, self.pes.get)
        self.assertTrue(result == '"%pe;"  VALUE ', repr(result))
        result = entities.expand_pe_references(
            'a "%pe;" %pe;', PEStyle.InEntityDeclaration, self.pes.get)
        self.assertTrue(result == 'a "%pe;" VALUE', repr(result))
        result = entities.expand_pe_references(
            "it's %pe;", PEStyle.InEntityDeclaration, self.pes.get)
        self.assertTrue(result == "it's %pe;", repr(result))

    def test_undefined(self):
        try:
            entities.expand_pe_references(
                'a %x; %undef; %y;', PEStyle.InEntityDeclaration,
                self.pes.get)
            self.fail("Undefined entity expanded")
        except UndefinedEntityError as err:
            self.assertTrue(err.name == 'undef')
            self.assertTrue(err.text == 'a 1 %undef; %y;', repr(err.text))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
