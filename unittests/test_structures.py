#! /usr/bin/env python

import logging
import unittest

from pydtd import structures
from pydtd.structures import AttributeType, DefaultType


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(DiagnosticTests),
        loader.loadTestsFromTestCase(DeclarationTests),
        loader.loadTestsFromTestCase(DTDTests),
    ))


class DiagnosticTests(unittest.TestCase):

    def test_message(self):
        d = structures.Diagnostic("Notation 'gif' is already declared.", 7)
        self.assertTrue(d.line == 7)
        self.assertTrue(d.description == "Notation 'gif' is already declared.")
        self.assertTrue(
            str(d) == "Notation 'gif' is already declared. (line 7)", str(d))
        self.assertTrue(d.message == str(d))
        self.assertTrue(d == structures.Diagnostic(d.description, 7))
        self.assertTrue(d != structures.Diagnostic(d.description, 8))


class DeclarationTests(unittest.TestCase):

    def test_attribute(self):
        a = structures.Attribute('id', AttributeType.ID, DefaultType.REQUIRED)
        self.assertTrue(a.name == 'id')
        self.assertTrue(a.default_value == '')
        self.assertTrue(a.enumeration == ())
        self.assertTrue(a.get_type_str() == 'ID')
        self.assertTrue(a.get_default_str() == '#REQUIRED')
        try:
            a.name = 'class'
            self.fail("Attribute definitions are immutable")
        except AttributeError:
            pass
        a = structures.Attribute('status', AttributeType.ENUMERATION,
                                 DefaultType.DEFAULT, 'draft',
                                 ['draft', 'final'])
        self.assertTrue(a.enumeration == ('draft', 'final'))
        self.assertTrue(a.get_default_str() == '')
        self.assertTrue(a == structures.Attribute(
            'status', AttributeType.ENUMERATION, DefaultType.DEFAULT,
            'draft', ('draft', 'final')))

    def test_element(self):
        e = structures.Element('p')
        self.assertTrue(e.content_specification is
                        structures.Element.NOT_GIVEN)
        self.assertFalse(e.has_content_specification())
        self.assertFalse(e.is_mixed())
        self.assertFalse(e.is_pure_text())
        self.assertTrue(len(e.attributes) == 0)
        e = structures.Element('p', structures.Element.EMPTY)
        self.assertTrue(e.has_content_specification())
        for model, pure in (("(#PCDATA)", True), ("(#PCDATA)*", True),
                           ("(#PCDATA|em)*", False)):
            e = structures.Element('p', model, True)
            self.assertTrue(e.is_mixed())
            self.assertTrue(e.is_pure_text() == pure, model)

    def test_entities(self):
        e = structures.GeneralEntity('copy', '(c)')
        self.assertFalse(e.is_external())
        self.assertFalse(e.is_unparsed())
        self.assertTrue(e.system_id is None and e.public_id is None)
        self.assertTrue(e.get_name() == '&copy;')
        e = structures.GeneralEntity('logo', system_id='logo.gif',
                                     notation='gif')
        self.assertTrue(e.is_external())
        self.assertTrue(e.is_unparsed())
        self.assertTrue(e.replacement_text == '')
        pe = structures.ParameterEntity('ext', public_id='-//X//EN',
                                        system_id='ext.ent')
        self.assertTrue(pe.is_external())
        self.assertTrue(pe.get_name() == '%ext;')
        self.assertFalse(hasattr(pe, 'notation'))

    def test_notation(self):
        n = structures.Notation('gif', 'image/gif')
        self.assertTrue(n.system_id == 'image/gif')
        self.assertTrue(n.public_id is None)


class DTDTests(unittest.TestCase):

    def test_constructor(self):
        dtd = structures.DTD()
        self.assertTrue(len(dtd.elements) == 0)
        self.assertTrue(len(dtd.general_entities) == 0)
        self.assertTrue(len(dtd.parameter_entities) == 0)
        self.assertTrue(len(dtd.notations) == 0)
        self.assertTrue(dtd.processing_instructions == [])
        self.assertTrue(dtd.processing_instruction is None)
        self.assertTrue(dtd.text_declaration is None)
        self.assertTrue(dtd.is_well_formed_and_valid())

    def test_diagnostics(self):
        dtd = structures.DTD()
        dtd.add_warning("Just a warning", 1)
        self.assertTrue(dtd.is_well_formed_and_valid())
        d = dtd.add_error("An error", 2)
        self.assertFalse(dtd.is_well_formed_and_valid())
        self.assertTrue(dtd.errors == [d])
        self.assertTrue(str(dtd.warnings[0]) == "Just a warning (line 1)")

    def test_elements(self):
        dtd = structures.DTD()
        self.assertTrue(dtd.get_element_type('p') is None)
        self.assertTrue(dtd.get_attribute_list('p') is None)
        e = dtd.declare_element_type('p')
        self.assertTrue(dtd.declare_element_type('p') is e)
        self.assertTrue(dtd.get_element_type('p') is e)
        self.assertTrue(dtd.get_attribute_definition('p', 'id') is None)
        a1 = structures.Attribute('id', AttributeType.ID, DefaultType.IMPLIED)
        a2 = structures.Attribute('id', AttributeType.CDATA,
                                  DefaultType.IMPLIED)
        self.assertTrue(dtd.declare_attribute('p', a1))
        self.assertFalse(dtd.declare_attribute('p', a2))
        self.assertTrue(dtd.get_attribute_definition('p', 'id') is a1)
        self.assertTrue(list(dtd.get_attribute_list('p')) == ['id'])
        # declaring an attribute creates the element type
        dtd.declare_attribute('div', a2)
        div = dtd.get_element_type('div')
        self.assertFalse(div.has_content_specification())

    def test_entities(self):
        dtd = structures.DTD()
        g = structures.GeneralEntity('x', 'general')
        p = structures.ParameterEntity('x', 'parameter')
        self.assertTrue(dtd.declare_entity(g))
        self.assertTrue(dtd.declare_entity(p))
        self.assertFalse(dtd.declare_entity(
            structures.GeneralEntity('x', 'again')))
        self.assertTrue(dtd.get_entity('x') is g)
        self.assertTrue(dtd.get_parameter_entity('x') is p)
        self.assertTrue(dtd.get_entity('y') is None)
        self.assertTrue(dtd.get_parameter_entity('y') is None)
        try:
            dtd.declare_entity(structures.Notation('x'))
            self.fail("Declared a notation as an entity")
        except ValueError:
            pass

    def test_notations(self):
        dtd = structures.DTD()
        n = structures.Notation('gif', 'image/gif')
        self.assertTrue(dtd.declare_notation(n))
        self.assertFalse(dtd.declare_notation(
            structures.Notation('gif', 'other')))
        self.assertTrue(dtd.get_notation('gif') is n)
        self.assertTrue(dtd.get_notation('png') is None)

    def test_pis(self):
        dtd = structures.DTD()
        pi1 = structures.ProcessingInstruction('a', 'one')
        pi2 = structures.ProcessingInstruction('b')
        dtd.add_processing_instruction(pi1)
        dtd.add_processing_instruction(pi2)
        self.assertTrue(dtd.processing_instructions == [pi1, pi2])
        self.assertTrue(dtd.processing_instruction is pi2)
        self.assertTrue(pi2.data == '')


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
