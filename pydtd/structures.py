#! /usr/bin/env python
"""Classes that model the declarations found in a DTD"""

import collections
import logging

from .enumeration import Enumeration


class AttributeType(Enumeration):

    """The declared type of an attribute, production [54] AttType

    The keyword types decode from the keywords used in an ATTLIST
    declaration, ENUMERATION is used for the parenthesized list form
    which has no keyword of its own."""
    decode = {
        'CDATA': 0,
        'ID': 1,
        'IDREF': 2,
        'IDREFS': 3,
        'ENTITY': 4,
        'ENTITIES': 5,
        'NMTOKEN': 6,
        'NMTOKENS': 7,
        'NOTATION': 8,
        'ENUMERATION': 9}

    #: the types that are declared with a single keyword
    KEYWORDS = ('CDATA', 'ID', 'IDREF', 'IDREFS', 'ENTITY', 'ENTITIES',
                'NMTOKEN', 'NMTOKENS')


class DefaultType(Enumeration):

    """The kind of default declaration, production [60] DefaultDecl

    DEFAULT represents an attribute declared with a plain default value
    and no keyword."""
    decode = {
        'REQUIRED': 0,
        'IMPLIED': 1,
        'FIXED': 2,
        'DEFAULT': 3}

    aliases = {
        '#REQUIRED': 'REQUIRED',
        '#IMPLIED': 'IMPLIED',
        '#FIXED': 'FIXED'}


class Diagnostic(object):

    """An error or warning found while parsing a DTD

    description
        A description of the problem.

    line
        The 1-based line number at which the problem was found.

    The :attr:`message` combines the two, e.g.::

        'Notation 'gif' is already declared. (line 7)'"""

    def __init__(self, description, line):
        self.description = description
        self.line = line
        self.message = "%s (line %i)" % (description, line)

    def __str__(self):
        return self.message

    def __repr__(self):
        return "Diagnostic(%r, %i)" % (self.description, self.line)

    def __eq__(self, other):
        if isinstance(other, Diagnostic):
            return self.message == other.message
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.message)


class Attribute(collections.namedtuple(
        'Attribute',
        ['name', 'type', 'default_type', 'default_value', 'enumeration'])):

    """An attribute definition from an ATTLIST declaration

    This is a python namedtuple so attribute definitions can't be
    modified once created.

    name
        The attribute name

    type
        One of the :class:`AttributeType` constants

    default_type
        One of the :class:`DefaultType` constants

    default_value
        The default value, an empty string unless default_type is
        FIXED or DEFAULT.

    enumeration
        A tuple of the allowed values for ENUMERATION and NOTATION
        attributes, an empty tuple otherwise.  The values of a NOTATION
        attribute are notation names."""

    __slots__ = ()

    def __new__(cls, name, type, default_type, default_value='',
                enumeration=()):
        return super(Attribute, cls).__new__(
            cls, name, type, default_type, default_value, tuple(enumeration))

    def get_type_str(self):
        """Returns the attribute type as a string, e.g., 'NMTOKENS'"""
        return AttributeType.to_str(self.type)

    def get_default_str(self):
        """Returns the default type as a string, e.g., '#IMPLIED'

        An attribute with a plain default value returns the empty
        string."""
        if self.default_type == DefaultType.DEFAULT:
            return ''
        return '#' + DefaultType.to_str(self.default_type)


class Element(object):

    """An element type, declared with <!ELEMENT> and/or <!ATTLIST>

    name
        The element type's name

    content_specification
        The content specification string, if known."""

    #: content specification string for ANY
    ANY = "ANY"

    #: content specification string for EMPTY
    EMPTY = "EMPTY"

    #: content specification of an element type that has been named in
    #: an ATTLIST declaration but has not (yet) been declared
    NOT_GIVEN = None

    def __init__(self, name, content_specification=NOT_GIVEN, mixed=False):
        self.name = name
        self.content_specification = content_specification
        """One of ANY, EMPTY, NOT_GIVEN or a content model string with
        all white space removed, e.g. "(head,(p|list)*)"."""
        self.mixed = mixed
        """True if the content model starts with (#PCDATA; elements
        that may only contain text are also considered mixed."""
        self.attributes = collections.OrderedDict()
        """A dictionary of :class:`Attribute` keyed on attribute name
        in declaration order."""

    def __repr__(self):
        return "Element(%r, %r, %r)" % (
            self.name, self.content_specification, self.mixed)

    def has_content_specification(self):
        """True if an ELEMENT declaration has been seen for this type"""
        return self.content_specification is not self.NOT_GIVEN

    def is_mixed(self):
        return self.mixed

    def is_pure_text(self):
        """True if the element may contain only character data

        That is, if the content specification is (#PCDATA) or
        (#PCDATA)*."""
        return self.content_specification in ("(#PCDATA)", "(#PCDATA)*")


class DeclaredEntity(object):

    """Abstract class for representing declared entities

    name
        The name of the entity

    replacement_text
        The replacement text of an internal entity, parameter entity
        references in the literal have already been expanded.  For
        external entities this is an empty string as the external
        content is never loaded.

    system_id, public_id
        The external identifiers of an external entity.  An internal
        entity has neither, a SYSTEM entity has no public_id.  Absent
        values are None."""

    def __init__(self, name, replacement_text='', system_id=None,
                 public_id=None):
        self.name = name
        self.replacement_text = replacement_text
        self.system_id = system_id
        self.public_id = public_id
        #: True if this entity was declared with an external ID
        self.external = system_id is not None or public_id is not None

    def is_external(self):
        """Returns True if this is an external entity."""
        return self.external

    def get_name(self):
        """Returns a representation of the entity's name

        The name is formatted as a reference, suitable for
        logging/error reporting."""
        raise NotImplementedError


class GeneralEntity(DeclaredEntity):

    """A general entity

    A general entity can have an additional *notation* naming the
    notation used by an external, unparsed entity (its NDATA name)."""

    def __init__(self, name, replacement_text='', system_id=None,
                 public_id=None, notation=None):
        super(GeneralEntity, self).__init__(
            name, replacement_text, system_id, public_id)
        #: the notation name for external unparsed entities
        self.notation = notation

    def __repr__(self):
        return "GeneralEntity(%r)" % self.name

    def get_name(self):
        return "&%s;" % self.name

    def is_unparsed(self):
        """True if this is an unparsed entity (declared with NDATA)"""
        return self.notation is not None


class ParameterEntity(DeclaredEntity):

    """A parameter entity"""

    def __repr__(self):
        return "ParameterEntity(%r)" % self.name

    def get_name(self):
        return "%%%s;" % self.name


class Notation(object):

    """Represents an XML Notation

    name
        The notation name

    system_id, public_id
        The external identifiers.  A notation declared SYSTEM has only a
        system_id, one declared PUBLIC has a public_id and, optionally,
        a system_id.  Absent values are None."""

    def __init__(self, name, system_id=None, public_id=None):
        self.name = name
        self.system_id = system_id
        self.public_id = public_id

    def __repr__(self):
        return "Notation(%r, %r, %r)" % (
            self.name, self.system_id, self.public_id)


class ProcessingInstruction(object):

    """A processing instruction found between declarations"""

    def __init__(self, target, data=''):
        #: the target, a Name
        self.target = target
        #: the remaining instruction text, not interpreted
        self.data = data

    def __repr__(self):
        return "ProcessingInstruction(%r, %r)" % (self.target, self.data)


class DTD(object):

    """An object that models a parsed document type definition

    The DTD acts as a container for the element, attribute, entity and
    notation declarations together with the errors and warnings found
    while parsing them.  Instances are created and populated by
    :class:`pydtd.parser.DTDParser`; once returned to the caller they
    should be treated as read only."""

    def __init__(self):
        self.elements = collections.OrderedDict()
        """A dictionary of :class:`Element` instances keyed on element
        type name, in the order in which they were first mentioned."""
        self.general_entities = collections.OrderedDict()
        """A dictionary of :class:`GeneralEntity` instances keyed on
        entity name."""
        self.parameter_entities = collections.OrderedDict()
        """A dictionary of :class:`ParameterEntity` instances keyed on
        entity name."""
        self.notations = collections.OrderedDict()
        """A dictionary of :class:`Notation` instances keyed on notation
        name."""
        #: the processing instructions in the order they were found
        self.processing_instructions = []
        #: the data of the text declaration (``<?xml ... ?>``) at the
        #: start of the DTD, None if there wasn't one
        self.text_declaration = None
        #: a list of :class:`Diagnostic` instances, if this is not empty
        #: the DTD is not well-formed or not valid
        self.errors = []
        #: a list of :class:`Diagnostic` instances reporting conditions
        #: the XML specification allows a processor to warn about
        self.warnings = []

    def is_well_formed_and_valid(self):
        """True if no errors were found

        Warnings do not affect the result."""
        return not self.errors

    @property
    def processing_instruction(self):
        """The last processing instruction found, or None"""
        if self.processing_instructions:
            return self.processing_instructions[-1]
        return None

    def add_error(self, description, line):
        """Records an error, returns the new :class:`Diagnostic`"""
        d = Diagnostic(description, line)
        logging.debug("DTD error: %s", d)
        self.errors.append(d)
        return d

    def add_warning(self, description, line):
        """Records a warning, returns the new :class:`Diagnostic`"""
        d = Diagnostic(description, line)
        logging.debug("DTD warning: %s", d)
        self.warnings.append(d)
        return d

    def declare_element_type(self, name):
        """Returns the :class:`Element` called *name*

        The element type is created, with no content specification, if
        this is the first time it has been named."""
        etype = self.elements.get(name, None)
        if etype is None:
            self.elements[name] = etype = Element(name)
        return etype

    def get_element_type(self, name):
        """Looks up an element type definition.

        Returns an instance of :class:`Element` or None if no element
        with that name has been declared."""
        return self.elements.get(name, None)

    def declare_attribute(self, element_name, attribute):
        """Declares an attribute

        element_name
            the name of the element type which should have this
            attribute applied, it is created if necessary

        attribute
            an :class:`Attribute` instance describing the attribute
            being declared.

        Returns True if the attribute was added, False if an attribute
        with the same name was already declared for this element, in
        which case the earlier definition is kept."""
        alist = self.declare_element_type(element_name).attributes
        if attribute.name in alist:
            logging.debug("Ignoring duplicate attribute declaration %s@%s",
                          element_name, attribute.name)
            return False
        alist[attribute.name] = attribute
        return True

    def get_attribute_list(self, name):
        """Returns a dictionary of attribute definitions for *name*

        If the element type has not been named in the DTD, None is
        returned."""
        etype = self.elements.get(name, None)
        if etype is None:
            return None
        return etype.attributes

    def get_attribute_definition(self, element_name, attribute_name):
        """Looks up an attribute definition.

        Returns an instance of :class:`Attribute` or None if no
        attribute matching this description has been declared."""
        alist = self.get_attribute_list(element_name)
        if alist:
            return alist.get(attribute_name, None)
        else:
            return None

    def declare_entity(self, entity):
        """Declares an entity

        The same method is used for both general and parameter entities.
        The value of *entity* can be either a :class:`GeneralEntity` or
        a :class:`ParameterEntity` instance.

        Returns True if the entity was declared, False if it was
        ignored because an entity of the same kind and name already
        exists (the first declaration is binding)."""
        if isinstance(entity, GeneralEntity):
            table = self.general_entities
        elif isinstance(entity, ParameterEntity):
            table = self.parameter_entities
        else:
            raise ValueError(repr(entity))
        if entity.name in table:
            logging.debug("Ignoring duplicate declaration of %s",
                          entity.get_name())
            return False
        table[entity.name] = entity
        return True

    def get_parameter_entity(self, name):
        """Returns the parameter entity definition matching *name*

        Returns an instance of :class:`ParameterEntity`.  If no
        parameter entity has been declared with *name* then None is
        returned."""
        return self.parameter_entities.get(name, None)

    def get_entity(self, name):
        """Returns the general entity definition matching *name*

        Returns an instance of :class:`GeneralEntity`.  If no general
        entity has been declared with *name* then None is returned."""
        return self.general_entities.get(name, None)

    def declare_notation(self, notation):
        """Declares a notation

        Returns False, and leaves the existing declaration unchanged, if
        a notation with the same name has already been declared."""
        if notation.name in self.notations:
            return False
        self.notations[notation.name] = notation
        return True

    def get_notation(self, name):
        """Returns the notation declaration matching *name*

        Returns an instance of :class:`Notation`.  If no notation has
        been declared with *name* then None is returned."""
        return self.notations.get(name, None)

    def add_processing_instruction(self, pi):
        self.processing_instructions.append(pi)
