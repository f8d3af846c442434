#! /usr/bin/env python
"""A parser for the declarations in a DTD

The parser works at the level of whole declarations.  The global space
scanner finds the boundaries of each markup declaration, processing
instruction, conditional section and parameter entity reference and
passes the interior of each declaration to the method that parses that
kind of declaration.  Problems are recorded as errors and warnings in
the resulting :class:`~pydtd.structures.DTD`, they are never raised to
the caller."""

import io
import logging
import os
import re

from . import entities
from . import structures
from .entities import PEStyle
from .enumeration import Enumeration
from .errors import (
    DeclarationError,
    ScanHalted,
    TokenizationError,
    UndefinedEntityError)
from .names import is_name_char, is_name_start_char, is_s, is_valid_name
from .names import is_valid_nmtoken
from .tokenizer import tokenize


#: the characters that can delimit a literal
QUOTES = ('"', "'")

#: the white space that may follow the keyword of a markup declaration
DECL_SEPARATORS = (' ', '\n', '\t')

#: matches a complete comment
COMMENT = re.compile(r'<!--(?:[^-]|-[^-])*-->')

BOM = chr(0xFEFF)


def normalize_line_ends(text):
    """Replaces CRLF and lone CR line ends with LF"""
    return text.replace('\r\n', '\n').replace('\r', '\n')


def strip_comments(text):
    """Removes all well-formed comments from *text*

    The line ends inside comments are removed with them."""
    return COMMENT.sub('', text)


class AttlistState(Enumeration):

    """The states of the attribute list declaration parser"""
    decode = {
        'NeedName': 0,
        'NeedAttType': 1,
        'AfterNotation': 2,
        'InsideEnumerationNeedValue': 3,
        'InsideEnumerationNeedSeparator': 4,
        'NeedDefaultDecl': 5}


class ScanContext(object):

    """The position of the scanner in a block of DTD text

    text
        The text being scanned, line ends have already been normalized
        and comments removed.

    internal_subset
        True if the text is (part of) an internal subset

    entity
        The :class:`~pydtd.structures.ParameterEntity` whose replacement
        text is being scanned, or None for the internal subset or main
        text.

    Each call to :meth:`DTDParser.parse_global_space` scans with its own
    context, the counts of open conditional sections are not shared
    between the text of a parameter entity and the text that references
    it."""

    def __init__(self, text, internal_subset=False, entity=None):
        self.text = text
        self.internal_subset = internal_subset
        self.entity = entity
        #: the index of the next character to scan
        self.offset = 0
        #: the 1-based number of the line containing :attr:`offset`
        self.line = 1
        #: the number of open INCLUDE sections
        self.include_depth = 0
        #: the number of open IGNORE sections
        self.ignore_depth = 0

    def at_end(self):
        return self.offset >= len(self.text)

    def skip_s(self):
        """Advances past white space, counting line ends"""
        text = self.text
        tlen = len(text)
        while self.offset < tlen and is_s(text[self.offset]):
            if text[self.offset] == '\n':
                self.line += 1
            self.offset += 1

    def starts_with(self, match):
        return self.text.startswith(match, self.offset)


class DTDParser(object):

    """A parser for DTD text

    open_external_entities
        If True, the system identifier of each external entity is
        treated as the path of a local file which is checked and read.
        The content is never parsed, the outcome is recorded as a
        warning.

    check_parentheses
        If True, an element declaration whose content model does not
        have properly nested parentheses (after parameter entity
        references have been replaced) is an error.

    A parser can be used for more than one DTD, each call to
    :meth:`parse` returns a new :class:`~pydtd.structures.DTD`."""

    def __init__(self, open_external_entities=False, check_parentheses=False):
        #: whether or not to open external entities
        self.open_external_entities = open_external_entities
        #: whether or not to check parentheses in content models
        self.check_parentheses = check_parentheses
        #: the directory used to resolve relative system identifiers of
        #: external entities, None for the current directory
        self.base_dir = None
        #: the DTD being built
        self.dtd = structures.DTD()
        #: the :class:`ScanContext` of the text being scanned
        self.context = ScanContext('')

    def parse(self, text, internal_subset=""):
        """Parses a DTD

        text
            The text of the DTD, typically the external subset.

        internal_subset
            The optional text of an internal subset, it is parsed first
            so its declarations take precedence.

        Returns a new :class:`~pydtd.structures.DTD`.  Malformed input
        never raises an exception, check
        :meth:`~pydtd.structures.DTD.is_well_formed_and_valid`."""
        self.dtd = structures.DTD()
        self.context = ScanContext('')
        if internal_subset:
            self.parse_global_space(internal_subset, internal_subset=True)
        self.parse_global_space(text)
        logging.debug("Parsed DTD: %i element types, %i errors",
                      len(self.dtd.elements), len(self.dtd.errors))
        return self.dtd

    def error(self, msg):
        """Records an error at the current line"""
        self.dtd.add_error(msg, self.context.line)

    def warning(self, msg):
        """Records a warning at the current line"""
        self.dtd.add_warning(msg, self.context.line)

    def declaration_error(self, msg):
        """Records an error and abandons the current declaration

        Raises :class:`~pydtd.errors.DeclarationError` and does not
        return."""
        self.error(msg)
        raise DeclarationError(msg)

    def scan_error(self, msg):
        """Records an error and stops the current scan

        Raises :class:`~pydtd.errors.ScanHalted` and does not return."""
        self.error(msg)
        raise ScanHalted(msg)

    def get_replacement_text(self, name):
        pe = self.dtd.get_parameter_entity(name)
        if pe is None:
            return None
        return pe.replacement_text

    def expand(self, text, style):
        """Replaces the parameter entity references in *text*

        style
            One of the :class:`~pydtd.entities.PEStyle` constants.

        A reference to an undeclared parameter entity is a declaration
        error."""
        try:
            return entities.expand_pe_references(
                text, style, self.get_replacement_text)
        except UndefinedEntityError as err:
            self.declaration_error(
                "Parameter entity '%s' is used, but not defined." % err.name)

    def tokenize(self, text, decl_type):
        try:
            return tokenize(text)
        except TokenizationError as err:
            self.declaration_error(
                "%s declaration could not be tokenized: %s" %
                (decl_type, err.reason))

    def parse_quoted_string(self, tokens, i):
        """Parses a quoted string from a list of tokens

        tokens
            A list of tokens returned by
            :func:`~pydtd.tokenizer.tokenize`

        i
            The index of the token that should be the opening quote

        Returns the token between the quotes.  If the three tokens are
        missing or are not a quoted string a declaration error is
        generated."""
        if i + 2 >= len(tokens):
            self.declaration_error(
                "End of declaration reached while trying to parse a quoted "
                "string.")
        q = tokens[i]
        if q not in QUOTES:
            self.declaration_error(
                "A quotation mark or apostrophe was expected but '%s' is "
                "present instead." % q)
        if tokens[i + 2] != q:
            self.declaration_error(
                "Quotes must match at the ends of each quoted string.")
        return tokens[i + 1]

    def parse_element_decl(self, text):
        """[45] elementdecl

        text
            The text of the declaration following the ELEMENT keyword,
            without the closing '>'."""
        text = self.expand(text, PEStyle.MatchingParentheses)
        if self.check_parentheses and not entities.parentheses_balanced(text):
            self.declaration_error(
                "The parentheses in this element declaration are not "
                "properly nested.")
        tokens = text.split()
        if not tokens:
            self.declaration_error(
                "An <!ELEMENT> declaration must have a type name.")
        name = tokens[0]
        valid_name = is_valid_name(name)
        if not valid_name:
            self.error("'%s' is not a valid element name." % name)
        if len(tokens) == 1:
            self.declaration_error(
                "'%s' does not have content type specified." % name)
        mixed = False
        if len(tokens) == 2 and tokens[1] in (structures.Element.ANY,
                                              structures.Element.EMPTY):
            content_spec = tokens[1]
        else:
            # no validation of the content model itself
            content_spec = ''.join(tokens[1:])
            mixed = content_spec.startswith("(#PCDATA")
        if not valid_name:
            return
        etype = self.dtd.declare_element_type(name)
        if etype.has_content_specification():
            self.error("This element ('%s') was already declared." % name)
        else:
            etype.content_specification = content_spec
            etype.mixed = mixed

    def parse_attlist_decl(self, text):
        """[52] AttlistDecl

        text
            The text of the declaration following the ATTLIST keyword,
            without the closing '>'.

        Each attribute definition that is parsed without error is
        declared in the DTD.  If the element name is invalid the
        attribute definitions are still checked but nothing is
        declared."""
        text = self.expand(text, PEStyle.IgnoreQuotedText)
        tokens = self.tokenize(text, "ATTLIST")
        if not tokens:
            self.declaration_error(
                "An <!ATTLIST> declaration must have a type name.")
        element_name = tokens[0]
        valid_element = is_valid_name(element_name)
        if not valid_element:
            self.error("'%s' is not a valid element name." % element_name)
        state = AttlistState.NeedName
        aname = atype = None
        enumeration = []
        failed = False
        ntokens = len(tokens)
        i = 1
        while i < ntokens:
            token = tokens[i]
            if state == AttlistState.NeedName:
                aname = token
                atype = None
                enumeration = []
                failed = False
                if not is_valid_name(token):
                    self.error("'%s' is not a valid attribute name." % token)
                    failed = True
                state = AttlistState.NeedAttType
            elif state == AttlistState.NeedAttType:
                state = AttlistState.NeedDefaultDecl
                if token in structures.AttributeType.KEYWORDS:
                    atype = structures.AttributeType.from_str(token)
                elif token == '(':
                    atype = structures.AttributeType.ENUMERATION
                    state = AttlistState.InsideEnumerationNeedValue
                elif token == 'NOTATION':
                    atype = structures.AttributeType.NOTATION
                    state = AttlistState.AfterNotation
                else:
                    self.error("The attribute '%s' has a declared type that "
                               "does not exist." % aname)
                    failed = True
            elif state == AttlistState.AfterNotation:
                if token == '(':
                    state = AttlistState.InsideEnumerationNeedValue
                else:
                    self.error("The attribute '%s' is declared NOTATION but "
                               "misses a notations enumeration." % aname)
                    failed = True
                    # treat this token as the DefaultDecl
                    state = AttlistState.NeedDefaultDecl
                    continue
            elif state == AttlistState.InsideEnumerationNeedValue:
                if not is_valid_nmtoken(token):
                    self.declaration_error(
                        "An enumerated type must only have NMTOKENs as "
                        "possible values.")
                enumeration.append(token)
                state = AttlistState.InsideEnumerationNeedSeparator
            elif state == AttlistState.InsideEnumerationNeedSeparator:
                if token == '|':
                    state = AttlistState.InsideEnumerationNeedValue
                elif token == ')':
                    state = AttlistState.NeedDefaultDecl
                else:
                    self.error("In the attribute '%s' enumeration, the token "
                               "'|' or ')' was expected." % aname)
                    failed = True
            elif state == AttlistState.NeedDefaultDecl:
                default_value = ''
                default_type = None
                if token in ('#REQUIRED', '#IMPLIED'):
                    default_type = structures.DefaultType.from_str(token)
                elif token == '#FIXED':
                    default_type = structures.DefaultType.FIXED
                    if i + 3 < ntokens:
                        q = tokens[i + 1]
                        if q in QUOTES and tokens[i + 3] == q:
                            default_value = tokens[i + 2]
                        else:
                            self.error("The attribute '%s' has a #FIXED "
                                       "declaration but its value is not "
                                       "quoted." % aname)
                            failed = True
                        i += 3
                    else:
                        self.error("The attribute '%s' has a #FIXED "
                                   "declaration, but its default value is "
                                   "not provided." % aname)
                        failed = True
                        i = ntokens
                elif token in QUOTES:
                    default_type = structures.DefaultType.DEFAULT
                    if i + 2 < ntokens:
                        if tokens[i + 2] == token:
                            default_value = tokens[i + 1]
                        else:
                            self.error("The attribute '%s' starts quoting a "
                                       "default value, but does not finish "
                                       "this quotation." % aname)
                            failed = True
                        i += 2
                    else:
                        self.error("The attribute '%s' starts a default "
                                   "value declaration, but does not finish "
                                   "it." % aname)
                        failed = True
                        i = ntokens
                else:
                    self.error("The attribute '%s' has an invalid "
                               "DefaultDecl." % aname)
                    failed = True
                if valid_element:
                    self.dtd.declare_element_type(element_name)
                if valid_element and not failed:
                    self.dtd.declare_attribute(
                        element_name,
                        structures.Attribute(aname, atype, default_type,
                                             default_value, enumeration))
                state = AttlistState.NeedName
            i += 1
        if state != AttlistState.NeedName:
            self.error("The definition of attribute '%s' inside the ATTLIST "
                       "was not completed." % aname)

    def parse_notation_decl(self, text):
        """[82] NotationDecl

        text
            The text of the declaration following the NOTATION keyword,
            without the closing '>'."""
        text = self.expand(text, PEStyle.IgnoreQuotedText)
        tokens = self.tokenize(text, "NOTATION")
        if len(tokens) not in (5, 8):
            self.declaration_error(
                "'%s' is not a well-formed NOTATION declaration." %
                text.strip())
        name = tokens[0]
        if not is_valid_name(name):
            self.declaration_error(
                "'%s' is not a valid NOTATION name." % name)
        id_type = tokens[1]
        if id_type not in ('SYSTEM', 'PUBLIC'):
            self.declaration_error(
                "Notations must be either PUBLIC or SYSTEM.")
        quoted = tokens[2] in QUOTES and tokens[4] == tokens[2]
        system_id = public_id = None
        if id_type == 'SYSTEM':
            system_id = tokens[3]
        else:
            public_id = tokens[3]
        if len(tokens) == 8:
            if id_type != 'PUBLIC':
                self.declaration_error(
                    "A public identifier was provided even though the "
                    "notation is not declared PUBLIC.")
            quoted = quoted and tokens[5] in QUOTES and tokens[7] == tokens[5]
            system_id = tokens[6]
        if not quoted:
            self.declaration_error(
                "External ID's in '%s' are not properly quoted." %
                text.strip())
        if not self.dtd.declare_notation(
                structures.Notation(name, system_id, public_id)):
            self.error("Notation '%s' is already declared." % name)

    def parse_entity_decl(self, text):
        """[70] EntityDecl

        text
            The text of the declaration following the ENTITY keyword,
            without the closing '>'.

        Both general and parameter entity declarations are handled, a
        parameter entity is marked by a leading '%' token.  The literal
        value of an internal entity has its parameter entity references
        replaced before the entity is declared."""
        text = self.expand(text, PEStyle.IgnoreQuotedText)
        tokens = self.tokenize(text, "ENTITY")
        decl = text.strip()
        if len(tokens) < 4:
            self.declaration_error(
                "'%s' is not a well-formed ENTITY declaration." % decl)
        i = 0
        parameter = False
        if tokens[0] == '%':
            parameter = True
            i += 1
        name = tokens[i]
        i += 1
        if not is_valid_name(name):
            self.declaration_error("'%s' is not a valid ENTITY name." % name)
        replacement_text = ''
        system_id = public_id = notation = None
        keyword = tokens[i]
        if keyword in ('SYSTEM', 'PUBLIC'):
            if keyword == 'PUBLIC':
                public_id = self.parse_quoted_string(tokens, i + 1)
                i += 3
            system_id = self.parse_quoted_string(tokens, i + 1)
            i += 4
            if i < len(tokens):
                if tokens[i] != 'NDATA':
                    self.declaration_error(
                        "NDATA or end of entity declaration expected.")
                if i + 2 != len(tokens):
                    self.declaration_error(
                        "In a general entity declaration, the keyword NDATA "
                        "must be followed by a Name only.")
                notation = tokens[i + 1]
                if parameter:
                    self.declaration_error(
                        "Parameter entities may not have an NDATA "
                        "specifier.")
                if not is_valid_name(notation):
                    self.declaration_error(
                        "In a general entity declaration, NDATA was followed "
                        "by '%s' which is not a Name." % notation)
                if self.dtd.get_notation(notation) is None:
                    self.declaration_error(
                        "An ENTITY declaration refers to the notation '%s' "
                        "which is not yet declared." % notation)
            if self.open_external_entities:
                self.check_external_entity(system_id)
        elif keyword in QUOTES:
            if len(tokens) != i + 3 or tokens[i + 2] != keyword:
                self.declaration_error(
                    "'%s' is not a well-formed ENTITY because it contains "
                    "additional illegal markup." % decl)
            replacement_text = self.expand(tokens[i + 1],
                                           PEStyle.InEntityDeclaration)
            if '%' in replacement_text:
                self.declaration_error(
                    "Entities cannot contain the character '%' unless as "
                    "part of a parameter entity reference.")
        else:
            self.declaration_error("'%s' is not a well-formed ENTITY." % decl)
        if parameter:
            entity = structures.ParameterEntity(
                name, replacement_text, system_id, public_id)
        else:
            entity = structures.GeneralEntity(
                name, replacement_text, system_id, public_id, notation)
        self.dtd.declare_entity(entity)

    def check_external_entity(self, system_id):
        """Checks that the file named by *system_id* can be read

        The outcome is always recorded as a warning, the content of the
        file is discarded."""
        path = system_id
        if self.base_dir is not None:
            path = os.path.join(self.base_dir, system_id)
        logging.warning("Checking external entity: %s", path)
        if os.path.isfile(path):
            try:
                self.read_external_entity(path)
            except IOError as err:
                logging.warning("Failed to read %s: %s", path, str(err))
                self.warning("An external entity is declared but reading "
                             "from the file given by its system identifier "
                             "failed.")
                return
            self.warning("This DTD parser is not programmed to parse "
                         "additional external entities.")
        else:
            self.warning("An external entity is declared but its system "
                         "identifier does not point to a file.")

    def read_external_entity(self, path):
        """Returns the raw bytes of the external entity at *path*"""
        with open(path, 'rb') as f:
            return f.read()

    def parse_pi(self, text, text_decl_allowed=False):
        """[16] PI

        text
            The text between '<?' and '?>'

        text_decl_allowed
            True if the PI was found at the very start of the main text
            of the DTD, where it may be a text declaration."""
        i = 0
        while i < len(text) and not is_s(text[i]):
            i += 1
        target = text[:i]
        if not target:
            self.declaration_error(
                "This processing instruction does not have a target.")
        if not is_valid_name(target):
            self.declaration_error(
                "The target of a processing instruction must be a Name.")
        data = text[i:].lstrip(' \t\n')
        if target.lower() == 'xml':
            if text_decl_allowed and target == 'xml':
                self.dtd.text_declaration = data
                return
            self.declaration_error(
                "The processing instruction target '%s' is reserved." %
                target)
        self.dtd.add_processing_instruction(
            structures.ProcessingInstruction(target, data))

    def parse_markup_decl(self, decl):
        """[29] markupdecl

        decl
            The complete declaration, starting with '<!' and ending
            with '>'."""
        for keyword, method in (
                ('ELEMENT', self.parse_element_decl),
                ('ATTLIST', self.parse_attlist_decl),
                ('NOTATION', self.parse_notation_decl),
                ('ENTITY', self.parse_entity_decl)):
            kend = 2 + len(keyword)
            if (decl.startswith(keyword, 2) and
                    decl[kend:kend + 1] in DECL_SEPARATORS):
                method(decl[kend + 1:-1])
                return
        self.declaration_error(
            "This declaration type does not exist (only ELEMENT, ATTLIST, "
            "NOTATION and ENTITY are possible).")

    def parse_global_pe_reference(self, name):
        """Parses the replacement text of a parameter entity

        name
            The name of a parameter entity referenced between
            declarations.

        The replacement text is scanned as if it were a complete DTD, the
        position in the current text is restored afterwards."""
        pe = self.dtd.get_parameter_entity(name)
        if pe is None:
            self.error("The parameter entity '%s' is not yet declared." % name)
            return
        nerrors = len(self.dtd.errors)
        self.parse_global_space(pe.replacement_text,
                                self.context.internal_subset, pe)
        if len(self.dtd.errors) > nerrors:
            self.warning("The line numbers in the previous errors may not be "
                         "accurate because these errors occurred within a "
                         "parameter entity reference.")

    def parse_global_space(self, text, internal_subset=False, entity=None):
        """Scans a block of DTD text

        text
            The text to scan

        internal_subset
            True if the text is part of an internal subset

        entity
            The parameter entity whose replacement text is being
            scanned, if any.

        The text is scanned with a new :class:`ScanContext`, the
        previous context is restored on return.  Errors that prevent the
        scan from going any further stop this scan only."""
        saved = self.context
        self.context = ctx = ScanContext(
            strip_comments(normalize_line_ends(text)), internal_subset, entity)
        try:
            try:
                self.scan(ctx)
            except ScanHalted as err:
                logging.debug("Scan stopped at line %i: %s", ctx.line, err)
            if ctx.include_depth or ctx.ignore_depth:
                self.error("A conditional section was not closed by the end "
                           "of the DTD.")
        finally:
            self.context = saved

    def scan(self, ctx):
        while True:
            ctx.skip_s()
            if ctx.at_end():
                break
            if ctx.starts_with(']]>'):
                if ctx.ignore_depth:
                    ctx.ignore_depth -= 1
                elif ctx.include_depth:
                    ctx.include_depth -= 1
                else:
                    self.error("The token ']]>' does not close any "
                               "conditional section at this position.")
                ctx.offset += 3
            elif ctx.starts_with('<!['):
                self.scan_conditional_sect(ctx)
            elif ctx.ignore_depth:
                ctx.offset += 1
            elif ctx.starts_with('%'):
                self.scan_pe_reference(ctx)
            elif ctx.starts_with('<!--'):
                self.scan_error(
                    "The comment contained two consecutive dashes '--' "
                    "which is not permitted. Perhaps your file contained "
                    "nested comments?")
            elif ctx.starts_with('<!'):
                self.scan_markup_decl(ctx)
            elif ctx.starts_with('<?'):
                self.scan_pi(ctx)
            elif ctx.starts_with('<'):
                self.scan_error("The character '<' here must be immediately "
                                "followed by '!' or '?'.")
            else:
                self.scan_error(
                    "The character '%s' is not permitted here (only '%%', "
                    "'<!' and '<?' and possibly ']]>' are permitted)." %
                    ctx.text[ctx.offset])

    def scan_conditional_sect(self, ctx):
        """[61] conditionalSect"""
        if ctx.internal_subset:
            self.error("Internal subsets cannot contain conditional sections.")
        if ctx.ignore_depth:
            # nested sections are ignored too
            ctx.ignore_depth += 1
            ctx.offset += 3
            return
        bracket = ctx.text.find('[', ctx.offset + 3)
        if bracket < 0:
            self.scan_error("The conditional section is missing its second "
                            "opening bracket.")
        keyword = ctx.text[ctx.offset + 3:bracket]
        try:
            self.open_conditional_sect(ctx, keyword)
        except DeclarationError:
            # already recorded, the section content is scanned normally
            pass
        ctx.line += keyword.count('\n')
        ctx.offset = bracket + 1

    def open_conditional_sect(self, ctx, keyword):
        keyword = self.expand(keyword, PEStyle.IgnoreQuotedText).strip()
        if keyword == 'INCLUDE':
            ctx.include_depth += 1
        elif keyword == 'IGNORE':
            ctx.ignore_depth += 1
        else:
            self.error("The marked section was neither INCLUDE nor IGNORE. "
                       "No other marked sections are allowed in a DTD.")

    def scan_pe_reference(self, ctx):
        """[69] PEReference between declarations"""
        text = ctx.text
        i = ctx.offset + 1
        if i < len(text) and is_name_start_char(text[i]):
            i += 1
            while i < len(text) and is_name_char(text[i]):
                i += 1
        if i >= len(text) or text[i] != ';' or i == ctx.offset + 1:
            self.scan_error("The parameter entity reference is not finished.")
        name = text[ctx.offset + 1:i]
        ctx.offset = i + 1
        self.parse_global_pe_reference(name)

    def scan_markup_decl(self, ctx):
        text = ctx.text
        q = None
        i = ctx.offset + 2
        while i < len(text):
            c = text[i]
            if q is not None:
                if c == q:
                    q = None
            elif c in QUOTES:
                q = c
            elif c == '>':
                break
            i += 1
        else:
            self.scan_error("The markup declaration is not finished.")
        decl = text[ctx.offset:i + 1]
        try:
            self.parse_markup_decl(decl)
        except DeclarationError:
            # already recorded, carry on with the next declaration
            pass
        ctx.line += decl.count('\n')
        ctx.offset = i + 1

    def scan_pi(self, ctx):
        end = ctx.text.find('?>', ctx.offset + 2)
        if end < 0:
            self.scan_error("The processing instruction is not finished.")
        pi = ctx.text[ctx.offset + 2:end]
        text_decl_allowed = (ctx.offset == 0 and ctx.entity is None and
                             not ctx.internal_subset)
        try:
            self.parse_pi(pi, text_decl_allowed)
        except DeclarationError:
            pass
        ctx.line += pi.count('\n')
        ctx.offset = end + 2


def parse(text, internal_subset=""):
    """Parses the text of a DTD

    text
        The text of the DTD

    internal_subset
        The text of an internal subset, parsed before *text*

    Returns a :class:`~pydtd.structures.DTD` instance, even if there
    are errors."""
    return DTDParser().parse(text, internal_subset)


def parse_file(path, internal_subset="", encoding="utf-8", **options):
    """Parses a DTD file

    path
        The path of the file to parse

    encoding
        The character encoding of the file, defaults to UTF-8

    Any additional keyword arguments are passed to the
    :class:`DTDParser` constructor.  Relative system identifiers of
    external entities are resolved against the directory containing
    *path*.  I/O errors are not trapped."""
    with io.open(path, 'r', encoding=encoding) as f:
        text = f.read()
    if text.startswith(BOM):
        text = text[1:]
    parser = DTDParser(**options)
    parser.base_dir = os.path.dirname(os.path.abspath(path))
    return parser.parse(text, internal_subset)
