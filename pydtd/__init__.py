#! /usr/bin/env python
"""A parser for XML Document Type Definitions

Typical usage::

    import pydtd

    dtd = pydtd.parse(text)
    if not dtd.is_well_formed_and_valid():
        for e in dtd.errors:
            print(e)"""

from .info import version as __version__  # noqa

from .parser import DTDParser, parse, parse_file  # noqa
from .structures import (  # noqa
    Attribute,
    AttributeType,
    DefaultType,
    Diagnostic,
    DTD,
    Element,
    GeneralEntity,
    Notation,
    ParameterEntity,
    ProcessingInstruction)
