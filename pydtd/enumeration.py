#! /usr/bin/env python
"""Closed enumerations with string representations"""

import logging


class EnumMetaClass(type):

    """Metaclass for :class:`Enumeration`

    Initialises the Enumeration immediately after the class is
    defined."""

    def __init__(self, name, bases, dct):
        super(EnumMetaClass, self).__init__(name, bases, dct)
        self._init_enum()


class Enumeration(object, metaclass=EnumMetaClass):

    """Abstract class for defining enumerations

    The class is not designed to be instantiated but to act as a method
    of defining constants to represent the values of an enumeration and
    for converting between those constants and the keywords used to
    represent them in DTD markup.

    The basic usage of this class is to derive a class from it with a
    single class member called 'decode' which is a mapping from
    canonical strings to simple integers.

    Once defined, the class will be automatically populated with a
    reverse mapping dictionary (called encode) and the enumeration
    strings will be added as attributes of the class itself.  For
    example::

        class Presence(Enumeration):
            decode = {
                'REQUIRED': 1,
                'IMPLIED': 2}

        Presence.REQUIRED == 1    # True thanks to metaclass

    You can define additional mappings by providing a second
    dictionary called aliases that maps additional strings onto the
    canonical ones::

        class Presence(Enumeration):
            decode = {
                'REQUIRED': 1,
                'IMPLIED': 2}

            aliases = {
                '#REQUIRED': 'REQUIRED',
                '#IMPLIED': 'IMPLIED'}

        Presence.from_str('#IMPLIED') == Presence.IMPLIED   # True

    Aliases that are not valid python identifiers can only be decoded,
    they are not reachable as class attributes."""

    @classmethod
    def _init_enum(cls):
        if 'decode' not in cls.__dict__:
            # Skip initialisation for Enumeration itself
            return
        cls.encode = dict((v, k) for k, v in cls.decode.items())
        for k, v in cls.__dict__.get('aliases', {}).items():
            cls.decode[k] = cls.decode[v]
        for k, v in cls.decode.items():
            if not k.isidentifier():
                continue
            if hasattr(cls, k):
                logging.error("Illegal name for Enumeration: %s" % repr(k))
            else:
                setattr(cls, k, v)

    @classmethod
    def from_str(cls, src):
        """Decodes a string returning a value in this enumeration.

        If no legal value can be decoded then ValueError is raised."""
        try:
            return cls.decode[src.strip()]
        except KeyError:
            raise ValueError("Can't decode %s from %s" % (cls.__name__, src))

    @classmethod
    def to_str(cls, value):
        """Encodes one of the enumeration constants returning a string.

        Unknown values return None."""
        return cls.encode.get(value, None)

    @classmethod
    def values(cls):
        """Returns the constants of the enumeration in ascending order"""
        return sorted(cls.encode)
