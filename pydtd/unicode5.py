#! /usr/bin/env python
"""Unicode character classes used by the name productions"""


class CharClass(object):

    """Represents a class of unicode characters.

    A class of characters is represented internally by a sorted list of
    non-overlapping, non-adjacent character ranges.  This is efficient
    because the classes defined by the XML specification are made up of
    a modest number of large blocks.

    For the constructor, multiple arguments can be provided.

    String arguments add all characters in the string to the class.  For
    example, CharClass('abcxyz') creates a class comprising two ranges:
    a-c and x-z.

    Tuple/List arguments can be used to pass pairs of characters that
    define a range.  For example, CharClass(('a','z')) creates a class
    comprising the letters a-z.

    Instances of CharClass can also be used in the constructor to add an
    existing class::

        >>> c = CharClass('abcxyz')
        >>> print(repr(c))
        CharClass(('a', 'c'), ('x', 'z'))
    """

    def __init__(self, *args):
        self.ranges = []
        self._clear_cache()
        for arg in args:
            if isinstance(arg, str):
                for c in arg:
                    self.add_char(c)
            elif type(arg) in (tuple, list):
                self.add_range(arg[0], arg[1])
            elif isinstance(arg, CharClass):
                self.add_class(arg)
            else:
                raise ValueError(repr(arg))

    def __repr__(self):
        result = []
        for a, z in self.ranges:
            if a == z:
                result.append(repr(a))
            else:
                result.append("(%r, %r)" % (a, z))
        return "CharClass(%s)" % ', '.join(result)

    def __eq__(self, other):
        """Compares two character classes for equality."""
        return self.ranges == other.ranges

    def add_range(self, a, z):
        """Adds a range of characters from a to z to the class"""
        if z < a:
            a, z = z, a
        lo = ord(a)
        hi = ord(z)
        merged = []
        inserted = False
        for ra, rz in self.ranges:
            if ord(rz) < lo - 1:
                merged.append([ra, rz])
            elif ord(ra) > hi + 1:
                if not inserted:
                    merged.append([chr(lo), chr(hi)])
                    inserted = True
                merged.append([ra, rz])
            else:
                # overlapping or adjacent, absorb into the new range
                lo = min(lo, ord(ra))
                hi = max(hi, ord(rz))
        if not inserted:
            merged.append([chr(lo), chr(hi)])
        self.ranges = merged
        self._clear_cache()

    def add_char(self, c):
        """Adds a single character to the character class"""
        self.add_range(c, c)

    def add_class(self, c):
        """Adds all the characters in c to the character class

        This is effectively a union operation."""
        for a, z in c.ranges:
            self.add_range(a, z)

    def _clear_cache(self):
        self._block_cache = [None] * 256

    def test(self, c):
        """Test a unicode character.

        Returns True if the character is in the class.

        If c is None, False is returned.

        Results for the first 64K characters are cached in blocks of 256
        characters: the name tests are called for every character of
        every name the parser reads so most calls are answered with a
        single index operation."""
        if c is None or not self.ranges:
            return False
        cv = ord(c)
        block_num = cv >> 8
        if block_num >= len(self._block_cache):
            return self._bisection_search(cv)
        block = self._block_cache[block_num]
        if block is None:
            block = bytearray(256)
            base = block_num << 8
            for i in range(256):
                if self._bisection_search(base + i):
                    block[i] = 1
            self._block_cache[block_num] = block
        return bool(block[cv & 0xFF])

    def _bisection_search(self, cv):
        """Returns True if code point cv falls in one of our ranges"""
        rmin = 0
        rmax = len(self.ranges) - 1
        while rmin <= rmax:
            rtry = (rmin + rmax) // 2
            a, z = self.ranges[rtry]
            if cv < ord(a):
                rmax = rtry - 1
            elif cv > ord(z):
                rmin = rtry + 1
            else:
                return True
        return False
