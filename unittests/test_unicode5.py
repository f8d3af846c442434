#! /usr/bin/env python

import logging
import unittest

from pydtd import unicode5


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(CharClassTests),
    ))


class CharClassTests(unittest.TestCase):

    def class_test(self, cclass):
        result = []
        for c in range(ord('a'), ord('z') + 1):
            if cclass.test(chr(c)):
                result.append(chr(c))
        result = ''.join(result)
        return result

    def test_constructor(self):
        c = unicode5.CharClass()
        for code in range(0x300):
            self.assertFalse(c.test(chr(code)))
        self.assertFalse(c.test(chr(0x10FFFF)))
        c = unicode5.CharClass('a')
        self.assertTrue(self.class_test(c) == 'a')
        c = unicode5.CharClass(('a', 'z'))
        self.assertTrue(self.class_test(c) == 'abcdefghijklmnopqrstuvwxyz')
        c = unicode5.CharClass('abcxyz')
        self.assertTrue(
            len(c.ranges) == 2, "No range optimization: %s" % repr(c.ranges))
        self.assertTrue(self.class_test(c) == 'abcxyz')
        cc = unicode5.CharClass(c)
        self.assertTrue(self.class_test(cc) == 'abcxyz')
        c = unicode5.CharClass(('a', 'c'), ('e', 'g'), 'd')
        self.assertTrue(
            len(c.ranges) == 1, "Missing range optimization: %s"
            % repr(c.ranges))
        try:
            unicode5.CharClass(1)
            self.fail("CharClass(1) failed to raise ValueError")
        except ValueError:
            pass

    def test_complex_constructors(self):
        init_tests = [
            [[], ""],
            [[['a', 'z']], "abcdefghijklmnopqrstuvwxyz"],
            [[['a', 'd'], ['f', 'k']], "abcdfghijk"],
            [[['b', 'b']], "b"],
            [[['a', 'b'], ['c', 'd'], ['e', 'f'], ['g', 'h'],
              ['i', 'j'], ['k', 'k']], "abcdefghijk"],
            [[['a', 'b'], ['d', 'f'], ['h', 'h']], "abdefh"],
            [[['h', 'h'], ['d', 'f'], ['a', 'b']], "abdefh"],
            [[['z', 'w']], "wxyz"],
        ]
        for test in init_tests:
            c = unicode5.CharClass(*test[0])
            result = self.class_test(c)
            self.assertTrue(result == test[1],
                            "CharClass test: expected %s, found %s" %
                            (test[1], result))

    def test_add(self):
        c = unicode5.CharClass("ac")
        c.add_char("b")
        self.assertTrue(self.class_test(c) == "abc", "add_char")
        c.add_range("b", "e")
        self.assertTrue(self.class_test(c) == "abcde", "add_range")
        c.add_class(unicode5.CharClass(["m", "s"]))
        self.assertTrue(self.class_test(c) == "abcdemnopqrs", "add_class")
        self.assertTrue(len(c.ranges) == 2, repr(c))

    def test_cache(self):
        c = unicode5.CharClass(('a', 'c'))
        self.assertTrue(c.test('b'))
        self.assertFalse(c.test('z'))
        # the results for block 0 are now cached
        c.add_char('z')
        self.assertTrue(c.test('z'), "cache not cleared by add_char")
        self.assertFalse(c.test(None))

    def test_astral(self):
        c = unicode5.CharClass((chr(0x10000), chr(0xEFFFF)))
        self.assertTrue(c.test(chr(0x10000)))
        self.assertTrue(c.test(chr(0x20000)))
        self.assertTrue(c.test(chr(0xEFFFF)))
        self.assertFalse(c.test(chr(0xF0000)))
        self.assertFalse(c.test(chr(0xFFFF)))
        self.assertFalse(c.test('a'))

    def test_representation(self):
        repr_tests = [
            [[], "CharClass()"],
            [[['a', 'z']], "CharClass(('a', 'z'))"],
            [[['a', 'd'], ['f', 'k']], "CharClass(('a', 'd'), ('f', 'k'))"],
            [[['-', '-']], "CharClass('-')"]]
        for test in repr_tests:
            c = unicode5.CharClass(*test[0])
            self.assertTrue(repr(c) == test[1],
                            "CharClass repr: expected %s, found %s" %
                            (test[1], repr(c)))

    def test_eq(self):
        self.assertTrue(unicode5.CharClass('abc') ==
                        unicode5.CharClass(('a', 'c')))
        self.assertFalse(unicode5.CharClass('abc') ==
                         unicode5.CharClass(('a', 'd')))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
