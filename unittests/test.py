#! /usr/bin/env python
"""Runs unit tests on all pydtd modules"""

import unittest
import logging

import test_entities
import test_enumeration
import test_names
import test_parser
import test_structures
import test_tokenizer
import test_unicode5


all_tests = unittest.TestSuite()
all_tests.addTest(test_entities.suite())
all_tests.addTest(test_enumeration.suite())
all_tests.addTest(test_names.suite())
all_tests.addTest(test_parser.suite())
all_tests.addTest(test_structures.suite())
all_tests.addTest(test_tokenizer.suite())
all_tests.addTest(test_unicode5.suite())


def suite():
    global all_tests
    return all_tests


def load_tests(loader, tests, pattern):
    return suite()

if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
