#!/usr/bin/env python

import logging
import sys

import pydtd.info

if sys.hexversion < 0x03050000:
    logging.error("pydtd requires Python Version 3.5 (or greater)")
else:
    from setuptools import setup

    with open('README.rst') as f:
        long_description = f.read()

    setup(name=pydtd.info.name,
          version=pydtd.info.version,
          description=pydtd.info.title,
          long_description=long_description,
          author="the pydtd authors",
          packages=['pydtd'],
          python_requires='>=3.5',
          classifiers=['Development Status :: 3 - Alpha',
                       'Intended Audience :: Developers',
                       'Natural Language :: English',
                       'License :: OSI Approved :: BSD License',
                       'Operating System :: OS Independent',
                       'Programming Language :: Python',
                       'Programming Language :: Python :: 3',
                       'Topic :: Text Processing :: Markup :: XML',
                       'Topic :: Software Development :: '
                       'Libraries :: Python Modules']
          )
