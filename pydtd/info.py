#! /usr/bin/env python
"""The module creates some basic constants to describe the pydtd package."""

title_name = "pydtd"
name = "pydtd"
copyright = "\xA92024-2026, the pydtd authors"

major_version = "0.3"
build_date = "20261019"
version = "%s.%s" % (major_version, build_date)

title = (
    "pydtd: "
    "a parser for XML Document Type Definitions")
