# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.

from component_scons.naming import Capitalize


def test_capitalize():
    assert Capitalize("number-recognizer") == "NumberRecognizer"
    assert Capitalize("number_recognizer") == "NumberRecognizer"
    assert Capitalize("a1-b2") == "A1B2"
    assert Capitalize("blick") == "Blick"
    # only the first letter of each word changes
    assert Capitalize("xml-HTTP-parser") == "XmlHTTPParser"


def test_capitalize_no_words():
    assert Capitalize("") == ""
    assert Capitalize("123") == ""
    assert Capitalize("--__") == ""


def test_capitalize_drops_leading_digits():
    assert Capitalize("123abc") == "Abc"
    assert Capitalize("lib-2d-shapes") == "LibDShapes"


def test_capitalize_reapplied():
    assert Capitalize(Capitalize("number-recognizer")) == "NumberRecognizer"
    assert Capitalize(Capitalize("a1-b2")) == "A1B2"
