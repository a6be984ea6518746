# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""
Transform component names from snake-case to CamelCase:

  number-recognizer -> NumberRecognizer

The capitalized name is used for the library target, the unit test
program and as the key of the component in the registry.
"""

import re

_word = re.compile(r"[A-Za-z][A-Za-z0-9]*")


def Capitalize(name):
    """
    Concatenate every word of @p name with its first letter upper-cased.
    A word is a letter followed by letters or digits; anything else,
    including digits which do not follow a letter, only separates words
    and is dropped.  A name without any words gives an empty string.
    """
    return "".join(word[0].upper() + word[1:]
                   for word in _word.findall(name))
