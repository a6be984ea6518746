# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
""" Generic methods for the SCons Environment class.

    These are added to an environment instance when the component tool is
    applied.  The component registration methods themselves are added by
    component_scons.tool.
"""
import os
import re

from SCons.Script import GetOption

import component_scons.debug as csd


_print_progress = not GetOption("no_progress")


# PrintProgress can be called (env, msg) or just (msg), depending on whether
# it is called as an Environment method.  So try to detect which it is.
def PrintProgress(*args):
    "Print the message unless the no_progress option (-Q) is in effect."
    if not isinstance(args[0], str):
        args = args[1:]
    if _print_progress:
        print(*args)


def PrintError(*args):
    "Print an error message, which is never suppressed by -Q."
    if not isinstance(args[0], str):
        args = args[1:]
    print("*** Error:", *args)


def PassEnv(env, regexp):
    """Pass system environment variables matching regexp to the scons
    execution environment."""
    for ek in os.environ.keys():
        if re.match(regexp, ek):
            env['ENV'][ek] = os.environ[ek]


def AddMethods(env):
    env.AddMethod(csd.LogDebug)
    env.AddMethod(PrintProgress)
    env.AddMethod(PrintError)
    env.AddMethod(PassEnv)
