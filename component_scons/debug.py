# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.

from SCons.Script import ARGUMENTS

debug = ARGUMENTS.get('componentdebug', None)


def SetDebug(spec):
    """
    Set the debugging specifier to enable or disable printing of debug
    messages.  The specifier is either '1' or a comma-separated list of
    component names to trace.
    """
    global debug
    debug = spec


def GetSubdir(env):
    subdir = str(env.Dir('.').get_path(env.Dir('#')))
    if subdir == '.':
        subdir = 'root'
    return subdir


def AddVariables(variables):
    variables.Add('componentdebug',
"""
Enable debug messages from component_scons.  Setting to 1 enables all
messages.  Or, set it to a comma-separated list of component names to
trace just those components, eg:
  componentdebug=number-recognizer
""",
                  None)


def LookupDebug(component):
    """
    Return true if this component name appears in the debug key list, or
    if debugging is enabled for everything.
    """
    if not debug:
        return False
    keys = [v.strip() for v in debug.split(',')]
    return '1' in keys or component in keys


def Debug(msg, env=None):
    """Print a debug message if the global debugging flag is true."""
    LogDebug(env, msg)


def LogDebug(env, msg):
    if debug:
        context = ""
        if env:
            context = GetSubdir(env) + ": "
        print("%s%s" % (context, msg))


SetDebug(debug)
