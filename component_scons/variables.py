# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""Configuration knobs for component builds.

The knobs are SCons Variables, read from a config file at the top of the
tree (#/config.py by default) and from the command line.  None of them
has a default value in the Variables object.  That way a construction
variable set in an Environment before the component tool is applied is
never overwritten, and the registry can tell an explicit setting apart
from its own defaults.
"""

from SCons.Script import Variables
from SCons.Script import BoolVariable
from SCons.Script import DefaultEnvironment

import component_scons.debug
from component_scons.methods import PrintProgress

_global_variables = None
_default_cfile = "#/config.py"


def _AddComponentVariables(variables):
    variables.Add('COMPONENT_LIBRARY_FOLDER',
                  "IDE folder for component libraries built as subprojects.",
                  None)
    variables.Add('COMPONENT_TEST_FOLDER',
                  "IDE folder for component unit tests built as subprojects.",
                  None)
    variables.Add('COMPONENT_LIBRARY_DIR',
                  """Directory where all the components reside.  By default it
 is the parent directory of the first component configured.""",
                  None)
    variables.Add('COMPONENT_RTLIB_PATH',
                  """Directory which collects the libraries of components
 declared as runtime targets.""",
                  None)
    variables.Add('COMPONENT_RUNTIME_LIBRARY',
                  "Library linked into every component test application.",
                  None)
    variables.Add('COMPONENT_CONFIGURATION_TYPES',
                  """Space-separated list of build configurations, such as
 'Debug Release', for a multi-configuration build tree.""",
                  None)
    variables.Add('CONFIGURATION',
                  "The active build configuration, Release if not set.",
                  None)
    variables.AddVariables(
        BoolVariable('COMPONENT_IDE_HEADERS',
                     "List component headers as IDE-only sources.", None))


def _GlobalVariables(cfile=None, env=None):
    """Return the component_scons global variables."""
    global _global_variables
    if not _global_variables:
        if not env:
            env = DefaultEnvironment()
        if not cfile:
            cfile = _default_cfile
        cfile = env.File(cfile).get_abspath()
        _global_variables = Variables(cfile)
        component_scons.debug.AddVariables(_global_variables)
        _AddComponentVariables(_global_variables)
        PrintProgress("Config files: %s" % (_global_variables.files))
    return _global_variables


def PathToAbsolute(path, env):
    "Convert a Path variable to an absolute path relative to top directory."
    return env.Dir('#').Dir(path).get_abspath()


def GlobalVariables(env, cfile=None):
    return _GlobalVariables(cfile, env)


def _update_variables(env):
    env.AddMethod(GlobalVariables)

    variables = env.GlobalVariables()
    variables.Update(env)

    if 'componentdebug' in env:
        component_scons.debug.SetDebug(env['componentdebug'])
