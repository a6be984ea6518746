# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""
Output directory properties for component targets.

A build tree holds either a single configuration or several of them, as
listed in COMPONENT_CONFIGURATION_TYPES.  In a multi-configuration tree,
output paths contain the $CONFIGURATION token, and each target gets one
output directory property per configuration with the token replaced.  In
a single-configuration tree the token is just '.', and the properties
carry no configuration suffix.
"""

import os

CONFIGURATION_TOKEN = '$CONFIGURATION'

# Platforms where loadable modules are DLLs which go with the executables.
_dll_platforms = ['win32', 'cygwin']


def ConfigurationTypes(env):
    "Return the list of configurations of a multi-configuration tree."
    types = env.get('COMPONENT_CONFIGURATION_TYPES')
    if not types:
        return []
    return env.Split(types)


def CfgIntDir(env):
    """
    Return the intermediate directory token, the $CONFIGURATION token for
    a multi-configuration tree and '.' otherwise.
    """
    if ConfigurationTypes(env):
        return CONFIGURATION_TOKEN
    return '.'


def ConfigurationDir(env, path):
    "Return the concrete output path for the active configuration."
    return os.path.normpath(env.subst(path))


def OutputDirectories(env, binary_dir=None, library_dir=None):
    """
    Return a dictionary of output directory properties for the given
    binary and library directories.

    The module directory, which receives loadable modules, follows the
    binary directory on DLL platforms and the library directory elsewhere.
    """
    if env['PLATFORM'] in _dll_platforms:
        module_dir = binary_dir
    else:
        module_dir = library_dir

    kinds = [('RUNTIME_OUTPUT_DIRECTORY', binary_dir),
             ('ARCHIVE_OUTPUT_DIRECTORY', library_dir),
             ('LIBRARY_OUTPUT_DIRECTORY', module_dir)]
    properties = {}
    intdir = CfgIntDir(env)
    if intdir != '.':
        for mode in ConfigurationTypes(env):
            suffix = mode.upper()
            for prop, path in kinds:
                if path:
                    properties[prop + '_' + suffix] = \
                        path.replace(intdir, mode)
    else:
        for prop, path in kinds:
            if path:
                properties[prop] = path
    return properties
