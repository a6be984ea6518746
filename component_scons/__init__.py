# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""
The component_scons package for building components with SCons.

A component is an independently developed source tree, with its own
headers, sources and unit tests, which can be built standalone or as a
subproject of a larger project.  This package adds the component_scons/tools
directory to the SCons tool path, so a component SConscript just applies
the 'component' tool and calls the methods it adds to the Environment:

  env = Environment(tools=['default', 'component'])
  env.ComponentProject('number-recognizer')
  env.ComponentLibrary('number-recognizer', Glob('src/*.cpp'))
  env.ComponentTests('number-recognizer', Glob('unittests/*.cpp'))

See component_scons.tool for the full list of methods.  This module itself
provides a few functions for use outside of the Environment methods:

component_scons.GlobalVariables(): Returns the global set of variables
available in this source tree.

component_scons.Capitalize(name): Returns the CamelCase name used for the
targets of a component.

component_scons.DefaultRegistry(): Returns the registry of the components
configured so far.

component_scons.Debug(msg): Print a debug message if the global debugging
flag is true.
"""

import os

import SCons.Tool

from component_scons.debug import Debug
from component_scons.debug import LookupDebug
from component_scons.debug import SetDebug
from component_scons.naming import Capitalize
from component_scons.variables import _GlobalVariables as GlobalVariables
from component_scons.variables import PathToAbsolute
from component_scons.methods import PrintProgress
from component_scons.registry import ComponentRegistry
from component_scons.registry import DefaultRegistry

__version__ = "1.0.0"

# make it explicit what is meant for export
__all__ = [
    'Debug',
    'LookupDebug',
    'SetDebug',
    'Capitalize',
    'GlobalVariables',
    'PathToAbsolute',
    'PrintProgress',
    'ComponentRegistry',
    'DefaultRegistry',
    'ToolsDir',
]


_componentsconsdir = os.path.abspath(os.path.dirname(__file__))
tools_dir = os.path.normpath(os.path.join(_componentsconsdir, "tools"))


def ToolsDir():
    "Return the directory of the component_scons tool modules."
    return tools_dir


def _InstallToolsPath():
    "Add the component_scons/tools dir to the tool path."
    if tools_dir not in SCons.Tool.DefaultToolpath:
        Debug("Using site_tools: %s" % (tools_dir))
        SCons.Tool.DefaultToolpath.insert(0, tools_dir)


_InstallToolsPath()
Debug("component_scons.__init__ loaded: %s." % (__file__))
