# -*- python -*-
# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.

"""
Tool methods invoked when tools/component.py is loaded as a tool.  This
module is not actually a scons tool, it is just the functionality which
applies the component extensions as if it were a tool.

These Environment methods are added:

  env.ComponentProject(name)
  env.ComponentLibrary(name, *sources, runtime_target=False, headers=None)
  env.ComponentTests(name, *sources)
  env.ComponentTestApplication(name, *extra, sources=, headers=, clang=,
                               cflags=)
  env.SetOutputDirectory(target, binary_dir=None, library_dir=None)
  env.ComponentRegistry()
  env.CheckComponents()
"""

from component_scons import Debug
import component_scons.methods
import component_scons.variables as csv
import component_scons.testapp
from component_scons.registry import DefaultRegistry
from component_scons.registry import GetRegistry


def _ComponentProject(env, name):
    return GetRegistry(env).DeclareProject(env, name)


def _ComponentLibrary(env, name, *sources, runtime_target=False,
                      headers=None):
    return GetRegistry(env).DeclareLibrary(env, name, list(sources),
                                           runtime_target=runtime_target,
                                           headers=headers)


def _ComponentTests(env, name, *sources):
    return GetRegistry(env).DeclareTests(env, name, list(sources))


def _ComponentTestApplication(env, name, *extra, sources=None, headers=None,
                              clang=None, cflags=None):
    return component_scons.testapp.TestApplication(
        env, GetRegistry(env), name, list(extra), sources=sources,
        headers=headers, clang=clang, cflags=cflags)


def _SetOutputDirectory(env, target, binary_dir=None, library_dir=None):
    return GetRegistry(env).SetOutputDirectory(env, target, binary_dir,
                                               library_dir)


def _ComponentRegistry(env):
    return GetRegistry(env)


def _CheckComponents(env):
    """
    Fail the build with all the component configuration errors collected
    so far, if there are any.  Call this at the end of the SConstruct.
    """
    GetRegistry(env).diagnostics.check()


def generate(env, **_kw):
    """
    Add the component methods to the given environment.  Any default tool
    should have already been applied.
    """
    Debug("Entering component_scons.tool.generate()...")
    if hasattr(env, "_component_scons_generated"):
        env.LogDebug("skipping generate(), already applied")
        return
    env._component_scons_generated = True

    component_scons.methods.AddMethods(env)
    csv._update_variables(env)

    env.SetDefault(CONFIGURATION='Release')
    env.SetDefault(COMPONENT_TEST_RUNNER='test_runner.cpp')
    env.SetDefault(COMPONENT_REGISTRY=DefaultRegistry())

    env.AddMethod(_ComponentProject, "ComponentProject")
    env.AddMethod(_ComponentLibrary, "ComponentLibrary")
    env.AddMethod(_ComponentTests, "ComponentTests")
    env.AddMethod(_ComponentTestApplication, "ComponentTestApplication")
    env.AddMethod(_SetOutputDirectory, "SetOutputDirectory")
    env.AddMethod(_ComponentRegistry, "ComponentRegistry")
    env.AddMethod(_CheckComponents, "CheckComponents")

    # Test programs may need the library paths of the caller to run.
    env.PassEnv(r'LD_LIBRARY_PATH|DYLD_LIBRARY_PATH|PATH')
