# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""
Test applications are programs which exercise the component runtime
library.  Some of their sources are compiled by clang rather than the
compiler of the Environment, for instance to test code generated by a
clang plugin.  Those are compiled by an explicit clang command into
external object files which are then linked into the program.
"""

import os

import SCons.Util
from SCons.Action import Action

from component_scons.naming import Capitalize
from component_scons.outputdir import CfgIntDir
from component_scons.outputdir import ConfigurationDir

TEST_APPLICATION_FOLDER = "Component test applications"

_clang_command = ("$CLANG $COMPONENT_CLANG_FLAGS -c $COMPONENT_CLANG_CFLAGS "
                  "-o ${TARGET.abspath} ${SOURCE.abspath}")
_clang_action = Action(_clang_command, "Compiling ${SOURCE.abspath}")


def _msvc(env):
    return 'msvc' in env.get('TOOLS', [])


def ClangFlags(env):
    if _msvc(env):
        return ['--driver-mode=cl', '/EHsc', '/MTd']
    return ['-std=c++14']


def TestApplication(env, registry, name, extra=None, sources=None,
                    headers=None, clang=None, cflags=None):
    """
    Create the test application program @p name from sources, extra
    sources and the objects compiled by clang from the @p clang sources.
    Headers and clang sources are listed in the target properties as
    IDE-only sources.
    """
    extra = SCons.Util.flatten(extra or [])
    sources = SCons.Util.flatten(sources or [])
    headers = SCons.Util.flatten(headers or [])
    clang = SCons.Util.flatten(clang or [])

    aenv = env.Clone()
    aenv.SetDefault(CLANG='clang')
    aenv['COMPONENT_CLANG_FLAGS'] = ClangFlags(env)
    aenv['COMPONENT_CLANG_CFLAGS'] = SCons.Util.flatten(cflags or [])

    runtime = None
    runtime_name = env.get('COMPONENT_RUNTIME_LIBRARY')
    if runtime_name:
        context = registry.GetComponent(runtime_name)
        if context is not None and context.library:
            runtime = context.library
        else:
            env.LogDebug("runtime library %s is not a component target" %
                         (runtime_name))

    builddir = env.Dir('.').get_abspath()
    srcdir = env.Dir('.').srcnode().get_abspath()
    objects = []
    for source in clang:
        obj = os.path.join(builddir, str(source) + '.obj')
        src = os.path.join(srcdir, str(source))
        aenv.Command(obj, src, _clang_action, chdir=builddir)
        if runtime:
            aenv.Depends(obj, runtime)
        objects.append(obj)

    outdir = os.path.join(builddir, CfgIntDir(env))
    registry.SetOutputDirectory(env, name, binary_dir=outdir,
                                library_dir=outdir)
    if runtime:
        aenv.Append(LIBS=[runtime[0]])
    elif runtime_name:
        aenv.Append(LIBS=[Capitalize(runtime_name)])
    if _msvc(env):
        aenv.Append(LINKFLAGS=['/INCREMENTAL:NO'])

    target = os.path.join(ConfigurationDir(env, outdir), name)
    program = aenv.Program(target, sources + extra + objects)
    if runtime:
        aenv.Depends(program, runtime)

    properties = {'FOLDER': TEST_APPLICATION_FOLDER}
    if headers or clang:
        properties['HEADERS'] = [str(h) for h in headers + clang]
    registry.SetProperties(name, properties)
    return program
