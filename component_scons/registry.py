# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""
The component registry keeps track of the components configured in one
scons run.

A component is a source tree with its own headers, sources and unit
tests, laid out like this:

  <components>/number-recognizer/SConscript
  <components>/number-recognizer/include/
  <components>/number-recognizer/src/
  <components>/number-recognizer/unittests/

The SConscript of a component first declares the component project and
then its library and unit tests:

  env = Environment(tools=['default', 'component'])
  env.ComponentProject('number-recognizer')
  env.ComponentLibrary('number-recognizer', 'src/recognizer.cpp')
  env.ComponentTests('number-recognizer', 'unittests/test_recognizer.cpp')

The registry remembers the component most recently declared, and a
library or unit test declaration must name that component.

A component is either built standalone, when its SConscript is the top of
the build tree, or as a subproject of a larger project.  All the
subproject components must reside in the same directory.  The settings
shared by all the subprojects are kept in the ProcessConfiguration of the
registry.
"""

import glob
import os

import SCons.Util

from component_scons.debug import LookupDebug
from component_scons.naming import Capitalize
from component_scons.outputdir import CfgIntDir
from component_scons.outputdir import ConfigurationDir
from component_scons.outputdir import OutputDirectories
from component_scons.variables import PathToAbsolute
import component_scons.diagnostics as csdiag

STANDALONE = 'standalone'
EMBEDDED = 'embedded'

STANDALONE_LIBRARY_FOLDER = "library"
STANDALONE_TEST_FOLDER = "unit tests"
DEFAULT_LIBRARY_FOLDER = "Component libraries"
DEFAULT_TEST_FOLDER = "Component unit tests"

_header_patterns = ['*.h', '*.def']


class ProcessConfiguration:
    """
    Settings shared by all the components built as subprojects.  Each one
    is None until the first subproject component resolves it.
    """

    def __init__(self):
        self.library_folder = None
        self.test_folder = None
        self.components_dir = None


class ComponentContext:

    def __init__(self, name, mode, library_folder, test_folder, root):
        self.name = name
        self.project_name = Capitalize(name)
        self.mode = mode
        self.library_folder = library_folder
        self.test_folder = test_folder
        self.root = root
        self.include = os.path.join(root, 'include')
        self.headers = []
        self.library = None
        self.tests = None

    def __repr__(self):
        return "ComponentContext(%s, %s, root=%s)" % (self.name, self.mode,
                                                      self.root)


def _ide_aware(env):
    "True if headers should be listed as IDE-only sources."
    if env.get('COMPONENT_IDE_HEADERS'):
        return True
    return 'msvs' in env.get('TOOLS', [])


def ComponentHeaders(include):
    "Return the headers found anywhere under the include directory."
    headers = []
    for pattern in _header_patterns:
        headers.extend(glob.glob(os.path.join(include, '**', pattern),
                                 recursive=True))
    headers.sort()
    return headers


class ComponentRegistry:
    """
    Registry of the components configured in a scons run, along with the
    properties of their targets and the errors found so far.

    The top directory is where a standalone component must reside.  It
    defaults to the top of the scons source tree.
    """

    def __init__(self, top_dir=None):
        self.config = ProcessConfiguration()
        self.components = {}
        self.current = None
        self.project = None
        self.properties = {}
        self.diagnostics = csdiag.Diagnostics()
        self.top_dir = top_dir

    def GetComponent(self, name):
        "Return the context of the component by its raw or CamelCase name."
        return self.components.get(Capitalize(name))

    def GetProperties(self, target):
        return dict(self.properties.get(target, {}))

    def SetProperties(self, target, properties):
        self.properties.setdefault(target, {}).update(properties)

    def SetOutputDirectory(self, env, target, binary_dir=None,
                           library_dir=None):
        properties = OutputDirectories(env, binary_dir, library_dir)
        env.LogDebug("output directories of %s: %s" % (target, properties))
        self.SetProperties(target, properties)
        return properties

    def _build_mode(self, env, source_dir):
        top_dir = self.top_dir
        if top_dir is None:
            top_dir = env.Dir('#').get_abspath()
        if os.path.normpath(source_dir) == os.path.normpath(str(top_dir)):
            return STANDALONE
        return EMBEDDED

    def _resolve_folder(self, env, key, attr, default):
        # An explicit setting wins, otherwise the first resolved label is
        # shared by every subproject.
        label = env.get(key)
        if label is None:
            label = getattr(self.config, attr)
        if label is None:
            label = default
        if getattr(self.config, attr) is None:
            setattr(self.config, attr, label)
        return label

    def _check_location(self, env, name, parent_dir):
        # Once recorded, the components root never changes.
        expected = self.config.components_dir
        preset = env.get('COMPONENT_LIBRARY_DIR')
        if preset is not None:
            preset = PathToAbsolute(preset, env)
            if expected is None:
                expected = preset
                self.config.components_dir = preset
            elif os.path.normpath(preset) != os.path.normpath(expected):
                self.diagnostics.report(
                    csdiag.ROOT_CONFLICT,
                    "Component library directory %s conflicts with %s" %
                    (preset, expected), name, env)
        if expected is None:
            env.LogDebug("components reside in %s" % (parent_dir))
            self.config.components_dir = parent_dir
            return
        if os.path.normpath(expected) != os.path.normpath(parent_dir):
            self.diagnostics.report(
                csdiag.ROOT_CONFLICT,
                "Unexpected component location: %s, but components must "
                "be placed in %s" % (parent_dir, expected), name, env)

    def DeclareProject(self, env, name):
        """
        Prepare the environment for building the given component and make
        it the current component.  Return the ComponentContext.
        """
        project_name = Capitalize(name)
        source_dir = env.Dir('.').srcnode().get_abspath()
        mode = self._build_mode(env, source_dir)
        if mode == STANDALONE:
            env.PrintProgress("%s is built as a standalone project" %
                              (project_name))
            self.project = project_name
            env['COMPONENT_PROJECT'] = project_name
            library_folder = STANDALONE_LIBRARY_FOLDER
            test_folder = STANDALONE_TEST_FOLDER
        else:
            env.PrintProgress("%s is built as a subproject" % (project_name))
            library_folder = self._resolve_folder(
                env, 'COMPONENT_LIBRARY_FOLDER', 'library_folder',
                DEFAULT_LIBRARY_FOLDER)
            test_folder = self._resolve_folder(
                env, 'COMPONENT_TEST_FOLDER', 'test_folder',
                DEFAULT_TEST_FOLDER)
            self._check_location(env, name, os.path.dirname(source_dir))

        if project_name in self.components:
            env.LogDebug("component %s declared again" % (name))
        context = ComponentContext(name, mode, library_folder, test_folder,
                                   source_dir)
        self.components[project_name] = context

        env.AppendUnique(CPPPATH=[context.include])
        if env['PLATFORM'] != 'win32':
            env.AppendUnique(CXXFLAGS=['-std=c++14'])
        else:
            env.AppendUnique(CXXFLAGS_RELEASE=['/MT'])
            env.AppendUnique(CXXFLAGS_DEBUG=['/MTd'])
            config = env.subst('$CONFIGURATION').upper()
            env.AppendUnique(CXXFLAGS=env.get('CXXFLAGS_' + config, []))

        self.current = name
        env.LogDebug("declared %r" % (context))
        if LookupDebug(name):
            print("%s: library folder '%s', test folder '%s', include %s" %
                  (name, library_folder, test_folder, context.include))
        return context

    def _active_component(self, env, name, use_current=False):
        """
        Check that name is the current component and return its context.
        Errors are reported but do not stop the declaration, as long as the
        component has been declared at some point.  With use_current, the
        context of the current component is returned after a mismatch,
        rather than the context of the named one.
        """
        if not self.current:
            self.diagnostics.report(csdiag.MISSING_COMPONENT,
                                    "Undefined component %s" % (name),
                                    name, env)
        elif name != self.current:
            self.diagnostics.report(
                csdiag.COMPONENT_MISMATCH,
                "Unexpected component name: %s, expected: %s" %
                (name, self.current), name, env)
            if use_current:
                name = self.current
        context = self.GetComponent(name)
        if context is None:
            env.LogDebug("no context for component %s, skipped" % (name))
        return context

    def DeclareLibrary(self, env, name, sources, runtime_target=False,
                       headers=None):
        """
        Create the static library of the current component.  Return the
        library nodes, or None if the component was never declared.

        With runtime_target, the library is collected with the other
        runtime libraries in COMPONENT_RTLIB_PATH, if that is set.
        """
        context = self._active_component(env, name)
        if context is None:
            return None
        project_name = context.project_name
        sources = SCons.Util.flatten(sources)

        properties = {'FOLDER': context.library_folder}
        if _ide_aware(env):
            context.headers = ComponentHeaders(context.include)
            context.headers.extend(SCons.Util.flatten(headers or []))
            if context.headers:
                properties['HEADERS'] = list(context.headers)

        target = project_name
        rtlib = env.get('COMPONENT_RTLIB_PATH')
        if runtime_target and rtlib:
            env.PrintProgress("Component %s provides runtime library" %
                              (project_name))
            rtlib = PathToAbsolute(rtlib, env)
            target = os.path.join(rtlib, project_name)
            properties['ARCHIVE_OUTPUT_DIRECTORY_DEBUG'] = rtlib
            properties['ARCHIVE_OUTPUT_DIRECTORY_RELEASE'] = rtlib

        library = env.Library(target, sources)
        context.library = library
        self.SetProperties(project_name, properties)
        return library

    def DeclareTests(self, env, name, sources):
        """
        Create the unit test program of the current component, and the
        check-<name> alias which runs it.  Return the program nodes, or
        None if no component has been declared.  When name is not the
        current component, the tests are still built for the current one.
        """
        context = self._active_component(env, name, use_current=True)
        if context is None:
            return None
        name = context.name
        program_name = context.project_name + 'Tests'
        sources = SCons.Util.flatten(sources)

        outdir = os.path.join(env.Dir('.').get_abspath(), CfgIntDir(env))
        self.SetOutputDirectory(env, program_name,
                                binary_dir=outdir, library_dir=outdir)

        tenv = env.Clone()
        tenv.Tool('boost_test')
        include_dir, library = tenv.BoostUnitTestLocation()
        if not include_dir or not library:
            self.diagnostics.report(csdiag.MISSING_TEST_DEPENDENCY,
                                    "Boost library was not located",
                                    name, env)
        if include_dir:
            tenv.AppendUnique(CPPPATH=[include_dir])
        if context.library:
            tenv.Prepend(LIBS=[context.library[0]])

        runner = env.get('COMPONENT_TEST_RUNNER', 'test_runner.cpp')
        target = os.path.join(ConfigurationDir(env, outdir), program_name)
        program = tenv.Program(target, [runner] + sources)
        if context.library:
            tenv.Depends(program, context.library)
        context.tests = program
        self.SetProperties(program_name, {'FOLDER': context.test_folder})

        alias = 'check-' + name
        check = tenv.Command(tenv.File(alias), program, "${SOURCE.abspath}")
        tenv.AlwaysBuild(check)
        tenv.Alias(alias, check)
        self.SetProperties(alias, {'FOLDER': context.test_folder})
        return program


_default_registry = None


def DefaultRegistry():
    "Return the registry shared by all the Environments of this scons run."
    global _default_registry
    if _default_registry is None:
        _default_registry = ComponentRegistry()
    return _default_registry


def GetRegistry(env):
    registry = env.get('COMPONENT_REGISTRY')
    if registry is None:
        registry = DefaultRegistry()
    return registry
