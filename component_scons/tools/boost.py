# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""
Configure the environment for building against boost, either the system
installation or the one under BOOST_DIR.

The BoostUnitTestLocation() method locates the boost::test header and
library, which component unit test programs require.
"""
import glob
import os
import SCons.Util

_options = None

liblibs = ['boost_unit_test_framework',
           'boost_prg_exec_monitor',
           'boost_test_exec_monitor']

_unit_test_header = os.path.join('boost', 'test', 'unit_test.hpp')
_unit_test_library = 'boost_unit_test_framework'

_system_include_dirs = ['/usr/include', '/usr/local/include']
_system_lib_dirs = ['/usr/lib', '/usr/lib64', '/usr/local/lib']


def boost_libflags(env):
    newlibs = []
    for lib in env['LIBS']:
        if SCons.Util.is_String(lib) and \
                lib.startswith("boost_") and \
                not lib.endswith("$BOOST_LIBRARY_SUFFIX"):
            if env['PLATFORM'] == 'msys' and lib in liblibs:
                lib = 'lib'+lib
            newlibs.append(lib+"$BOOST_LIBRARY_SUFFIX")
        else:
            newlibs.append(lib)
    env['LIBS'] = newlibs
    result = env.subst(env['_boost_save_libflags'])
    return result


def _append_boost_library(env, libname):
    if env['PLATFORM'] != 'darwin' and env['PLATFORM'] != 'msys':
        env.Append(LIBS=[libname])
    else:
        env.Append(LIBS=[libname + "-mt"])


def _search_dirs(env):
    "Return the include and library directories where boost may be found."
    bdir = env.get('BOOST_DIR')
    if bdir and bdir != "/usr":
        bdir = env.Dir('#').Dir(bdir).get_abspath()
        # Windows installs don't have a separate include directory.
        return ([os.path.join(bdir, "include"), bdir],
                [os.path.join(bdir, "lib"), bdir])
    incdirs = [env.Dir(d).get_abspath() for d in env.get('CPPPATH', [])]
    libdirs = [env.Dir(d).get_abspath() for d in env.get('LIBPATH', [])]
    incdirs.extend(_system_include_dirs)
    libdirs.extend(_system_lib_dirs)
    # multiarch library directories, like /usr/lib/x86_64-linux-gnu
    libdirs.extend(sorted(glob.glob('/usr/lib/*-linux-gnu*')))
    return incdirs, libdirs


def boost_unit_test_location(env):
    """
    Return a tuple with the include directory containing the boost::test
    headers and the path to the boost::test library.  Either one is None
    if it cannot be found.  BOOST_INCLUDE_DIR and
    BOOST_UNIT_TEST_FRAMEWORK_LIBRARY, when set, are used without
    searching.
    """
    include_dir = env.get('BOOST_INCLUDE_DIR')
    library = env.get('BOOST_UNIT_TEST_FRAMEWORK_LIBRARY')
    incdirs, libdirs = _search_dirs(env)
    if not include_dir:
        for idir in incdirs:
            if os.path.isfile(os.path.join(idir, _unit_test_header)):
                include_dir = idir
                break
    if not library:
        patterns = ['lib' + _unit_test_library + '*', _unit_test_library + '*']
        for ldir in libdirs:
            matches = []
            for pattern in patterns:
                matches.extend(glob.glob(os.path.join(ldir, pattern)))
            if matches:
                library = sorted(matches)[0]
                break
    env.LogDebug("boost::test include: %s, library: %s" %
                 (include_dir, library))
    if include_dir:
        env['BOOST_INCLUDE_DIR'] = include_dir
    if library:
        env['BOOST_UNIT_TEST_FRAMEWORK_LIBRARY'] = library
    return include_dir, library


def generate(env):
    if env.get('BOOST_TOOL_APPLIED'):
        return
    env['BOOST_TOOL_APPLIED'] = True
    global _options
    if not _options:
        _options = env.GlobalVariables()
    if 'BOOST_DIR' not in _options.keys():
        _options.Add('BOOST_DIR',
                     """Set the BOOST installation directory.  Otherwise the default
 is to use the system location.  Specify BOOST_DIR=/usr to force
 the system installation.""",
                     None)
    _options.Update(env)
    if 'BOOST_LIBRARY_SUFFIX' not in env:
        # We don't have any platform specific suffix at this time.
        env['BOOST_LIBRARY_SUFFIX'] = ''

    if 'BOOST_DIR' in env:
        bdir = env['BOOST_DIR']
        if bdir and bdir != "/usr" and bdir != "":
            env.Append(CPPPATH=[os.path.join(bdir, "include")])
            # Windows installs don't have a separate include directory.
            env.Append(CPPPATH=[os.path.join(bdir)])
            env.AppendUnique(LIBPATH=[os.path.join(bdir, "lib")])
            env.AppendUnique(RPATH=[os.path.join(bdir, "lib")])

    # Override the _LIBFLAGS variable so we can append the suffix for
    # boost libraries.
    if '_LIBFLAGS' in env and '_boost_save_libflags' not in env:
        env["_boost_save_libflags"] = env["_LIBFLAGS"]
        env['_LIBFLAGS'] = '${_boost_libflags(__env__)}'
        env['_boost_libflags'] = boost_libflags

    # Finally add the methods for appending specific boost libraries and
    # locating boost::test.
    env.AddMethod(_append_boost_library, "AppendBoostLibrary")
    env.AddMethod(boost_unit_test_location, "BoostUnitTestLocation")


def exists(env):
    return True
