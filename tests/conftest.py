# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
import shutil
import sys
from pathlib import Path
import subprocess as sp

import pytest
import SCons.Node.FS
from SCons.Script import Environment

# importing the package adds the component tools to the tool path
import component_scons
from component_scons.registry import ComponentRegistry


thisdir = Path(__file__).parent


called_from_test = False


def pytest_configure(config):
    global called_from_test
    called_from_test = True


def run_scons(sconsfile, *args):
    scons = shutil.which('scons')
    cmd = [scons] if scons else [sys.executable, '-m', 'SCons']
    cmd += ['-f', sconsfile] + list(args)
    print("%s" % " ".join(cmd))
    # whatever test runs this will fail with an exception if the sconscript
    # fails
    task = sp.run(cmd, cwd=str(thisdir), capture_output=True,
                  universal_newlines=True)
    print(task.stdout)
    print(task.stderr)
    task.check_returncode()
    return task


def make_component(root, name, headers=()):
    "Create the directory layout of a component under root."
    cdir = Path(root) / name
    for sub in ['include', 'src', 'unittests']:
        cdir.joinpath(sub).mkdir(parents=True, exist_ok=True)
    for header in headers:
        path = cdir / 'include' / header
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#pragma once\n")
    return cdir


def make_boost(root):
    "Create a fake boost installation with just the boost::test files."
    bdir = Path(root)
    header = bdir / 'include' / 'boost' / 'test' / 'unit_test.hpp'
    header.parent.mkdir(parents=True)
    header.write_text("#pragma once\n")
    lib = bdir / 'lib' / 'libboost_unit_test_framework.a'
    lib.parent.mkdir(parents=True)
    lib.write_text("!<arch>\n")
    return bdir


def component_env(registry, tools=None, **kw):
    if tools is None:
        tools = ['default', 'component']
    return Environment(tools=tools, platform='posix',
                       COMPONENT_REGISTRY=registry, **kw)


@pytest.fixture
def registry():
    return ComponentRegistry()


@pytest.fixture
def scons_dir():
    """
    Return a function which makes a directory the current SConscript
    directory, the way SConscript() does, and restore the original
    directory afterwards.
    """
    fs = SCons.Node.FS.get_default_fs()
    saved = fs.getcwd()

    def chdir(path):
        fs.chdir(fs.Dir(str(path)))

    yield chdir
    fs.chdir(saved)
