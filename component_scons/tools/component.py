# -*- python -*-
# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.

"""Tool methods invoked when component is loaded as a tool.
"""

import component_scons.tool


def exists(env):
    return 1


def generate(env, **kw):
    """Add the component registration methods to the given environment.
    The default tool should already be applied, since the component
    methods create libraries and programs."""

    component_scons.tool.generate(env, **kw)
