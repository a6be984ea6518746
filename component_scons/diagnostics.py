# Copyright (c) 2007-present, NSF NCAR, UCAR
#
# This source code is licensed under the MIT license found in the LICENSE
# file in the root directory of this source tree.
"""
Configuration errors found while registering components.

None of these errors stops the configuration when it is detected.  Each
one is printed right away and collected, so a single scons run reports
every misconfigured component.  The build fails later when
env.CheckComponents() finds any collected error.
"""

import SCons.Errors

from component_scons.methods import PrintError

MISSING_COMPONENT = 'missing-component'
COMPONENT_MISMATCH = 'component-mismatch'
ROOT_CONFLICT = 'root-conflict'
MISSING_TEST_DEPENDENCY = 'missing-test-dependency'


class Diagnostic:
    "One configuration error, with its kind and the component it concerns."

    def __init__(self, kind, message, component=None):
        self.kind = kind
        self.message = message
        self.component = component

    def __str__(self):
        return self.message

    def __repr__(self):
        return "Diagnostic(%s, %r)" % (self.kind, self.message)


class Diagnostics(list):
    """
    The errors collected so far, in the order they were reported.
    """

    def report(self, kind, message, component=None, env=None):
        diag = Diagnostic(kind, message, component)
        self.append(diag)
        PrintError(message)
        if env:
            env.LogDebug("recorded %s diagnostic" % (kind))
        return diag

    def kinds(self):
        return [d.kind for d in self]

    def of_kind(self, kind):
        return [d for d in self if d.kind == kind]

    def check(self):
        "Raise StopError if any error has been reported."
        if not self:
            return
        count = len(self)
        text = "%d component configuration error%s:\n  " % \
            (count, "s" if count > 1 else "")
        text += "\n  ".join([str(d) for d in self])
        raise SCons.Errors.StopError(text)
