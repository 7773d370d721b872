''' gridcore: Shared utilities for the gridmesh tools (console display).

Versioning follows Major.Minor.Patch:

    Major: API change, old scripts might not run.

    Minor: new feature, old scripts still work.

    Patch: bug fix.
'''
__version__ = "0.1.0"

from .display import Display
