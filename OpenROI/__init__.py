"""OpenROI user-facing API facade.

This package re-exports the primary user API from the internal package `realroi`,
so users can simply do `import OpenROI as roi`.
"""

from realroi import *  # noqa: F401,F403 - intentionally re-export everything
from realroi import __all__ as _realroi_all

__all__ = list(_realroi_all)
