"""
binkit - local binary version manager.

Downloads, installs, links and removes specific versions of third-party
executables described by a declarative catalog, exposing one executable per
tool name on PATH.
"""

__version__ = "0.1.0"
