"""
srcmap-dbg command shell package.

An interactive and scriptable front-end over :mod:`srcmap` for editing the
source path map and trying translations.  Use ``python -m srcmap_dbg`` or
the ``srcmap-dbg`` console script to launch it.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
