"""
Top-level package for the Todo Server.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
