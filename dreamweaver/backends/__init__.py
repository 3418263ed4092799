"""
Pluggable database backends.

Import this module to get the registry with all built-in backends.
"""

from dreamweaver.backends.base import DatabaseOperations
from dreamweaver.backends.context import BackendContext
from dreamweaver.backends.registry import BackendRegistry, create_database

__all__ = ["BackendContext", "BackendRegistry", "DatabaseOperations", "create_database"]
