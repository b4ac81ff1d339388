# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "gql_directives"
__description__ = "GraphQL directive definitions and built-in directives."
__version__ = "0.1.0"
__license__ = "MIT"
