"""
staffql
GraphQL API for user accounts and employee records
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
