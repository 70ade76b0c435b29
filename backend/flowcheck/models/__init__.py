"""Domain models.

This package contains the enum types shared by schemas and services.
"""

from flowcheck.models.enums import IssueCode, IssueSeverity, NodeCategory

__all__ = [
    "IssueCode",
    "IssueSeverity",
    "NodeCategory",
]
