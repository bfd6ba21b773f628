"""Defines common Value Objects used across different domain contexts.

These objects represent simple values like GUIDs, job handles and query
filters, ensuring consistency and type safety.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NewType

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are strings at runtime.
GUID = NewType("GUID", str)            # Backend-assigned resource identifier
JobURL = NewType("JobURL", str)        # Handle of an in-flight backend job
AccessToken = NewType("AccessToken", str)
RefreshToken = NewType("RefreshToken", str)

# Untyped credential bag, e.g. {'username': ..., 'password': ..., 'mfaCode': ...}
Credentials = Dict[str, str]

# === Query Filters ===


class FilterKey(str, Enum):
    """Filter names understood by the platform API list endpoints."""

    GUID = "guids"
    NAME = "names"
    ORGANIZATION_GUID = "organization_guids"
    SPACE_GUID = "space_guids"
    DOMAIN_GUID = "domain_guids"
    HOSTNAME = "hosts"
    PATH = "paths"


@dataclass
class Query:
    """A single key/values filter passed to a list call."""

    key: FilterKey
    values: List[str] = field(default_factory=list)
