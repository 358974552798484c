"""User role enumeration."""

from enum import Enum


class UserRole(str, Enum):
    """Account roles. Admins moderate the catalog and manage accounts."""

    ADMIN = "ADMIN"
    USER = "USER"
