"""
Provisioning Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AuthProvider(str, Enum):
    """Authentication method bound to a login credential"""

    username_password = "username_password"
    google = "google"
    github = "github"


class Role(str, Enum):
    """Account role within an organisation"""

    owner = "owner"
    admin = "admin"
    member = "member"
