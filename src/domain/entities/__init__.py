"""
Provisioning Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AuthProvider, Role

# Export all entities
from .account import Account
from .login_credential import LoginCredential
from .organisation import Organisation
from .account_role import AccountRole

__all__ = [
    # Enums
    "AuthProvider",
    "Role",
    # Entities
    "Account",
    "LoginCredential",
    "Organisation",
    "AccountRole",
]
