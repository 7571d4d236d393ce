"""
Provisioning Use Cases

Admin account and organisation provisioning.
"""

from .create_admin_user_use_case import CreateAdminUserUseCase
from .create_admin_user_with_new_organisation_use_case import (
    CreateAdminUserWithNewOrganisationUseCase,
)
from .bootstrap_admin_use_case import BootstrapAdminUseCase, parse_admin_name
from .dtos import (
    AccountInfo,
    BootstrapAdminResponse,
    BootstrapAdminSettings,
    CreateAdminUserCommand,
    CreateAdminUserResponse,
    CreateAdminUserWithNewOrganisationCommand,
    CreateAdminUserWithNewOrganisationResponse,
    OrganisationInfo,
)

__all__ = [
    # Use Cases
    "CreateAdminUserUseCase",
    "CreateAdminUserWithNewOrganisationUseCase",
    "BootstrapAdminUseCase",
    "parse_admin_name",
    # DTOs - Commands
    "CreateAdminUserCommand",
    "CreateAdminUserWithNewOrganisationCommand",
    "BootstrapAdminSettings",
    # DTOs - Responses
    "CreateAdminUserResponse",
    "CreateAdminUserWithNewOrganisationResponse",
    "BootstrapAdminResponse",
    # DTOs - Nested Models
    "AccountInfo",
    "OrganisationInfo",
]
