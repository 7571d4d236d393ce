"""
Use Cases

Organized into domain folders:
- provisioning/: Admin account and organisation provisioning
"""

from .provisioning import (
    BootstrapAdminUseCase,
    CreateAdminUserUseCase,
    CreateAdminUserWithNewOrganisationUseCase,
)

__all__ = [
    "BootstrapAdminUseCase",
    "CreateAdminUserUseCase",
    "CreateAdminUserWithNewOrganisationUseCase",
]
