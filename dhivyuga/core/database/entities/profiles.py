"""
Profile entity model.

Profiles are the accounts allowed to sign in. Only profiles with the
``admin`` role may change the catalog.
"""

from sqlmodel import Field

from ..base import TableBase

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class Profile(TableBase, table=True):
    """Account that can sign in to the admin dashboard.

    Table: profiles
    """

    __tablename__ = "profiles"
    __table_args__ = ({"extend_existing": True},)

    email: str = Field(max_length=320, unique=True, description="Lower-cased email address")
    full_name: str | None = Field(default=None, max_length=255)
    role: str = Field(default=ROLE_USER, max_length=32)
    password_hash: str = Field(max_length=255)
    is_active: bool = Field(default=True)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def __repr__(self) -> str:
        return f"Profile(id={self.id}, email={self.email}, role={self.role})"
