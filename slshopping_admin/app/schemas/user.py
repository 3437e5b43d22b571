"""
Pydantic models for console users and their roles.

Roles are seeded by a migration and only ever read by the console.  A
user's ``password`` holds the PBKDF2 hash once stored; on a submitted
form it holds the plain text typed by the operator, or an empty string
when an existing user's password should be left unchanged.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Role(BaseModel):
    id: Optional[int] = None
    code: str = ""
    display_name: str = ""

    model_config = {
        "from_attributes": True,
    }


class User(BaseModel):
    id: Optional[int] = None
    email: str = Field("", min_length=1, max_length=128, description="Login identifier, unique")
    password: str = ""
    name: str = Field("", min_length=1, max_length=64)
    enabled: bool = False
    roles: List[Role] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("メールアドレスの形式が不正です")
        return v

    def has_role(self, role_id: Optional[int]) -> bool:
        return any(role.id == role_id for role in self.roles)
