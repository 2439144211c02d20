from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr


class _CredentialsDTO(BaseModel):
    # Length rules belong to CredentialValidator; any string is accepted here.
    username: StrictStr
    password: StrictStr

    model_config = ConfigDict(extra="ignore")


class RegisterRequestDTO(_CredentialsDTO):
    pass


class LoginRequestDTO(_CredentialsDTO):
    pass


class RegisteredUserDTO(BaseModel):
    user_id: int
    username: str


class MessageDTO(BaseModel):
    message: str

    @classmethod
    def welcome(cls, username: str) -> MessageDTO:
        return cls(message=f"Welcome {username}!")
