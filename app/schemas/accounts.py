import json
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import ValidationError


class AccountPayload(BaseModel):
    """
    Base for request bodies. Fields are parsed leniently and checked for presence
    separately so a missing field yields the endpoint's own message.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    @model_validator(mode='before')
    @classmethod
    def parse_input(cls, v):
        if isinstance(v, bytes):
            v = v.decode("utf-8")
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except ValueError:
                pass
        if not isinstance(v, dict):
            # Arrays, bare strings and other non-objects carry no fields
            return {}
        # Booleans, arrays and objects count as missing rather than failing validation
        return {
            key: value
            for key, value in v.items()
            if isinstance(value, (str, int, float)) and not isinstance(value, bool)
        }

    def missing_fields(self) -> list[str]:
        return [name for name in self.required_fields if not getattr(self, name)]

    def ensure_complete(self, message: str) -> None:
        missing = self.missing_fields()
        if missing:
            raise ValidationError(message, missing)


class LoginPayload(AccountPayload):
    required_fields: ClassVar[tuple[str, ...]] = ("email", "password")

    email: str | None = None
    password: str | None = None


class CustomerRegisterPayload(AccountPayload):
    required_fields: ClassVar[tuple[str, ...]] = ("firstname", "lastname", "email", "password")

    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    password: str | None = None

    def profile_row(self, user_id: str) -> dict:
        return {
            "user_id": user_id,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "email": self.email,
        }


class AgentRegisterPayload(CustomerRegisterPayload):
    required_fields: ClassVar[tuple[str, ...]] = (
        "firstname",
        "lastname",
        "email",
        "password",
        "token_code",
    )

    # token_code is stored as given; it is not verified
    token_code: str | None = None

    def profile_row(self, user_id: str) -> dict:
        row = super().profile_row(user_id)
        row["token_code"] = self.token_code
        return row
