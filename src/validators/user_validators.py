from pydantic import field_validator


def _require_text(v, message):
    if not v or not v.strip():
        raise ValueError(message)
    return v.strip()


class UserNameValidatorMixin:
    @field_validator("first", "last")
    @classmethod
    def name_part_valid(cls, v, info):
        return _require_text(v, f"{info.field_name.capitalize()} name is required")


class AddressValidatorMixin:
    @field_validator("city", "state", "country")
    @classmethod
    def address_part_valid(cls, v, info):
        return _require_text(v, f"{info.field_name.capitalize()} is required")


class UserValidatorMixin:
    @field_validator("phone")
    @classmethod
    def phone_valid(cls, v):
        return _require_text(v, "Phone is required")

    @field_validator("password")
    @classmethod
    def password_valid(cls, v):
        if not v:
            raise ValueError("Password is required")
        return v

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v):
        return v.lower()
