"""
User registration and listing. Login and sessions are not handled here.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import bcrypt
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from src.core.errors import InternalError, InvalidInputError
from src.core.logger import logger
from src.models.user import UserCreate
from src.repositories.user_repository import UserRepository

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists."


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def _public_view(document: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in document.items() if k != "password"}


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def register_user(self, payload: Dict[str, Any], correlation_id: Optional[str] = None) -> dict:
        """
        Create a user with a unique, lowercased email.

        Returns:
            The stored user without its password hash

        Raises:
            InvalidInputError: Missing fields, malformed email or email taken
        """
        try:
            user = UserCreate.model_validate(payload)
        except ValidationError as e:
            raise InvalidInputError(
                "Please provide all required fields.",
                details={
                    "errors": [
                        {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                        for err in e.errors()
                    ]
                },
            )

        try:
            existing = await self.repository.find_by_email(user.email, correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while checking email") from e
        if existing:
            raise InvalidInputError(DUPLICATE_EMAIL_MESSAGE, details={"email": user.email})

        now = datetime.now(timezone.utc)
        document = {
            "email": user.email,
            "password": hash_password(user.password),
            "name": user.name.model_dump(),
            "phone": user.phone,
            "address": user.address.model_dump(),
            "is_admin": False,
            "created_at": now,
            "updated_at": now,
        }

        try:
            saved = await self.repository.create(document, correlation_id=correlation_id)
        except DuplicateKeyError:
            # A concurrent registration won the unique index
            raise InvalidInputError(DUPLICATE_EMAIL_MESSAGE, details={"email": user.email})
        except PyMongoError as e:
            raise InternalError("Database error while registering user") from e

        logger.info(
            f"Registered user {saved['_id']}",
            correlation_id=correlation_id,
            metadata={"event": "user_registered", "userId": str(saved["_id"])}
        )
        return _public_view(saved)

    async def list_users(self, correlation_id: Optional[str] = None) -> List[dict]:
        try:
            users = await self.repository.list_users(correlation_id=correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while fetching users") from e
        return [_public_view(user) for user in users]
