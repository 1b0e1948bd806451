"""Password hashing, bearer token issuance and identity verification."""

from datetime import datetime, timedelta, timezone

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from forked.config import Settings
from forked.documents import UserContext
from forked.errors import AuthenticationError
from forked.logging_config import get_logger
from forked.store.base import DocumentStore

logger = get_logger(__name__)


class CredentialStore:
    """Verifies and issues user identities on top of the document store."""

    def __init__(
        self,
        store: DocumentStore,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=1),
    ):
        self.store = store
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, store: DocumentStore, settings: Settings) -> "CredentialStore":
        return cls(
            store,
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=timedelta(minutes=settings.token_expiry_minutes),
        )

    @staticmethod
    def hash_password(password: str) -> str:
        return generate_password_hash(password)

    @staticmethod
    def verify_password(hashed_password: str, password: str) -> bool:
        return check_password_hash(hashed_password, password)

    def issue_token(self, user_id: str) -> str:
        """Sign a token identifying the user, valid for expires_in."""
        payload = {
            "id": user_id,
            "exp": datetime.now(timezone.utc) + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    async def verify_identity(self, token: str | None) -> UserContext:
        """
        Resolve a bearer token to the user it was issued for.

        Raises:
            AuthenticationError: Missing, invalid or expired token, or the
                user no longer exists.
        """
        if not token:
            raise AuthenticationError("Missing token")

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            logger.info(f"Rejected bearer token: {e}")
            raise AuthenticationError("Authentication failed") from e

        user_id = payload.get("id")
        if not isinstance(user_id, str):
            raise AuthenticationError("Authentication failed")

        user = await self.store.find_user_by_id(user_id)
        if user is None:
            raise AuthenticationError("User not found")

        return user.to_context()
