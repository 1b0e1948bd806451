"""User registration, login and profile management."""

from forked.auth.credentials import CredentialStore
from forked.documents import UserAccount, UserContext, utcnow
from forked.errors import InvalidArgument, NotFound
from forked.logging_config import get_logger
from forked.store.base import DocumentStore

logger = get_logger(__name__)


class AccountService:
    """Account use cases backed by the document and credential stores."""

    def __init__(self, store: DocumentStore, credentials: CredentialStore):
        self.store = store
        self.credentials = credentials

    async def register(
        self,
        email: str | None,
        password: str | None,
        name: str | None,
    ) -> tuple[str, UserContext]:
        """
        Create an account and sign the user in.

        Returns:
            Tuple of (token, user).

        Raises:
            InvalidArgument: Missing fields or an already registered email.
        """
        if not email or not password or not name:
            raise InvalidArgument("Missing data")

        if await self.store.find_user_by_email(email) is not None:
            raise InvalidArgument("User already exists")

        now = utcnow()
        account = UserAccount(
            email=email,
            name=name,
            hashed_password=self.credentials.hash_password(password),
            created_at=now,
            updated_at=now,
        )
        account.id = await self.store.insert_user(account)

        logger.info(f"Registered user {account.id}")
        return self.credentials.issue_token(account.id), account.to_context()

    async def login(self, email: str | None, password: str | None) -> tuple[str, UserContext]:
        if not email or not password:
            raise InvalidArgument("Email and password are required")

        account = await self.store.find_user_by_email(email)
        if account is None or not self.credentials.verify_password(
            account.hashed_password, password
        ):
            raise InvalidArgument("Invalid credentials")

        logger.info(f"User {account.id} logged in")
        return self.credentials.issue_token(account.id), account.to_context()

    async def get_profile(self, user: UserContext) -> UserAccount:
        account = await self.store.find_user_by_id(user.id)
        if account is None:
            raise NotFound("User not found")
        return account

    async def update_profile(
        self,
        user: UserContext,
        name: str | None = None,
        email: str | None = None,
    ) -> None:
        """
        Update only the profile fields that were given.

        Raises:
            InvalidArgument: The new email belongs to another account.
        """
        fields: dict[str, object] = {"updated_at": utcnow()}
        if name:
            fields["name"] = name
        if email:
            owner = await self.store.find_user_by_email(email)
            if owner is not None and owner.id != user.id:
                raise InvalidArgument("User already exists")
            fields["email"] = email

        await self.store.update_user(user.id, fields)
        logger.info(f"Updated profile of user {user.id}: {sorted(fields)}")
