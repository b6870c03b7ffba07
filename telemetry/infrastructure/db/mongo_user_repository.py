# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError, StorageError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}", exc_info=True)
            raise StorageError("Error finding user") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID: {e}", exc_info=True)
            raise StorageError("Error finding user") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def create(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to save (id is ignored)

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If the email is already registered
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        user_dict[UserFields.CREATED_AT] = user.created_at or utc_now()

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise ConflictError("User already exists") from e
        except PyMongoError as e:
            logger.error(f"Error saving user: {e}", exc_info=True)
            raise StorageError("Error saving user") from e

        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
