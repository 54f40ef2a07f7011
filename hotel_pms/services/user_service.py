"""
User service
Back-office user accounts. Passwords are stored as bcrypt hashes.
"""
from typing import Optional
import logging
import bcrypt
from hotel_pms.database import MemoryStore
from hotel_pms.exceptions import DuplicateKeyError
from hotel_pms.models.ontology import User
from hotel_pms.models.schemas import UserCreate

logger = logging.getLogger(__name__)


def get_password_hash(password: str) -> str:
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))


class UserService:
    """User service"""

    def __init__(self, store: MemoryStore):
        self.store = store

    def get_user(self, user_id: str) -> Optional[User]:
        return self.store.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.store.users.find_first(lambda u: u.username == username)

    def create_user(self, data: UserCreate) -> User:
        if self.get_user_by_username(data.username):
            raise DuplicateKeyError(f"Username '{data.username}' already exists")

        fields = data.model_dump()
        fields["password"] = get_password_hash(data.password)
        user = self.store.users.create(fields)
        logger.info(f"User {user.username} created ({user.id})")
        return user

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """The user when the password matches, otherwise None"""
        user = self.get_user_by_username(username)
        if not user or not verify_password(password, user.password):
            return None
        return user

    def update_user_payment_info(self, user_id: str, customer_id: str,
                                 subscription_id: str) -> User:
        """Link the user to their payment-provider customer and subscription"""
        return self.store.users.update(user_id, {
            "payment_customer_id": customer_id,
            "payment_subscription_id": subscription_id,
        })
