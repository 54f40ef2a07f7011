"""
User service tests
"""
import pytest

from hotel_pms.exceptions import DuplicateKeyError, NotFoundError
from hotel_pms.models.schemas import UserCreate
from hotel_pms.services.user_service import UserService, get_password_hash, verify_password


@pytest.fixture
def service(store):
    return UserService(store)


@pytest.fixture
def user(service):
    return service.create_user(UserCreate(username="manager", password="123456", name="Manager"))


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = get_password_hash("123456")

        assert hashed != "123456"
        assert verify_password("123456", hashed)
        assert not verify_password("654321", hashed)


class TestUserService:

    def test_create_stores_hash(self, user):
        assert user.password.startswith("$2")
        assert verify_password("123456", user.password)

    def test_duplicate_username(self, service, user):
        with pytest.raises(DuplicateKeyError):
            service.create_user(UserCreate(username="manager", password="abcdef", name="Other"))

    def test_authenticate(self, service, user):
        assert service.authenticate("manager", "123456") == user
        assert service.authenticate("manager", "wrong") is None
        assert service.authenticate("nobody", "123456") is None

    def test_update_payment_info(self, service, user):
        updated = service.update_user_payment_info(user.id, "cus_1", "sub_1")

        assert updated.payment_customer_id == "cus_1"
        assert updated.payment_subscription_id == "sub_1"
        assert updated.password == user.password

    def test_update_payment_info_unknown_user(self, service):
        with pytest.raises(NotFoundError):
            service.update_user_payment_info("missing", "cus_1", "sub_1")
