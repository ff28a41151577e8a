"""
Registration, login and bearer-token resolution.
"""
import pytest
from datetime import timedelta

from auth import create_access_token, validate_registration
from briefly.errors import Unauthorized
from briefly.models.credits import CreditTransactionType
from briefly.models.user import UserCreate, UserLogin
from briefly.services.briefly_auth import TOKEN_PRODUCT, BrieflyAuthService
from briefly.services.credit_ledger import InMemoryCreditLedger
from briefly.services.user_store import InMemoryUserStore

pytestmark = pytest.mark.asyncio


@pytest.fixture
def service():
    return BrieflyAuthService(users=InMemoryUserStore(), ledger=InMemoryCreditLedger())


class TestRegister:

    async def test_welcome_credits(self, service):
        response = await service.register(UserCreate(name="Ada", email="Ada@Example.com", password="secret123"))
        assert response.success is True
        assert response.credits == 5
        assert response.user.email == "ada@example.com"
        assert response.user.plan == "free"
        assert response.token

    async def test_referral_code_adds_bonus(self, service):
        response = await service.register(
            UserCreate(name="Ada", email="ada@example.com", password="secret123", referralCode="FRIEND10")
        )
        assert response.credits == 10
        history = await service.ledger.get_transactions(response.user.id)
        assert [t.transaction_type for t in history] == [
            CreditTransactionType.REFERRAL_BONUS,
            CreditTransactionType.REGISTRATION_GRANT,
        ]

    async def test_blank_referral_code_gets_no_bonus(self, service):
        response = await service.register(
            UserCreate(name="Ada", email="ada@example.com", password="secret123", referral_code="  ")
        )
        assert response.credits == 5

    async def test_duplicate_email(self, service):
        await service.register(UserCreate(name="Ada", email="ada@example.com", password="secret123"))
        with pytest.raises(ValueError, match="User already exists"):
            await service.register(UserCreate(name="Ada L", email="ADA@example.com", password="secret456"))

    @pytest.mark.parametrize("name,email,password,message", [
        ("Ada", "not-an-email", "secret123", "Valid email is required"),
        ("Ada", "ada@example.com", "12345", "Password must be at least 6 characters long"),
        ("A", "ada@example.com", "secret123", "Full name is required"),
    ])
    async def test_validation(self, service, name, email, password, message):
        with pytest.raises(ValueError, match=message):
            await service.register(UserCreate(name=name, email=email, password=password))
        assert await service.users.count() == 0

    async def test_failed_grant_leaves_no_account(self):
        class GrantFailingLedger(InMemoryCreditLedger):
            async def _credit(self, *args, **kwargs):
                raise RuntimeError("ledger offline")

        users = InMemoryUserStore()
        failing = BrieflyAuthService(users=users, ledger=GrantFailingLedger())
        with pytest.raises(RuntimeError, match="ledger offline"):
            await failing.register(UserCreate(name="Ada", email="ada@example.com", password="secret123"))
        assert await users.count() == 0

        retry = BrieflyAuthService(users=users, ledger=InMemoryCreditLedger())
        response = await retry.register(UserCreate(name="Ada", email="ada@example.com", password="secret123"))
        assert response.credits == 5


class TestLogin:

    async def test_login_returns_current_balance(self, service):
        registered = await service.register(UserCreate(name="Ada", email="ada@example.com", password="secret123"))
        await service.ledger.check_and_debit(registered.user.id, 1)

        response = await service.login(UserLogin(email="ada@example.com", password="secret123"))
        assert response.credits == 4
        user = await service.users.find_by_id(registered.user.id)
        assert user.last_login_at is not None

    async def test_wrong_password(self, service):
        await service.register(UserCreate(name="Ada", email="ada@example.com", password="secret123"))
        with pytest.raises(ValueError, match="Invalid email or password"):
            await service.login(UserLogin(email="ada@example.com", password="wrong-pass"))

    async def test_missing_fields(self, service):
        with pytest.raises(ValueError, match="Email and password are required"):
            await service.login(UserLogin(email="ada@example.com"))


class TestResolveUserId:

    async def test_round_trip(self, service):
        registered = await service.register(UserCreate(name="Ada", email="ada@example.com", password="secret123"))
        assert service.resolve_user_id(f"Bearer {registered.token}") == registered.user.id

    @pytest.mark.parametrize("header", [None, "", "Bearer ", "Token abc", "Bearer not.a.jwt"])
    async def test_bad_headers(self, service, header):
        with pytest.raises(Unauthorized):
            service.resolve_user_id(header)

    async def test_token_for_other_product_rejected(self, service):
        token = create_access_token({"sub": "USR-1", "product": "clearform"})
        with pytest.raises(Unauthorized):
            service.resolve_user_id(f"Bearer {token}")

    async def test_expired_token_rejected(self, service):
        token = create_access_token({"sub": "USR-1", "product": TOKEN_PRODUCT}, expires_delta=timedelta(seconds=-5))
        with pytest.raises(Unauthorized):
            service.resolve_user_id(f"Bearer {token}")


class TestValidateRegistration:

    async def test_valid(self):
        assert validate_registration("Ada", "ada@example.com", "secret123") == (True, "Registration is valid")
