"""Tests for the pagination and user services.

Repositories are mocked with ``AsyncMock`` so these tests exercise only
the orchestration: count, compute the window, load that window, wrap.
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.userapi.domain.pagination import PaginationRequest
from src.userapi.domain.user import User, UserCreate, UserResponse
from src.userapi.repositories.interfaces import UserRepositoryInterface
from src.userapi.repositories.user_repository import InMemoryUserRepository
from src.userapi.services.pagination_service import PaginationService
from src.userapi.services.user_service import UserNotFoundError, UserService

BASE = "http://fake/api/v1/users"


def _mock_repository(total: int, items: list) -> MagicMock:
    repository = MagicMock(spec=UserRepositoryInterface)
    repository.count = AsyncMock(return_value=total)
    repository.list_page = AsyncMock(return_value=items)
    return repository


class TestPaginationService:
    """PaginationService.paginate_repository."""

    @pytest.mark.asyncio
    async def test_loads_only_requested_window(self) -> None:
        repository = _mock_repository(25, ["k", "l"])
        service = PaginationService()

        response = await service.paginate_repository(
            repository, PaginationRequest(page=2, per_page=10), BASE
        )

        repository.list_page.assert_awaited_once_with(10, 10)
        assert response.data == ["k", "l"]
        assert response.pagination.total_pages == 3
        assert response.links.prev == f"{BASE}?page=1&per_page=10"
        assert response.links.next == f"{BASE}?page=3&per_page=10"

    @pytest.mark.asyncio
    async def test_uses_configured_default_per_page(self) -> None:
        repository = _mock_repository(30, [])
        service = PaginationService(default_per_page=15)

        response = await service.paginate_repository(
            repository, PaginationRequest(per_page=-5), BASE
        )

        repository.list_page.assert_awaited_once_with(0, 15)
        assert response.pagination.per_page == 15
        assert response.pagination.total_pages == 2

    @pytest.mark.asyncio
    async def test_page_past_end_returns_empty_data(self) -> None:
        repository = _mock_repository(25, [])
        service = PaginationService()

        response = await service.paginate_repository(
            repository, PaginationRequest(page=10), BASE
        )

        repository.list_page.assert_awaited_once_with(90, 10)
        assert response.data == []
        assert response.links.prev == f"{BASE}?page=3&per_page=10"
        assert response.links.next is None

    @pytest.mark.asyncio
    async def test_applies_transform(self) -> None:
        repository = _mock_repository(2, [1, 2])
        service = PaginationService()

        response = await service.paginate_repository(
            repository, PaginationRequest(), BASE, transform=lambda n: n * 10
        )

        assert response.data == [10, 20]


class TestUserService:
    """UserService list/get/create."""

    @pytest.fixture
    def user(self) -> User:
        return User(first_name="Ada", last_name="Lovelace", email="ada@example.com")

    @pytest.fixture
    def service(self, user: User) -> UserService:
        return UserService(InMemoryUserRepository([user]), PaginationService())

    @pytest.mark.asyncio
    async def test_list_users_returns_public_fields(
        self, service: UserService, user: User
    ) -> None:
        response = await service.list_users(PaginationRequest(), BASE)

        assert response.data == [UserResponse.from_user(user)]
        assert response.pagination.total == 1
        assert "created_at" not in response.model_dump(mode="json")["data"][0]

    @pytest.mark.asyncio
    async def test_get_user(self, service: UserService, user: User) -> None:
        result = await service.get_user(user.id)
        assert result.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, service: UserService) -> None:
        missing = uuid4()
        with pytest.raises(UserNotFoundError, match=str(missing)):
            await service.get_user(missing)

    @pytest.mark.asyncio
    async def test_create_user(self, service: UserService) -> None:
        created = await service.create_user(
            UserCreate(first_name="Alan", last_name="Turing", email="alan@example.com")
        )

        fetched = await service.get_user(created.id)
        assert fetched == created
        response = await service.list_users(PaginationRequest(), BASE)
        assert response.pagination.total == 2
