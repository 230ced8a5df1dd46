# Repositories package (data access abstraction)

from src.userapi.repositories.user_repository import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
