from abc import ABC, abstractmethod

from src.service.cinema.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User write operations"""

    @abstractmethod
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        """Raises ConflictError when the username is taken"""
        pass
