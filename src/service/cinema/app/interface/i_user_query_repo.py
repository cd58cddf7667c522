from abc import ABC, abstractmethod
from typing import Optional

from src.service.cinema.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    @abstractmethod
    async def get_by_username(self, *, username: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        pass
