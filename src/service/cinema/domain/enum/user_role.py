from enum import StrEnum


class UserRole(StrEnum):
    USER = 'user'
    ADMIN = 'admin'

    def is_authorized(self, required: 'UserRole') -> bool:
        """Admin passes every role gate; any other role must match exactly."""
        return self == required or self == UserRole.ADMIN
