from abc import ABC, abstractmethod


class IUserContext(ABC):
    """Identity of the acting user, used to stamp audit fields"""

    @property
    @abstractmethod
    def user_id(self) -> int:
        pass
