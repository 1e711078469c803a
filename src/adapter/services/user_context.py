from src.app.services.user_context import IUserContext


class RequestUserContext(IUserContext):
    """User context resolved once per HTTP request"""

    def __init__(self, user_id: int):
        self._user_id = user_id

    @property
    def user_id(self) -> int:
        return self._user_id
