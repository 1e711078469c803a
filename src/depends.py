from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.user_context import RequestUserContext
from src.api.utils.jwt import verify_jwt
from src.app.services.user_context import IUserContext

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_user_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> IUserContext:
    """
    Dependency resolving the acting user for audit fields.

    Args:
        credentials: Optional bearer token from Authorization header

    Returns:
        User context from the token's user_id claim, or the configured
        default user when no token is sent

    Raises:
        HTTPException: 401 if a token is sent but invalid or expired
    """
    if credentials is None:
        return RequestUserContext(ApplicationConfig.DEFAULT_USER_ID)

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        user_id = int(payload["user_id"])
    except (KeyError, TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token does not identify a user",
        )

    return RequestUserContext(user_id)
