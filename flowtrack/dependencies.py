"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flowtrack.config import Settings, get_settings
from flowtrack.core.auth import UserContext, get_current_user
from flowtrack.core.database import get_db
from flowtrack.services.store import FlowtrackStore


def get_store(db: Annotated[AsyncSession, Depends(get_db)]) -> FlowtrackStore:
    """Get a store bound to the request's database session."""
    return FlowtrackStore(db)


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
CurrentUser = Annotated[UserContext, Depends(get_current_user)]
StoreDep = Annotated[FlowtrackStore, Depends(get_store)]
