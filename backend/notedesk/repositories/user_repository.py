"""Read-only queries against the `users` table."""
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.models.user import User


async def find_username(db: AsyncSession, user_id: uuid.UUID) -> Optional[str]:
    """Username for `user_id`, or None when no such user exists."""
    result = await db.execute(select(User.username).where(User.id == user_id))
    return result.scalar_one_or_none()
