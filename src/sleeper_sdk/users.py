"""User lookups."""

from __future__ import annotations

from typing import List, Optional

from .client import HttpClient
from .models import Draft, League, SleeperUser, Sport, UserWithAvatar
from .utils import avatar_url


class UserService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def get_user(self, username_or_id: str) -> Optional[SleeperUser]:
        """Look up a user; ``None`` when Sleeper knows no such user."""
        return await self._http.get(f"/user/{username_or_id}", response_model=SleeperUser)

    async def get_user_leagues(self, user_id: str, sport: Sport, season: str) -> List[League]:
        return await self._http.get(f"/user/{user_id}/leagues/{sport}/{season}", response_model=List[League])

    async def get_user_drafts(self, user_id: str, sport: Sport, season: str) -> List[Draft]:
        return await self._http.get(f"/user/{user_id}/drafts/{sport}/{season}", response_model=List[Draft])

    def get_avatar_url(self, avatar_id: Optional[str], thumbnail: bool = False) -> Optional[str]:
        return avatar_url(avatar_id, thumbnail=thumbnail)

    async def get_user_with_avatar(self, username_or_id: str, thumbnail: bool = False) -> Optional[UserWithAvatar]:
        """Fetch a user and resolve their avatar to a CDN URL."""
        user = await self.get_user(username_or_id)
        if user is None:
            return None
        payload = user.model_dump()
        payload["avatar_url"] = self.get_avatar_url(user.avatar, thumbnail)
        return UserWithAvatar.model_validate(payload)


__all__ = ["UserService"]
