"""
Chat Room Schema Definitions

This module defines the chat room listing returned for a user, including
the participants and the optional group a room belongs to.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import BaseResponse


@dataclass
class Participant(BaseResponse):
    """
    A user taking part in a chat room.

    Attributes:
        id: Numeric user ID
        user_name: Display name
        email_id: Email address
        mobile_number: Mobile number
        user_status: Presence status reported by the server
        profile_picture_url: URL of the user's avatar
    """

    id: int
    user_name: Optional[str] = None
    email_id: Optional[str] = None
    mobile_number: Optional[str] = None
    user_status: Optional[str] = None
    profile_picture_url: Optional[str] = None

    @property
    def label(self) -> str:
        """Name to show for this user, falling back to email or ID."""
        return self.user_name or self.email_id or str(self.id)


@dataclass
class GroupInfo(BaseResponse):
    """Group metadata attached to a group chat room."""

    id: int
    name: str
    user_names: List[str] = field(default_factory=list)


@dataclass
class ChatRoom(BaseResponse):
    """
    A chat room the user is a member of.

    Attributes:
        chatroom_id: Unique ID of the chat room
        chat_room_type: PERSONAL or GROUP
        participants: Users in the room
        group: Group details for group rooms, None for personal rooms
        last_activity: ISO 8601 timestamp of the last activity
    """

    chatroom_id: str
    chat_room_type: str
    participants: List[Participant] = field(default_factory=list)
    group: Optional[GroupInfo] = None
    last_activity: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "ChatRoom":
        """Create from response data, parsing nested participants and group."""
        group_data = data.get("group")
        return cls(
            chatroom_id=data["chatroomId"],
            chat_room_type=data.get("chatRoomType") or "PERSONAL",
            participants=[
                Participant.from_dict(p) for p in data.get("participants") or []
            ],
            group=GroupInfo.from_dict(group_data) if group_data else None,
            last_activity=data.get("lastActivity"),
        )

    def display_name(self, current_user_id: Optional[int] = None) -> str:
        """
        Name to show for this room in a chat list.

        Group rooms use the group name. Personal rooms use the names of the
        other participants.
        """
        if self.group is not None:
            return self.group.name
        others = [p.label for p in self.participants if p.id != current_user_id]
        if not others:
            others = [p.label for p in self.participants]
        return ", ".join(others) or self.chatroom_id

    def matches(self, query: str, current_user_id: Optional[int] = None) -> bool:
        """Case-insensitive search on the display name."""
        query = query.strip().lower()
        if not query:
            return True
        return query in self.display_name(current_user_id).lower()
