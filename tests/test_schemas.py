"""
Tests for Schema Serialization

Tests for the request and response payloads exchanged with the backend.
"""

import pytest

from src.yaplab import (
    ChatRoom,
    ErrorResponse,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from src.yaplab.schemas import to_camel


@pytest.mark.parametrize(
    "name,expected",
    [
        ("id", "id"),
        ("email_id", "emailId"),
        ("access_token", "accessToken"),
        ("profile_picture_url", "profilePictureUrl"),
    ],
)
def test_to_camel(name, expected):
    assert to_camel(name) == expected


def test_login_request_serialization():
    """Test that LoginRequest uses the backend's field names."""
    request = LoginRequest(email_id="alice@example.com", password="secret")

    assert request.endpoint == "/auth/login"
    assert request.to_dict() == {
        "emailId": "alice@example.com",
        "password": "secret",
    }
    assert "emailId" in request.to_json()


def test_request_repr_hides_password():
    request = RegisterRequest("alice", "alice@example.com", "0123456789", "hunter2")
    assert "hunter2" not in repr(request)
    assert "hunter2" not in repr(LoginRequest("alice@example.com", "hunter2"))


def test_register_and_reset_endpoints():
    assert RegisterRequest("a", "b", "c", "d").endpoint == "/auth/register"
    assert ForgotPasswordRequest("b").endpoint == "/auth/forgot-password"


def test_login_response_from_json():
    response = LoginResponse.from_json(
        '{"id": "12", "accessToken": "tok", "userName": "alice", "extra": 1}'
    )
    assert response.id == 12
    assert response.access_token == "tok"
    assert response.user_name == "alice"
    assert "tok" not in repr(response)


@pytest.mark.parametrize(
    "data",
    [
        {"accessToken": "tok"},
        {"id": 1},
        {"id": 1, "accessToken": ""},
        {"id": 1, "accessToken": None},
        ["not", "an", "object"],
    ],
)
def test_login_response_rejects_incomplete_data(data):
    with pytest.raises(ValueError):
        LoginResponse.from_dict(data)


def test_register_response_ignores_unknown_keys():
    response = RegisterResponse.from_dict(
        {"message": "ok", "id": 3, "userName": "alice", "unexpected": True}
    )
    assert response.message == "ok"
    assert response.id == 3
    assert response.user_name == "alice"


@pytest.mark.parametrize(
    "data,expected",
    [
        ({"message": "bad credentials"}, "bad credentials"),
        ({"message": ""}, None),
        ({"message": 42}, None),
        ({}, None),
    ],
)
def test_error_response_message(data, expected):
    assert ErrorResponse.from_dict(data).message == expected


class TestChatRoom:
    """Tests for chat room parsing and display names."""

    def test_personal_room_display_name(self):
        room = ChatRoom.from_dict(
            {
                "chatroomId": "room-1",
                "chatRoomType": "PERSONAL",
                "participants": [
                    {"id": 1, "userName": "alice", "userStatus": "ONLINE"},
                    {"id": 2, "userName": "bob"},
                ],
                "lastActivity": "2024-05-01T10:00:00Z",
            }
        )
        assert room.participants[0].user_status == "ONLINE"
        assert room.display_name(current_user_id=1) == "bob"
        assert room.display_name(current_user_id=2) == "alice"

    def test_group_room_display_name(self):
        room = ChatRoom.from_dict(
            {
                "chatroomId": "room-2",
                "chatRoomType": "GROUP",
                "participants": [],
                "group": {"id": 4, "name": "Book Club", "userNames": ["a", "b"]},
            }
        )
        assert room.group.user_names == ["a", "b"]
        assert room.display_name(1) == "Book Club"

    def test_room_with_only_self(self):
        room = ChatRoom.from_dict(
            {
                "chatroomId": "room-3",
                "participants": [{"id": 1, "userName": "alice"}],
            }
        )
        assert room.chat_room_type == "PERSONAL"
        assert room.display_name(1) == "alice"

    def test_room_without_participants_uses_id(self):
        room = ChatRoom.from_dict({"chatroomId": "room-4"})
        assert room.display_name() == "room-4"

    def test_missing_chatroom_id(self):
        with pytest.raises(ValueError):
            ChatRoom.from_dict({"participants": []})

    def test_malformed_participant(self):
        with pytest.raises(ValueError):
            ChatRoom.from_dict(
                {"chatroomId": "room-5", "participants": [{"userName": "x"}]}
            )

    def test_participant_without_name_falls_back(self):
        room = ChatRoom.from_dict(
            {
                "chatroomId": "room-6",
                "participants": [
                    {"id": 1, "userName": None},
                    {"id": 2, "userName": None, "emailId": "bob@example.com"},
                    {"id": 3, "userName": None},
                ],
            }
        )
        assert room.display_name(1) == "bob@example.com, 3"
        assert room.matches("bob", 1) is True

    def test_personal_room_with_only_nameless_self(self):
        room = ChatRoom.from_dict(
            {"chatroomId": "room-7", "participants": [{"id": 1, "userName": None}]}
        )
        assert room.display_name(1) == "1"
