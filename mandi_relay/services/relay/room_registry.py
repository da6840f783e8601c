"""
Room Registry

Presence bookkeeping: the set of user IDs per room. Used for join/leave
notices and room cleanup only; message delivery always goes through the
connection hub's live subscriptions.
"""
from typing import Dict, FrozenSet, Set


class RoomRegistry:
    """Maps room IDs to non-empty sets of member user IDs."""

    def __init__(self):
        # room_id -> {user_id}; a key is only present while its set is non-empty
        self._rooms: Dict[str, Set[str]] = {}

    def add_member(self, room_id: str, user_id: str) -> None:
        self._rooms.setdefault(room_id, set()).add(user_id)

    def remove_member(self, room_id: str, user_id: str) -> bool:
        """
        Remove a user from a room, deleting the room once it is empty.

        Returns:
            True if the room was deleted as a result
        """
        members = self._rooms.get(room_id)
        if members is None:
            return False

        members.discard(user_id)
        if not members:
            del self._rooms[room_id]
            return True
        return False

    def members(self, room_id: str) -> FrozenSet[str]:
        return frozenset(self._rooms.get(room_id, ()))

    def has_room(self, room_id: str) -> bool:
        return room_id in self._rooms

    def room_count(self) -> int:
        return len(self._rooms)
