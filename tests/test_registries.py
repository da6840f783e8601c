from mandi_relay.services.relay import RoomRegistry, SessionRegistry


def test_session_open_get_close():
    registry = SessionRegistry()

    session = registry.open("c1", "alice", "r1")

    assert registry.get("c1") is session
    assert session.language == "en"
    assert "c1" in registry
    assert registry.close("c1") is session
    assert registry.get("c1") is None
    assert registry.close("c1") is None


def test_session_absent_lookups_are_not_errors():
    registry = SessionRegistry()

    assert registry.get("ghost") is None
    assert registry.set_language("ghost", "hi") is False
    assert len(registry) == 0


def test_session_set_language_and_overwrite():
    registry = SessionRegistry()
    registry.open("c1", "alice", "r1")

    assert registry.set_language("c1", "ta") is True
    assert registry.get("c1").language == "ta"

    registry.open("c1", "alice2", "r2")
    session = registry.get("c1")
    assert (session.user_id, session.room_id, session.language) == ("alice2", "r2", "en")
    assert len(registry) == 1


def test_room_created_on_first_member_and_deleted_when_empty():
    rooms = RoomRegistry()

    rooms.add_member("r1", "alice")
    rooms.add_member("r1", "bob")
    assert rooms.members("r1") == {"alice", "bob"}

    assert rooms.remove_member("r1", "alice") is False
    assert rooms.has_room("r1")

    assert rooms.remove_member("r1", "bob") is True
    assert not rooms.has_room("r1")
    assert rooms.room_count() == 0


def test_room_remove_unknown_is_noop():
    rooms = RoomRegistry()
    rooms.add_member("r1", "alice")

    assert rooms.remove_member("nowhere", "alice") is False
    assert rooms.remove_member("r1", "stranger") is False
    assert rooms.members("r1") == {"alice"}
    assert rooms.members("nowhere") == frozenset()


def test_room_members_is_a_snapshot():
    rooms = RoomRegistry()
    rooms.add_member("r1", "alice")

    snapshot = rooms.members("r1")
    rooms.add_member("r1", "bob")

    assert snapshot == {"alice"}
