import threading

from conftest import level
from dungeon.engine.core import DungeonEngine
from dungeon.models.enums import Direction
from dungeon.storage import MemoryLogStore, MemorySessionStore


def _session(sid: str, row: str = "o-"):
    return DungeonEngine().new_session([level(row, start=(0, 0))], session_id=sid)
def test_sessions_past_cap_are_evicted_oldest_first():
    store = MemorySessionStore(max_sessions=2)
    store.save(_session("a"))
    store.save(_session("b"))
    store.get("a")  # touch: b is now the oldest
    evicted = store.save(_session("c"))
    assert evicted == ["b"]
    assert store.get("b") is None
    assert {s.id for s in store.list_all()} == {"a", "c"}


def test_get_returns_a_copy_until_saved():
    store = MemorySessionStore()
    store.save(_session("a"))
    sess = store.get("a")
    DungeonEngine().take_turn(sess, Direction.RIGHT)
    assert store.get("a").player.pos == (0, 0)
    store.save(sess)
    assert store.get("a").player.pos == (0, 1)


def test_delete():
    store = MemorySessionStore()
    store.save(_session("a"))
    assert store.delete("a") is True
    assert store.delete("a") is False


def test_log_store_keeps_most_recent_entries():
    logs = MemoryLogStore(limit=3)
    for i in range(5):
        logs.append("s", str(i))
    assert logs.list("s", 10) == ["2", "3", "4"]
    assert logs.list("s", 2) == ["3", "4"]
    assert logs.list("other", 5) == []


def test_locked_turns_on_one_session_apply_one_at_a_time():
    store = MemorySessionStore()
    store.save(_session("s", "o----"))
    engine = DungeonEngine()
    start = threading.Barrier(4)

    def play():
        start.wait()
        with store.locked("s"):
            sess = store.get("s")
            engine.take_turn(sess, Direction.RIGHT)
            store.save(sess)

    threads = [threading.Thread(target=play) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    sess = store.get("s")
    assert sess.turn == 5
    assert sess.player.pos == (0, 4)


def test_concurrent_get_and_delete_do_not_raise():
    store = MemorySessionStore()
    errors: list[Exception] = []

    def churn(n: int):
        try:
            for _ in range(200):
                store.save(_session(f"s{n % 2}"))
                store.get("s0")
                store.delete("s1")
                store.list_all()
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=churn, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
