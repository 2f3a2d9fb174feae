import pytest

from conftest import level
from dungeon.engine.core import CAUGHT_MESSAGE, FINAL_DOOR_MESSAGE, DungeonEngine
from dungeon.engine.levels import render
from dungeon.exceptions import InvariantViolation, LevelFormatError, SessionOverError
from dungeon.models.enums import Direction, MoveOutcome, SessionStatus, Tile, TurnLogResult


@pytest.fixture()
def engine() -> DungeonEngine:
    return DungeonEngine()


def test_new_session_requires_levels(engine):
    with pytest.raises(LevelFormatError):
        engine.new_session([])


def test_new_session_validates_every_level(engine):
    with pytest.raises(LevelFormatError, match="level 1"):
        engine.new_session([level("o-", start=(0, 0)), "1 1\n0 0\nZ"])


def test_turn_moves_then_monsters_advance(engine):
    sess = engine.new_session([level("o$--M", start=(0, 0))])
    res = engine.take_turn(sess, Direction.RIGHT)
    assert res.outcome == MoveOutcome.MOVED_TREASURE
    assert not res.caught and res.status == SessionStatus.IN_PROGRESS
    assert render(sess.grid) == ["-o-M-"]
    assert sess.player.treasure == 1
    assert sess.turn == 2


def test_amulet_doubles_the_grid(engine):
    sess = engine.new_session([level("o@", start=(0, 0))])
    res = engine.take_turn(sess, Direction.RIGHT)
    assert res.outcome == MoveOutcome.MOVED_AMULET
    assert (sess.grid.rows, sess.grid.cols) == (2, 4)
    assert render(sess.grid) == ["-o#-", "#-#-"]
    assert sess.grid.find(Tile.PLAYER) == [(0, 1)]


def test_door_loads_next_level_and_keeps_treasure(engine):
    sess = engine.new_session([level("o$?", start=(0, 0)), level("!o", start=(0, 1))])
    engine.take_turn(sess, Direction.RIGHT)
    res = engine.take_turn(sess, Direction.RIGHT)
    assert res.outcome == MoveOutcome.MOVED_DOOR
    assert res.level_index == 1 and sess.level_index == 1
    assert sess.player.pos == (0, 1) and sess.player.treasure == 1
    res = engine.take_turn(sess, Direction.LEFT)
    assert res.outcome == MoveOutcome.MOVED_EXIT
    assert sess.status == SessionStatus.ESCAPED


def test_door_on_last_level_escapes(engine):
    sess = engine.new_session([level("o?", start=(0, 0))])
    res = engine.take_turn(sess, Direction.RIGHT)
    assert res.status == SessionStatus.ESCAPED
    assert res.message == FINAL_DOOR_MESSAGE


def test_monsters_do_not_move_after_escape(engine):
    sess = engine.new_session([level("o!M", start=(0, 0))])
    sess.player.treasure = 1
    res = engine.take_turn(sess, Direction.RIGHT)
    assert res.outcome == MoveOutcome.MOVED_EXIT and not res.caught
    assert render(sess.grid) == ["-oM"]


def test_staying_lets_monster_catch_player(engine):
    sess = engine.new_session([level("o-M", start=(0, 0))])
    assert engine.take_turn(sess, None).outcome == MoveOutcome.STAYED
    res = engine.take_turn(sess, None)
    assert res.caught and res.message == CAUGHT_MESSAGE
    assert sess.status == SessionStatus.CAUGHT
    with pytest.raises(SessionOverError):
        engine.take_turn(sess, Direction.RIGHT)


def test_quit(engine, turn_events):
    sess = engine.new_session([level("o-", start=(0, 0))])
    engine.quit(sess)
    assert sess.status == SessionStatus.QUIT
    assert turn_events[-1].result == TurnLogResult.QUIT
    with pytest.raises(SessionOverError):
        engine.quit(sess)


def test_turns_are_reported_on_the_event_bus(engine, turn_events):
    sess = engine.new_session([level("o$", start=(0, 0))], session_id="s1")
    engine.take_turn(sess, Direction.RIGHT)
    engine.take_turn(sess, Direction.RIGHT)
    assert [(e.turn, e.direction, e.outcome) for e in turn_events] == [
        (1, "right", MoveOutcome.MOVED_TREASURE),
        (2, "right", MoveOutcome.STAYED),
    ]
    assert all(e.session_id == "s1" for e in turn_events)


def test_errors_are_reported_then_raised(engine, turn_events):
    sess = engine.new_session([level("o-", start=(0, 0))])
    sess.grid.set(0, 1, Tile.PLAYER)
    with pytest.raises(InvariantViolation):
        engine.take_turn(sess, Direction.RIGHT)
    assert turn_events[-1].result == TurnLogResult.ERROR
    assert sess.turn == 1


@pytest.mark.parametrize(
    "row,start,direction,reason",
    [
        ("o+", (0, 0), Direction.RIGHT, "blocked by pillar"),
        ("o-", (0, 0), Direction.UP, "out of bounds"),
        ("o!", (0, 0), Direction.RIGHT, "exit needs at least one treasure"),
    ],
)
def test_blocked_move_explains_why(engine, turn_events, row, start, direction, reason):
    sess = engine.new_session([level(row, start=start)])
    res = engine.take_turn(sess, direction)
    assert res.outcome == MoveOutcome.STAYED
    assert reason in res.message
    assert turn_events[-1].message == res.message


def test_stay_command_has_no_blocked_reason(engine):
    sess = engine.new_session([level("o-", start=(0, 0))])
    assert engine.take_turn(sess, None).message == "You stay where you are."
