from __future__ import annotations

# A pillar shields the treasure from the monster until the player steps
# out into the open corridor.
LEVEL_ONE = """\
5 7
0 0
o - - + - - M
- + - $ - + -
- + - - - + -
- - - + - - ?
$ - - - - - -
"""

# The amulet doubles this room; the exit needs the treasure found upstairs.
LEVEL_TWO = """\
4 6
3 0
- - + - - !
- M - - + -
- + - @ - -
o - - - $ -
"""


def default_demo_levels() -> list[str]:
    return [LEVEL_ONE, LEVEL_TWO]
