"""
Scripted editor session

Replays a list of clicks the way the editor receives them from the mouse:
each click is mapped to a cell, the map grows toward it (also up and to the
left of the origin), and the result is saved trimmed with a blocked border.

Run: uv run python examples/editor_session/run.py --out /tmp/room.map
"""

import argparse
import sys

from tilegrid import EditorSession, render_ascii
from tilegrid.config import Config
from tilegrid.logging_utils import log_error

VIEWPORT = (640.0, 480.0)

# A small L-shaped room painted outward from the centre of the screen,
# then extended above and to the left of the first tile.
CLICKS = [
    (330.0, 250.0),
    (362.0, 250.0),
    (394.0, 250.0),
    (394.0, 282.0),
    (394.0, 314.0),
    (298.0, 250.0),
    (330.0, 218.0),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scripted map editing session")
    parser.add_argument("--input", default=None, help="Map to start from (default: new map)")
    parser.add_argument("--out", default=None, help="Where to save the result")
    return parser.parse_args()


def main(args: argparse.Namespace) -> None:
    try:
        Config.validate()
    except ValueError as e:
        log_error(f"Invalid configuration: {e}")
        sys.exit(1)

    print(Config.display())
    session = EditorSession.start(args.input, viewport=VIEWPORT)

    for cursor in CLICKS:
        row, col = session.click(cursor)
        print(f"click {cursor} -> cell ({row}, {col})")

    print(render_ascii(session.tile_map))

    saved = session.save(args.out)
    if saved is not None:
        print(render_ascii(saved))


if __name__ == "__main__":
    main(parse_args())
