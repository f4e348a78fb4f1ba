# src/adventure_board/client/__main__.py
"""
Terminal runner for the polling client.

    python -m adventure_board.client --variant board
    python -m adventure_board.client --variant mini_app --user-id 123456

Commands are read one per line from stdin; screens are reprinted on every
successful load or timer tick.
"""

import argparse
import asyncio
import shlex

from adventure_board.config import settings
from adventure_board.client.api import BoardClient
from adventure_board.client.views import BoardController, Variant


HELP = (
    "commands: p <id> party | c <id> character | m my character | g my party | "
    "b back | x close | r retry | h hide | s show | q quit"
)


def _print_screen(text: str) -> None:
    print("\033[2J\033[H" + text, flush=True)


async def dispatch(controller: BoardController, line: str) -> bool:
    """Apply one command line. Returns False when the user asked to quit."""
    parts = shlex.split(line)
    if not parts:
        return True
    cmd, args = parts[0].lower(), parts[1:]

    if cmd == "q":
        return False
    if cmd in ("p", "c") and (not args or not args[0].lstrip("-").isdigit()):
        print(HELP)
        return True

    if cmd == "p":
        await controller.view_party(int(args[0]))
    elif cmd == "c":
        await controller.view_character(int(args[0]))
    elif cmd == "m":
        await controller.view_my_character()
    elif cmd == "g":
        await controller.view_my_party()
    elif cmd == "b":
        await controller.back()
    elif cmd == "x":
        await controller.close_character()
    elif cmd == "r":
        await controller.refresh()
    elif cmd == "h":
        controller.set_visible(False)
    elif cmd == "s":
        controller.set_visible(True)
    else:
        print(HELP)
    return True


async def run(args: argparse.Namespace) -> None:
    controller = BoardController(
        BoardClient(args.base_url),
        _print_screen,
        variant=args.variant,
        user_id=args.user_id,
        interval=args.interval,
    )
    await controller.open()
    try:
        while True:
            line = await asyncio.to_thread(input, "> ")
            if not await dispatch(controller, line):
                break
    except EOFError:
        pass
    finally:
        await controller.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Poll and render the Adventure Board API")
    parser.add_argument("--base-url", default=settings.API_BASE_URL, help="API root, e.g. http://localhost:3000")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.BOARD.value,
        help="board: adventures list first; mini_app: per-user main menu",
    )
    parser.add_argument("--user-id", type=int, default=None, help="player id for the mini_app variant")
    parser.add_argument("--interval", type=float, default=settings.REFRESH_INTERVAL_SECONDS, help="seconds between refreshes")
    args = parser.parse_args()

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
