from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from .config import SPAWN_POLICIES, GameConfig
from .session import IGNORED, Session


def parse_command(text: str) -> Optional[Tuple[int, int]]:
    """Parses "x,y" or "x y" into a coordinate. Returns None if it cannot."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t.strip() != '']
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def show(session: Session) -> None:
    print(session.grid.pretty(session.controller.controlled))
    print('Reachable tiles:', [tuple(m) for m in session.moves()])


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='RoboMix: move and merge robots on a 5x5 grid')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for spawns')
    parser.add_argument('--policy', choices=list(SPAWN_POLICIES), default=None,
                        help='Spawn trigger: "player" (moves only) or "tick" (random robot every tick)')
    parser.add_argument('--strict-edges', action='store_true',
                        help='Do not treat the left and right board edges of adjacent rows as neighbours')
    parser.add_argument('--ticks-per-turn', type=int, default=1,
                        help='Ticks to run after every accepted move (tick policy only)')
    args = parser.parse_args(argv)

    env_cfg = GameConfig.from_env()
    config = GameConfig(
        spawn_policy=args.policy or env_cfg.spawn_policy,
        tick_ms=env_cfg.tick_ms,
        wrap_edges=env_cfg.wrap_edges and not args.strict_edges,
    )
    session = Session.new(config, seed=args.seed)
    print(f"Spawn policy: {config.spawn_policy}. Enter x,y to move, t to tick, q to quit.")
    show(session)

    while True:
        try:
            text = input('> ').strip().lower()
        except EOFError:
            break
        if text in ('q', 'quit', 'exit'):
            break
        if text in ('t', 'tick'):
            spawned = session.tick()
            if spawned is not None:
                print(f"Tick spawned a robot at {spawned}")
            show(session)
            continue
        coord = parse_command(text)
        if coord is None:
            print('Could not parse. Try again.')
            continue
        outcome = session.click(*coord)
        if outcome == IGNORED:
            print('Not reachable. Try again.')
            continue
        print(f"{outcome.capitalize()} to {coord}")
        for _ in range(max(0, args.ticks_per_turn)):
            spawned = session.tick()
            if spawned is not None:
                print(f"Tick spawned a robot at {spawned}")
        show(session)


if __name__ == '__main__':
    main()
