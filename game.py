from __future__ import annotations

# Facade module that re-exports RoboMix core functionality for the Flask app,
# the tests and quick interactive use. Single-responsibility modules live
# under robomix_core/*.

try:
    from .robomix_core.grid import (  # type: ignore
        CELL_COUNT,
        MAX_SIZE,
        ROBOT_COLORS,
        SIDE,
        Coord,
        Grid,
        GridBoundsError,
        from_index,
        to_index,
    )
    from .robomix_core.controller import Controller, IllegalMoveError  # type: ignore
    from .robomix_core.config import GameConfig, SPAWN_POLICIES  # type: ignore
    from .robomix_core.session import (  # type: ignore
        DESTROYED,
        IGNORED,
        MIXED,
        MOVED,
        InvalidStateError,
        Session,
    )
    from .robomix_core.render import (  # type: ignore
        build_frame,
        color_for,
        pixel_to_tile,
        tile_rect,
    )
except ImportError:
    from robomix_core.grid import (  # type: ignore
        CELL_COUNT,
        MAX_SIZE,
        ROBOT_COLORS,
        SIDE,
        Coord,
        Grid,
        GridBoundsError,
        from_index,
        to_index,
    )
    from robomix_core.controller import Controller, IllegalMoveError  # type: ignore
    from robomix_core.config import GameConfig, SPAWN_POLICIES  # type: ignore
    from robomix_core.session import (  # type: ignore
        DESTROYED,
        IGNORED,
        MIXED,
        MOVED,
        InvalidStateError,
        Session,
    )
    from robomix_core.render import (  # type: ignore
        build_frame,
        color_for,
        pixel_to_tile,
        tile_rect,
    )


def main() -> None:
    # CLI driver delegated to robomix_core.cli
    try:
        from .robomix_core.cli import main as _main  # type: ignore
    except ImportError:
        from robomix_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
