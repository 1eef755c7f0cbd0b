"""
RoboMix core Python package.

Pure game logic for the 5x5 robot-merging toy, kept separate from the Flask
app so it can be tested on its own.
Modules:
- grid.py: Grid, Coord, flat-index conversion
- controller.py: Controller (controlled robot, legal moves, move/mix)
- session.py: Session (clicks, ticks, respawn, JSON state)
- render.py: colors and pixel geometry for the canvas
- config.py: GameConfig
- cli.py: terminal front-end
"""
