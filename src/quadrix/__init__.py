"""Quadrix: a falling-block puzzle game.

The engine lives in ``quadrix.game``; ``quadrix.session`` drives it from a
timer and input, ``quadrix.leaderboard`` keeps the high-score table and
``quadrix.visualization`` is the pygame front end.
"""

__version__ = "0.1.0"
