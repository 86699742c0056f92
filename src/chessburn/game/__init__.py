"""Game layer: timeline state machine and the viewer session.

Quick start::

    from chessburn.game import ViewerSession

    session = ViewerSession()
    report = session.import_transcript("1. e4 e5 2. Nf3 Nc6")
    session.timeline.jump_to(3)
"""

from chessburn.game.session import ImportReport, ViewerSession
from chessburn.game.timeline import Timeline, TimelineEvents

__all__ = [
    "ImportReport",
    "Timeline",
    "TimelineEvents",
    "ViewerSession",
]
