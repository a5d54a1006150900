"""
Live display board polling.
"""

from courtdesk.board.watcher import DisplayBoardWatcher

__all__ = ["DisplayBoardWatcher"]
