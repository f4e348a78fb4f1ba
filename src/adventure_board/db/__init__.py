from adventure_board.db.session import DB

__all__ = ["DB"]
