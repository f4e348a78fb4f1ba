from adventure_board.aggregator.logic import AdventureLogic

__all__ = ["AdventureLogic"]
