# src/adventure_board/api/dependencies.py

from adventure_board.aggregator.logic import AdventureLogic


def get_logic() -> AdventureLogic:
    return AdventureLogic()
