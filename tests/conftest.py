"""Shared levels for the engine tests."""

import copy

import pytest

from src.engine import load_level, parse_level


# C T A        Node ids (pre-order):
# O A R          0  (0,1)<->(0,2) CAT   depth 2
# W E N          1    (1,1)<->(2,1) WAN   depth 1
#                2      (1,2)<->(2,2) WAR   depth 0
#                3    (1,0)<->(2,0) WAR   depth 0
#                4  (2,1)<->(2,2) ARE TAN depth 0
LEVEL = {
    "initialGrid": [
        ["C", "T", "A"],
        ["O", "A", "R"],
        ["W", "E", "N"],
    ],
    "wordLength": 3,
    "minWordLength": 3,
    "maxDepthReached": 3,
    "explorationTree": [
        {
            "move": {"from": [0, 1], "to": [0, 2]},
            "wordsFormed": ["CAT"],
            "maxDepthReached": 2,
            "nextMoves": [
                {
                    "move": {"from": [1, 1], "to": [2, 1]},
                    "wordsFormed": ["WAN"],
                    "maxDepthReached": 1,
                    "nextMoves": [
                        {
                            "move": {"from": [1, 2], "to": [2, 2]},
                            "wordsFormed": ["WAR"],
                            "maxDepthReached": 0,
                        },
                    ],
                },
                {
                    "move": {"from": [1, 0], "to": [2, 0]},
                    "wordsFormed": ["WAR"],
                    "maxDepthReached": 0,
                },
            ],
        },
        {
            "move": {"from": [2, 1], "to": [2, 2]},
            "wordsFormed": ["ARE", "TAN"],
            "maxDepthReached": 0,
        },
    ],
}

# Moves along the deepest path
CAT = ((0, 1), (0, 2))
WAN = ((1, 1), (2, 1))
WAR = ((1, 2), (2, 2))
# Other tree moves
WAR_EARLY = ((1, 0), (2, 0))
ARE_TAN = ((2, 1), (2, 2))
# Forms WAR from the initial grid, which the tree does not list there
OFF_TREE_WAR = ((1, 0), (2, 0))
# Forms nothing from the initial grid
NO_WORD = ((0, 0), (0, 1))


@pytest.fixture
def level_data():
    return copy.deepcopy(LEVEL)


@pytest.fixture
def level(level_data):
    return parse_level(level_data)


@pytest.fixture
def session(level):
    return load_level(level)
