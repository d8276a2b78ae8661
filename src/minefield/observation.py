"""
Observation values shared by the board, rendering and agents.

Revealed safe cells are observed as their adjacent mine count (0-8).
"""

HIDDEN_OBSERVATION = -1
MINE_OBSERVATION = 9
