"""
Labels for clarity.
"""

from typing import List, Literal

Digit = int  # 0 -> 9
Code = List[Digit]  # secret or guess, length 3..5
GameStatus = Literal["idle", "active", "won", "lost"]
Difficulty = Literal["easy", "medium", "hard"]
