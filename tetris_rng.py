
"""7-bag randomizer module"""
import random
from collections import deque
from typing import List, Optional
from tetris_piece import PieceKind

class BagRandom:
    """Deals piece kinds from shuffled bags of all seven, keeping a lookahead queue."""
    PIECES = list(PieceKind)

    def __init__(self, seed: Optional[int] = None, lookahead: int = 3):
        self.rng = random.Random(seed)
        self.lookahead = lookahead
        self.queue: deque = deque()
        self.refill()

    def refill(self):
        bag = list(self.PIECES)
        self.rng.shuffle(bag)
        self.queue.extend(bag)

    def next_piece(self) -> PieceKind:
        if not self.queue:
            self.refill()
        kind = self.queue.popleft()
        while len(self.queue) < self.lookahead:
            self.refill()
        return kind

    def preview(self, n: Optional[int] = None) -> List[PieceKind]:
        n = self.lookahead if n is None else n
        return list(self.queue)[:n]

    def reset(self):
        self.queue.clear()
        self.refill()
