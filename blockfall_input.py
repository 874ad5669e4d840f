
"""Key bindings and the between-frames intent queue"""
from collections import deque
from enum import Enum, auto
from typing import List, Optional
import pygame

class Intent(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE = auto()

KEY_BINDINGS = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_a: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_d: Intent.MOVE_RIGHT,
    pygame.K_DOWN: Intent.SOFT_DROP,
    pygame.K_s: Intent.SOFT_DROP,
    pygame.K_q: Intent.ROTATE,
    pygame.K_e: Intent.ROTATE,
}

def intent_for_key(key: int) -> Optional[Intent]:
    return KEY_BINDINGS.get(key)

class InputQueue:
    """Collects intents from key-down events until the next frame drains them."""
    def __init__(self):
        self.pending = deque()

    def push_event(self, e) -> bool:
        if e.type != pygame.KEYDOWN: return False
        intent = intent_for_key(e.key)
        if intent is None: return False
        self.pending.append(intent)
        return True

    def drain(self) -> List[Intent]:
        out = list(self.pending)
        self.pending.clear()
        return out

    def __len__(self):
        return len(self.pending)
