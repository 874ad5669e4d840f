
"""Image registry: user supplied block skins"""
import logging
from typing import Dict, List, Optional, Tuple
import pygame

log = logging.getLogger(__name__)

class ImageRegistry:
    """Ordered, growable list of image file references.

    The game only reads ``len()`` and indexes into it. Loading happens on
    first use; a reference that cannot be loaded resolves to ``None`` so the
    renderer can fall back to flat color.
    """
    def __init__(self, refs=()):
        self.refs: List[str] = []
        self._cache: Dict[Tuple[int, int], Optional[pygame.Surface]] = {}
        self._failed = set()
        for ref in refs:
            self.add(ref)

    def __len__(self) -> int:
        return len(self.refs)

    def __getitem__(self, index: int) -> str:
        return self.refs[index]

    def add(self, ref: str) -> bool:
        ref = (ref or "").strip()
        if not ref:
            return False
        self.refs.append(ref)
        log.info("registered image %d: %s", len(self.refs) - 1, ref)
        return True

    def _load(self, index: int) -> Optional[pygame.Surface]:
        if index in self._failed:
            return None
        try:
            return pygame.image.load(self.refs[index])
        except (FileNotFoundError, pygame.error) as exc:
            self._failed.add(index)
            log.warning("could not load image %r: %s", self.refs[index], exc)
            return None

    def surface(self, index: Optional[int], size: int) -> Optional[pygame.Surface]:
        """Scaled surface for ``index`` or None when absent or unloadable."""
        if index is None or not 0 <= index < len(self.refs):
            return None
        key = (index, size)
        if key not in self._cache:
            img = self._load(index)
            self._cache[key] = pygame.transform.scale(img, (size, size)) if img else None
        return self._cache[key]
