
"""
Rendering helpers for Blockfall.

One full redraw per frame: clear, settled cells, active piece, border.
Colors come from the piece catalog as pygame color names; a block with a
usable image is blitted instead of filled.
"""
from __future__ import annotations
import pygame
from typing import Optional
from blockfall_board import Board, cells
from blockfall_config import CONFIG
from blockfall_layout import Dims, COLS, ROWS
from blockfall_piece import Anchor, Piece, color_for

BACKGROUND = (255, 255, 255)
OUTLINE = (0, 0, 0)

class Renderer:
    """Drawing surface over a pygame Surface plus the per-frame board draw."""
    def __init__(self, surface: pygame.Surface, dims: Dims):
        self.surface = surface
        self.dims = dims

    # ---------- Primitives ----------
    def clear(self, x: int, y: int, w: int, h: int):
        self.surface.fill(BACKGROUND, pygame.Rect(x, y, w, h))

    def fill_rect(self, x: int, y: int, w: int, h: int, color):
        self.surface.fill(pygame.Color(color), pygame.Rect(x, y, w, h))

    def stroke_rect(self, x: int, y: int, w: int, h: int, width: int = 1):
        pygame.draw.rect(self.surface, OUTLINE, pygame.Rect(x, y, w, h), width)

    def draw_image(self, img: pygame.Surface, x: int, y: int, w: int, h: int):
        if img.get_size() != (w, h):
            img = pygame.transform.scale(img, (w, h))
        self.surface.blit(img, (x, y))

    # ---------- Blocks ----------
    def draw_block(self, bx: int, by: int, color: str, img: Optional[pygame.Surface]):
        c = self.dims.cell
        x, y = bx * c, by * c
        if img is not None:
            self.draw_image(img, x, y, c, c)
        else:
            self.fill_rect(x, y, c, c, color)
            self.stroke_rect(x, y, c, c, CONFIG["CELL_OUTLINE_WIDTH"])

    def draw_board(self, board: Board, images=None):
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                kind = board[y][x]
                if kind is None: continue
                # settled cells take the image registered at their kind's slot
                img = images.surface(kind - 1, c) if images is not None else None
                self.draw_block(x, y, color_for(kind), img)

    def draw_piece(self, piece: Optional[Piece], anchor: Anchor, images=None):
        if piece is None: return
        img = images.surface(piece.image_index, self.dims.cell) if images is not None else None
        for bx, by in cells(piece, anchor):
            if by < 0: continue
            self.draw_block(bx, by, piece.color, img)

    def draw_border(self):
        d = self.dims
        self.stroke_rect(0, 0, d.board_w, d.board_h, CONFIG["BORDER_WIDTH"])

    def draw_frame(self, board: Board, piece: Optional[Piece], anchor: Anchor, images=None):
        d = self.dims
        self.clear(0, 0, d.board_w, d.board_h)
        self.draw_board(board, images)
        self.draw_piece(piece, anchor, images)
        self.draw_border()
