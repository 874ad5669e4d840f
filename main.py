import logging
import sys
import pygame
from blockfall_config import CONFIG
from blockfall_images import ImageRegistry
from blockfall_input import InputQueue
from blockfall_layout import compute_dims
from blockfall_overlay import Overlay
from blockfall_render import Renderer
from blockfall_session import Session

log = logging.getLogger("blockfall")


def frame(session, queue, now):
    """One scheduled frame: queued input first, then at most one gravity step."""
    if not session.active:
        queue.drain()
        return False
    for intent in queue.drain():
        session.handle(intent)
    return session.tick(now)


def main(argv=None):
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 24)
    clock = pygame.time.Clock()

    images = ImageRegistry(sys.argv[1:] if argv is None else argv)
    session = Session(images)
    overlay = Overlay(session, images)
    renderer = Renderer(screen, dims)
    queue = InputQueue()

    running = True
    while running:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if overlay.active:
                    running = overlay.handle(e)
                else:
                    queue.push_event(e)

        frame(session, queue, pygame.time.get_ticks())

        screen.fill((235, 235, 235))
        renderer.draw_frame(session.board, session.piece, session.anchor, images)
        overlay.draw(screen, font, dims)
        pygame.display.flip()

    log.info("bye")
    pygame.quit()


if __name__ == '__main__':
    main()
