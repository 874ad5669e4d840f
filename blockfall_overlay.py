
import pygame

class Overlay:
    """Start / retry screen with an image path field.

    Hidden while a game runs; shown again in retry mode when the session
    signals game over.
    """
    PROMPTS = {
        "start": "Enter: Play",
        "retry": "GAME OVER  Enter: Retry",
    }

    def __init__(self, session, images):
        self.session = session
        self.images = images
        self.mode = "start"
        self.text = ""
        session.on_game_over_changed.append(self.on_game_over_changed)

    @property
    def active(self):
        return self.mode is not None

    def on_game_over_changed(self, show_retry):
        self.mode = "retry" if show_retry else None

    def handle(self, e):
        """Returns False when the player asked to quit."""
        if e.key == pygame.K_ESCAPE: return False
        if e.key == pygame.K_BACKSPACE: self.text = self.text[:-1]; return True
        if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.text.strip():
                self.images.add(self.text); self.text = ""
            elif self.mode == "retry":
                self.session.restart()
            else:
                self.session.start()
            return True
        if e.unicode and e.unicode.isprintable(): self.text += e.unicode
        return True

    def draw(self, screen, font, dims):
        if not self.active: return
        s = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA); s.fill((20, 25, 40, 200))
        screen.blit(s, (0, 0))
        msg = font.render(self.PROMPTS[self.mode], True, (255, 255, 255))
        screen.blit(msg, msg.get_rect(center=(dims.board_w // 2, dims.board_h // 2)))
        hint = font.render(f"Images: {len(self.images)}", True, (200, 210, 235))
        screen.blit(hint, hint.get_rect(center=(dims.board_w // 2, dims.board_h // 2 + 28)))
        screen.fill((235, 235, 235), pygame.Rect(0, dims.board_h, dims.total_w, dims.status_h))
        field = font.render(f"Image: {self.text}_", True, (20, 20, 20))
        screen.blit(field, (6, dims.board_h + 6))
