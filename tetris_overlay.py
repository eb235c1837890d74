
import pygame

class Overlay:
    """Message box over the board while the game is paused or finished."""
    def __init__(self, font, big_font):
        self.font = font
        self.big_font = big_font

    @staticmethod
    def message(snap):
        if snap.game_over: return ("Game Over", "Press Enter to play again")
        if snap.paused: return ("Paused", "Press P to resume")
        return None

    def draw(self, screen, snap, rect):
        msg = self.message(snap)
        if msg is None: return
        s = pygame.Surface(rect.size, pygame.SRCALPHA); s.fill((0, 0, 0, 170))
        screen.blit(s, rect.topleft)
        title, hint = msg
        t = self.big_font.render(title, True, (255, 220, 220))
        screen.blit(t, t.get_rect(center=(rect.centerx, rect.centery - 16)))
        h = self.font.render(hint, True, (200, 210, 235))
        screen.blit(h, h.get_rect(center=(rect.centerx, rect.centery + 20)))
