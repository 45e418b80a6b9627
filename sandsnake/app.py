"""Window, input, drawing and sound for the snake game."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from sandsnake.game import (
    DOT_SIZE,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    Direction,
    Game,
    Outcome,
    food_diamond,
    head_triangle,
)
from sandsnake.highscore import HighScoreStore

WINDOW_SIZE = (600, 500)
FRAME_BORDER = 2
FIELD_COLOR = 0xF8F4E6
BACKGROUND_COLOR = 0xF0E5D8
SNAKE_HEAD_COLOR = 0x5E1914
SNAKE_BODY_1 = 0x8B4513
SNAKE_BODY_2 = 0xA0522D
FOOD_COLOR = 0xD4A017
BORDER_COLOR = 0x5E1914
LABEL_COLOR = 0xA52A2A
BUTTON_COLOR = 0xE0E0E0

_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
}


def _rgb(value: int) -> tuple[int, int, int]:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def key_to_direction(key):
    """The direction a key steers in, or None for other keys."""
    return _KEYS.get(key)


class SnakeApp:
    """The game window: buttons, score labels, field, music."""

    def __init__(self, store=None, assets_dir=None):
        self.store = store if store is not None else HighScoreStore()
        self.assets_dir = Path(assets_dir) if assets_dir is not None else Path.cwd()
        self.game = Game()
        self.high_score = self.store.load()
        self.muted = False
        self.play_visible = True
        self.restart_visible = False
        self._focused = True
        self._elapsed = 0
        self._background = None
        self._death_sound = None
        self._music_loaded = False
        self._fonts = {}

        frame_w = FIELD_WIDTH * DOT_SIZE + 2 * FRAME_BORDER
        frame_h = FIELD_HEIGHT * DOT_SIZE + 2 * FRAME_BORDER
        self._frame = pygame.Rect((WINDOW_SIZE[0] - frame_w) // 2, 60, frame_w, frame_h)
        self._play_rect = pygame.Rect(190, 410, 100, 40)
        self._restart_rect = pygame.Rect(300, 410, 100, 40)
        self._mute_rect = pygame.Rect(480, 410, 100, 40)

    def toggle_mute(self) -> bool:
        """Mute or unmute the background music; returns the new state."""
        self.muted = not self.muted
        if self._music_loaded:
            pygame.mixer.music.set_volume(0.0 if self.muted else 1.0)
        return self.muted

    def handle_key(self, key) -> bool:
        """React to a key press; returns True when the key was used."""
        direction = key_to_direction(key)
        if direction is None:
            return False
        if not self.game.running:
            self._start_game()
        self.game.steer(direction)
        return True

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Snake Game")
        self._load_assets()
        clock = pygame.time.Clock()
        try:
            while self._handle_events():
                elapsed = clock.tick(60)
                if self.game.running and self._focused:
                    self._elapsed += elapsed
                    while self.game.running and self._elapsed >= self.game.interval:
                        self._elapsed -= self.game.interval
                        self._advance()
                self._draw(screen)
                pygame.display.flip()
        finally:
            self.store.save(self.high_score)
            pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                self.handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._click(event.pos)
            elif event.type == pygame.WINDOWFOCUSLOST:
                self._focused = False
                if self._music_loaded:
                    pygame.mixer.music.pause()
            elif event.type == pygame.WINDOWFOCUSGAINED:
                self._focused = True
                self._elapsed = 0
                if self._music_loaded and not self.muted:
                    pygame.mixer.music.unpause()
        return True

    def _click(self, pos) -> None:
        if self.play_visible and self._play_rect.collidepoint(pos):
            self._start_game()
        elif self.restart_visible and self._restart_rect.collidepoint(pos):
            self._start_game()
        elif self._mute_rect.collidepoint(pos):
            self.toggle_mute()

    def _start_game(self) -> None:
        self.play_visible = False
        self.restart_visible = False
        if self._death_sound is not None:
            self._death_sound.stop()
        self._restart_music()
        self.game.start()
        self._elapsed = 0

    def _advance(self) -> None:
        if self.game.tick() is Outcome.DIED:
            self._game_over()

    def _game_over(self) -> None:
        self.high_score = max(self.high_score, self.game.score)
        if self._music_loaded:
            pygame.mixer.music.stop()
        if self._death_sound is not None:
            self._death_sound.play()
        self.restart_visible = True

    def _restart_music(self) -> None:
        if self._music_loaded:
            pygame.mixer.music.stop()
            pygame.mixer.music.play(loops=-1)

    def _load_assets(self) -> None:
        try:
            self._background = pygame.image.load(str(self.assets_dir / "background.JPG"))
        except (pygame.error, FileNotFoundError):
            self._background = None
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(str(self.assets_dir / "music.mp3"))
            pygame.mixer.music.set_volume(0.0 if self.muted else 1.0)
            self._music_loaded = True
            pygame.mixer.music.play(loops=-1)
        except (pygame.error, FileNotFoundError):
            self._music_loaded = False
        try:
            if pygame.mixer.get_init():
                self._death_sound = pygame.mixer.Sound(str(self.assets_dir / "coffin.mp3"))
                self._death_sound.set_volume(1.0)
        except (pygame.error, FileNotFoundError):
            self._death_sound = None
        self._fonts = {
            "label": pygame.font.SysFont("Arial", 18, bold=True),
            "button": pygame.font.SysFont("Arial", 16),
        }

    def _draw(self, screen) -> None:
        if self._background is not None:
            screen.blit(pygame.transform.smoothscale(self._background, WINDOW_SIZE), (0, 0))
        else:
            screen.fill(_rgb(BACKGROUND_COLOR))

        self._draw_label(screen, f"Score: {self.game.score}", left=20)
        self._draw_label(screen, f"High Score: {self.high_score}", right=WINDOW_SIZE[0] - 20)

        screen.fill(_rgb(FIELD_COLOR), self._frame)
        pygame.draw.rect(screen, _rgb(BORDER_COLOR), self._frame, FRAME_BORDER)
        origin = (self._frame.x + FRAME_BORDER, self._frame.y + FRAME_BORDER)
        self._draw_field(screen, origin)

        if self.play_visible:
            self._draw_button(screen, self._play_rect, "Play")
        if self.restart_visible:
            self._draw_button(screen, self._restart_rect, "Restart")
        self._draw_button(screen, self._mute_rect, "Unmute" if self.muted else "Mute")

    def _draw_field(self, screen, origin) -> None:
        ox, oy = origin

        def shift(points):
            return [(x + ox, y + oy) for x, y in points]

        if self.game.snake:
            triangle = head_triangle(self.game.head(), self.game.direction, DOT_SIZE)
            pygame.draw.polygon(screen, _rgb(SNAKE_HEAD_COLOR), shift(triangle))
            for index, (x, y) in enumerate(self.game.snake[1:], start=1):
                color = SNAKE_BODY_1 if index % 2 else SNAKE_BODY_2
                cell = pygame.Rect(ox + x * DOT_SIZE, oy + y * DOT_SIZE, DOT_SIZE, DOT_SIZE)
                pygame.draw.rect(screen, _rgb(color), cell)
                pygame.draw.rect(screen, (0, 0, 0), cell, 1)
        if self.game.food is not None:
            pygame.draw.polygon(
                screen, _rgb(FOOD_COLOR), shift(food_diamond(self.game.food, DOT_SIZE))
            )

    def _draw_label(self, screen, text, left=None, right=None) -> None:
        surface = self._fonts["label"].render(text, True, (0, 0, 0))
        box = surface.get_rect().inflate(8, 8)
        if left is not None:
            box.topleft = (left, 15)
        else:
            box.topright = (right, 15)
        screen.fill(_rgb(LABEL_COLOR), box)
        pygame.draw.rect(screen, (0, 0, 0), box, 2)
        screen.blit(surface, surface.get_rect(center=box.center))

    def _draw_button(self, screen, rect, text) -> None:
        screen.fill(_rgb(BUTTON_COLOR), rect)
        pygame.draw.rect(screen, (0, 0, 0), rect, 1)
        surface = self._fonts["button"].render(text, True, (0, 0, 0))
        screen.blit(surface, surface.get_rect(center=rect.center))


def main(argv=None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="sandsnake", description="Play snake.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path.cwd(),
        help="directory holding background.JPG, music.mp3 and coffin.mp3",
    )
    args = parser.parse_args(argv)
    SnakeApp(HighScoreStore(), args.assets).run()
    return 0