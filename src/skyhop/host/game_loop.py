"""
game_loop.py
------------
Pygame host around the simulation engine.

Responsibilities
----------------
- Open the window and translate pygame events into queued commands.
- Drive SimulationEngine.advance() at a fixed tick rate from an
  accumulator, draining the InputQueue once per tick.
- Dispatch each tick's events to sound cues and session statistics.
- Draw the latest snapshot with flat shapes.

The host only reads engine snapshots; the InputQueue is its only way in.
"""

import pygame

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.core.runtime.game_settings import Display, Palette, Physics
from skyhop.core.runtime.session_stats import get_session_stats
from skyhop.core.services.event_manager import get_events
from skyhop.engine.config import EngineConfig
from skyhop.engine.input_queue import InputQueue
from skyhop.engine.simulation import SimulationEngine
from skyhop.engine.state import Phase
from skyhop.host.sound_cues import SoundCues


JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
RESET_KEYS = (pygame.K_r, pygame.K_RETURN)


class GameLoop:
    """Runtime controller that owns the window, the ticker and the current snapshot."""

    def __init__(self, config: EngineConfig = None, seed=None, audio=True):
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()

        self.config = config or EngineConfig()
        self.engine = SimulationEngine(self.config, seed=seed)
        self.inputs = InputQueue()
        self.state = self.engine.new_game()

        # -------------------------------------------------------
        # Window
        # -------------------------------------------------------
        size = (int(self.config.playfield_width), int(self.config.playfield_height))
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(Display.CAPTION)
        self.font = pygame.font.Font(None, 32)
        DebugLogger.init_entry("Pygame")

        # -------------------------------------------------------
        # Event consumers
        # -------------------------------------------------------
        self.events = get_events()
        self.stats = get_session_stats()
        self.stats.bind(self.events)
        if audio:
            SoundCues().bind(self.events)

        self.clock = pygame.time.Clock()
        self.tick_seconds = 1.0 / self.config.tick_rate
        self.accumulator = 0.0
        self.running = True
        DebugLogger.init_entry("GameLoop Runtime")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            self.accumulator += min(frame_time, Physics.MAX_FRAME_TIME)

            self._handle_events()

            while self.accumulator >= self.tick_seconds:
                self.step()
                self.accumulator -= self.tick_seconds

            self._draw()

        self.events.clear_all()
        pygame.quit()
        DebugLogger.system("Pygame terminated", category="host")

    def step(self):
        """Advance the engine by one tick using everything queued since the last one."""
        tick_input = self.inputs.drain()
        if tick_input.reset:
            self.stats.reset()

        result = self.engine.advance(self.state, tick_input)
        self.state = result.state
        self.events.dispatch_all(result.events)

        if self.state.is_running:
            self.stats.add_tick()
        return result

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        """Route one pygame event into the input queue."""
        if event.type == pygame.QUIT:
            self.running = False
            DebugLogger.action("Quit signal received", category="host")

        elif event.type == pygame.KEYDOWN:
            if event.key in JUMP_KEYS:
                self.inputs.jump()
            elif event.key in RESET_KEYS and self.state.is_over:
                self.inputs.reset()
            elif event.key == pygame.K_ESCAPE:
                self.running = False

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.state.is_over:
                self.inputs.reset()
            else:
                self.inputs.jump()

        elif event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            self.inputs.resize(event.w, event.h)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        state = self.state
        cfg = self.config
        screen = self.screen

        screen.fill(Palette.SKY)

        for cloud in state.decorations:
            rect = pygame.Rect(int(cloud.x), int(cloud.y), int(cloud.size), int(cloud.size * 0.6))
            pygame.draw.ellipse(screen, Palette.CLOUD, rect)

        height = int(state.playfield_height)
        width = int(cfg.obstacle_width)
        for obstacle in state.obstacles:
            x = int(obstacle.x)
            top = pygame.Rect(x, 0, width, int(obstacle.gap_top))
            bottom = pygame.Rect(x, int(obstacle.gap_bottom), width, height - int(obstacle.gap_bottom))
            for rect in (top, bottom):
                pygame.draw.rect(screen, Palette.OBSTACLE, rect)
                pygame.draw.rect(screen, Palette.OBSTACLE_EDGE, rect, 2)

        avatar = pygame.Rect(int(cfg.avatar_x), int(state.avatar_y),
                             int(cfg.avatar_width), int(cfg.avatar_height))
        pygame.draw.ellipse(screen, Palette.AVATAR, avatar)

        hud = f"Score {state.score}   Lives {state.lives}   Level {state.level}"
        screen.blit(self.font.render(hud, True, Palette.TEXT), (10, 10))

        if state.phase is Phase.NOT_STARTED:
            self._draw_banner("Click or press Space to start")
        elif state.is_over:
            self._draw_banner(f"Game over! Score {state.score}  Best {self.stats.best_score}",
                              "Press R or click to play again")

        pygame.display.flip()

    def _draw_banner(self, *lines):
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill(Palette.OVERLAY)
        self.screen.blit(overlay, (0, 0))

        center_x = self.screen.get_width() // 2
        y = self.screen.get_height() // 2 - 20 * len(lines)
        for line in lines:
            text = self.font.render(line, True, Palette.TEXT)
            self.screen.blit(text, text.get_rect(center=(center_x, y)))
            y += 40
