# mazegrid/app/viewer.py
#!/usr/bin/env python3
"""
Maze Viewer — pygame front end for the maze model

- Keyboard:
    [G]/[K]      -> generate (depth-first / Kruskal)
    [B]/[A]      -> solve (BFS / A*)
    [C]          -> clear search marks
    [SPACE]      -> skip the queued animation
    [1]..[4]     -> paint tile (wall / passage / begin / end)
    [+]/[-]      -> animation speed (cell updates per second)
    [Q]/[ESC]    -> quit
- Mouse: press and drag on the grid to paint the selected tile.

The viewer is a model listener. Cell updates arrive synchronously while a
generator or solver runs; they are queued here and replayed at the chosen
speed, so the algorithms themselves never pause.
"""

import logging
import sys
import time
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

import pygame

from mazegrid.app.controller import MazeController
from mazegrid.app.settings import Settings, resolve_settings
from mazegrid.core.model import Model
from mazegrid.core.types import Matrix, State

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

STATE_COLORS: Dict[State, Tuple[int, int, int]] = {
    State.WALL:           ( 30,  33,  40),
    State.UNVISITED_CELL: (200, 200, 200),
    State.BEGIN:          ( 70, 130, 180),
    State.END:            (220,  50,  47),
    State.VISITED:        (214, 120, 170),
    State.FRONTIER:       (110, 180, 255),
    State.PATH:           (  0, 220, 180),
}

TILE_KEYS = {
    pygame.K_1: "wall",
    pygame.K_2: "unvisited",
    pygame.K_3: "begin",
    pygame.K_4: "end",
}

# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: Settings):
        pygame.init()

        self.model = Model()
        self.controller = MazeController(settings.size, self.model,
                                         generator=settings.generator,
                                         solver=settings.solver,
                                         seed=settings.seed)
        self.side = self.controller.size

        # what is on screen; lags behind the model while the queue drains
        self.cells: Matrix = []
        self.pending: Deque[Tuple[int, int, State]] = deque()
        self.model.add_listener(self)

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self._auto_cell_size()
        win_w = GRID_MARGIN*2 + self.side * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + self.side * self.cell_size, 560)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Maze — generate & solve")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.clock = pygame.time.Clock()
        self.steps_per_sec = settings.steps_per_sec
        self._budget = 0.0
        self._last_t = time.time()

        self.controller.generate()

    # ---------- model listener ----------
    def on_reset(self, snapshot: Matrix) -> None:
        self.pending.clear()
        self.cells = snapshot

    def on_update(self, x: int, y: int, state: State) -> None:
        self.pending.append((x, y, state))

    # ---------- layout ----------
    def _auto_cell_size(self) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(6, min(CELL_SIZE_DEFAULT, target_h // max(1, self.side)))

    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = max(4, min(avail_w // self.side, avail_h // self.side))

        grid_px = self.side * self.cell_size
        top_y = max(0, (win_h - grid_px - 2 * GRID_MARGIN) // 2)
        self._grid_origin = (GRID_MARGIN, top_y + GRID_MARGIN)
        self._right_band = pygame.Rect(GRID_MARGIN*2 + grid_px, 0,
                                       max(PANEL_W, win_w - GRID_MARGIN*2 - grid_px), win_h)
        self._build_buttons()

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        ox, oy = self._grid_origin
        x = (pos[0] - ox) // self.cell_size
        y = (pos[1] - oy) // self.cell_size
        if 0 <= x < self.side and 0 <= y < self.side:
            return x, y
        return None

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            self._drain_pending()
            self._draw()
            self.clock.tick(60)

    def _drain_pending(self):
        now = time.time()
        self._budget += (now - self._last_t) * self.steps_per_sec
        self._last_t = now
        if not self.pending:
            self._budget = 0.0
            return
        while self.pending and self._budget >= 1.0:
            x, y, state = self.pending.popleft()
            self.cells[x][y] = state
            self._budget -= 1.0

    def _skip_animation(self):
        while self.pending:
            x, y, state = self.pending.popleft()
            self.cells[x][y] = state

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_g:
                    self._generate("dfs")
                elif e.key == pygame.K_k:
                    self._generate("kruskal")
                elif e.key == pygame.K_b:
                    self._solve("bfs")
                elif e.key == pygame.K_a:
                    self._solve("astar")
                elif e.key == pygame.K_c:
                    self._clear()
                elif e.key == pygame.K_SPACE:
                    self._skip_animation()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(2.0)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(0.5)
                elif e.key in TILE_KEYS:
                    self.controller.select_state(TILE_KEYS[e.key])
                    self._refresh_active_states()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                handled = False
                for b in self._buttons:
                    handled = b.handle_mouse(e) or handled
                if handled:
                    continue
                cell = self._cell_at(e.pos)
                if cell is None:
                    continue
                if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    self.controller.press(*cell)
                elif e.type == pygame.MOUSEMOTION:
                    self.controller.drag_over(*cell)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self.controller.release()

    def _generate(self, label: str):
        self.controller.generate(label)
        self._refresh_active_states()

    def _solve(self, label: str):
        self._skip_animation()
        result = self.controller.solve(label)
        if result is not None and not result.found:
            logger.info("No path between begin and end")
        self._refresh_active_states()

    def _clear(self):
        self._skip_animation()
        self.controller.clear()

    def _bump_speed(self, factor: float):
        self.steps_per_sec = int(max(1, min(20000, self.steps_per_sec * factor)))

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        for x, column in enumerate(self.cells):
            for y, state in enumerate(column):
                rect = pygame.Rect(ox + x*cs, oy + y*cs, cs, cs)
                pygame.draw.rect(self.screen, STATE_COLORS[state], rect)
                if state in (State.BEGIN, State.END) and cs >= 10:
                    txt = self.font_small.render("S" if state == State.BEGIN else "G", True, WHITE)
                    self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 200  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8
        half = (w - 8) // 2

        def pair(left, right):
            nonlocal y
            self._buttons.append(UIButton(left[0], pygame.Rect(x, y, half, h), left[1],
                                          togglable=True))
            self._buttons.append(UIButton(right[0], pygame.Rect(x + half + 8, y, half, h), right[1],
                                          togglable=True))
            y += h + gap
            return self._buttons[-2], self._buttons[-1]

        self.btn_gen_dfs, self.btn_gen_kruskal = pair(
            ("Gen: DFS", lambda: self._generate("dfs")),
            ("Gen: Kruskal", lambda: self._generate("kruskal")))
        self.btn_solve_bfs, self.btn_solve_astar = pair(
            ("Solve: BFS", lambda: self._solve("bfs")),
            ("Solve: A*", lambda: self._solve("astar")))
        self.btn_tile_wall, self.btn_tile_pass = pair(
            ("Tile: Wall", lambda: self._select_tile("wall")),
            ("Tile: Passage", lambda: self._select_tile("unvisited")))
        self.btn_tile_begin, self.btn_tile_end = pair(
            ("Tile: Begin", lambda: self._select_tile("begin")),
            ("Tile: End", lambda: self._select_tile("end")))
        pair(("Speed −", lambda: self._bump_speed(0.5)),
             ("Speed +", lambda: self._bump_speed(2.0)))
        pair(("Clear", self._clear),
             ("Skip anim", self._skip_animation))

        self._refresh_active_states()

    def _select_tile(self, label: str):
        self.controller.select_state(label)
        self._refresh_active_states()

    def _refresh_active_states(self):
        c = self.controller
        self.btn_gen_dfs.set_active(c.generator_label == "dfs")
        self.btn_gen_kruskal.set_active(c.generator_label == "kruskal")
        self.btn_solve_bfs.set_active(c.solver_label == "bfs")
        self.btn_solve_astar.set_active(c.solver_label == "astar")
        self.btn_tile_wall.set_active(c.selected_state == State.WALL)
        self.btn_tile_pass.set_active(c.selected_state == State.UNVISITED_CELL)
        self.btn_tile_begin.set_active(c.selected_state == State.BEGIN)
        self.btn_tile_end.set_active(c.selected_state == State.END)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 180
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        result = self.controller.last_result
        m = result.metrics if result else {}
        line(f"Algo: {m.get('algo', '-')}")
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        if result is not None:
            line(f"Path Len: {m.get('path_len', 0)}" if result.found else "No path")
        line(f"Speed: {self.steps_per_sec} cells/s  Queue: {len(self.pending)}")

        for b in self._buttons:
            b.draw(self.screen, self.font)

# ---------- main ----------
def main():
    settings = resolve_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    try:
        viewer = Viewer(settings)
    except pygame.error as ex:
        logger.error("Failed to start the viewer: %s", ex)
        sys.exit(1)
    viewer.run()

if __name__ == "__main__":
    main()
