"""The application: owns the window, the current scene and moves between scenes."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Optional, Union

import pygame

from numples.board import Board
from numples.consts import BACKGROUND_COLOR, RESOLUTION, TITLE
from numples.controls import QUIT, KeyPress, is_quit
from numples.level import Level
from numples.scenes import (
    GameOverScene,
    GameplayScene,
    PauseScene,
    TitleScene,
    Transition,
)
from numples.states import EventKind, GameState, NumplesEvent

_WINDOW_NAME = "Kodumaro-numples"
_FPS = 60
_CTRL_KEYS = (pygame.K_LCTRL, pygame.K_RCTRL)

Scene = Union[TitleScene, GameplayScene, PauseScene, GameOverScene]


class NumplesApp:
    """Runs the game: routes input to the current scene and applies transitions."""

    def __init__(
        self, board_factory: Callable[[Level], Board] = Board.from_level
    ) -> None:
        self.board_factory = board_factory
        self.state = GameState.default()
        self.scene: Optional[Scene] = None
        self.gameplay: Optional[GameplayScene] = None
        self.level: Optional[Level] = None
        self.ctrl = False
        self.running = True

    def dispatch(self, event: Union[pygame.event.Event, NumplesEvent]) -> None:
        """Handle one input event, or one game event raised elsewhere."""
        if isinstance(event, NumplesEvent):
            self._apply(event)
            return
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            pressed = event.type == pygame.KEYDOWN
            key = getattr(event, "key", None)
            if key in _CTRL_KEYS:
                self.ctrl = pressed
            elif key == pygame.K_q:
                ctrl = self.ctrl or bool(getattr(event, "mod", 0) & pygame.KMOD_CTRL)
                if is_quit(KeyPress(key="q", pressed=pressed), ctrl):
                    self.running = False
                    return
        if self.scene is not None:
            self._apply(self.scene.handle_event(event))

    def switch(self, state: GameState) -> None:
        """Enter a new state, building or reusing the scene it shows."""
        if state is GameState.LOADING:
            self.scene = None
        elif state is GameState.TITLE:
            self.gameplay = None
            self.scene = TitleScene()
        elif state is GameState.PLAYING:
            if self.gameplay is None:
                if self.level is None:
                    raise ValueError("no level chosen")
                self.gameplay = GameplayScene(self.level, self.board_factory(self.level))
            self.gameplay.paused = False
            self.scene = self.gameplay
        elif state is GameState.PAUSED:
            if self.gameplay is None:
                raise ValueError("no game to pause")
            self.gameplay.paused = True
            self.scene = PauseScene()
        elif state is GameState.GAME_OVER:
            if self.gameplay is None:
                raise ValueError("no game to finish")
            self.scene = GameOverScene(self.gameplay)
        self.state = state

    def step(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        if self.state is GameState.LOADING:
            self.switch(GameState.TITLE)
            return
        if self.scene is not None:
            self._apply(self.scene.update(dt))

    def run(self) -> None:
        """Open the window and play until it is closed or the player quits."""
        pygame.init()
        try:
            width, height = RESOLUTION
            screen = pygame.display.set_mode((int(width), int(height)))
            pygame.display.set_caption(TITLE, _WINDOW_NAME)
            ticker = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.dispatch(event)
                    if not self.running:
                        break
                if not self.running:
                    break
                self.step(ticker.tick(_FPS) / 1000.0)
                if self.scene is None:
                    screen.fill(BACKGROUND_COLOR)
                else:
                    self.scene.draw(screen)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _apply(self, transition: Transition) -> None:
        if transition is None:
            return
        if isinstance(transition, GameState):
            self.switch(transition)
        elif isinstance(transition, NumplesEvent):
            self._handle_game_event(transition)
        elif transition == QUIT:
            self.running = False

    def _handle_game_event(self, event: NumplesEvent) -> None:
        if event.kind is EventKind.START_GAME:
            self.level = event.level
            self.gameplay = None
            self.switch(GameState.PLAYING)
        elif event.kind is EventKind.ABORT_GAME:
            self.switch(GameState.TITLE)
        elif event.kind is EventKind.PAUSE_GAME:
            self.switch(GameState.PAUSED)
        elif event.kind is EventKind.RENDER_BOARD:
            if self.gameplay is not None and self.gameplay.board.is_done():
                self.switch(GameState.GAME_OVER)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="numples", description="Play sudoku.")
    parser.parse_args(argv)
    NumplesApp().run()
    return 0