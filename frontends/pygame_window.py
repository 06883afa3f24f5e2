"""
Pygame Window - Event source backed by a real window

Opens a small frame and turns pygame input into bus events.
Same interface as ConsoleEventSource - Duck Typing!
"""
import pygame
from typing import Dict, List, Any, Optional

from patterns.config import WINDOW_WIDTH, WINDOW_HEIGHT, FPS, COLOR_BG, COLOR_TEXT
from patterns.events import (
    event_bus,
    EventBus,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MousePressedEvent,
    MouseReleasedEvent,
    MouseClickedEvent,
    MouseEnteredEvent,
    MouseExitedEvent,
    QuitEvent,
)


class PygameEventTranslator:
    """Converts pygame events into input events.

    A click is a press and release of the same button at the same
    position, so the translator remembers where each button went down.
    """

    def __init__(self):
        self._press_pos: Dict[int, tuple] = {}

    def translate(self, event: Any) -> List[Any]:
        """Return the input events for one pygame event (may be empty)."""
        if event.type == pygame.QUIT:
            return [QuitEvent()]

        if event.type == pygame.KEYDOWN:
            result = [KeyPressedEvent(key=event.key, name=pygame.key.name(event.key))]
            if event.key == pygame.K_ESCAPE:
                result.append(QuitEvent())
            return result

        if event.type == pygame.KEYUP:
            return [KeyReleasedEvent(key=event.key, name=pygame.key.name(event.key))]

        if event.type == pygame.TEXTINPUT:
            return [KeyTypedEvent(char=event.text)]

        if event.type == pygame.MOUSEBUTTONDOWN:
            pos = tuple(event.pos)
            self._press_pos[event.button] = pos
            return [MousePressedEvent(button=event.button, pos=pos)]

        if event.type == pygame.MOUSEBUTTONUP:
            pos = tuple(event.pos)
            result = [MouseReleasedEvent(button=event.button, pos=pos)]
            if self._press_pos.pop(event.button, None) == pos:
                result.append(MouseClickedEvent(button=event.button, pos=pos))
            return result

        if event.type == pygame.WINDOWENTER:
            return [MouseEnteredEvent()]

        if event.type == pygame.WINDOWLEAVE:
            return [MouseExitedEvent()]

        return []


class PygameEventSource:
    """Small pygame window that publishes keyboard and mouse events."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT,
                 caption: str = "Patterns", bus: Optional[EventBus] = None,
                 hint: str = ""):
        pygame.init()
        pygame.display.set_caption(caption)

        self.bus = bus if bus is not None else event_bus
        self.hint = hint
        self.running = True

        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 18)
        self.translator = PygameEventTranslator()

        self.bus.subscribe(QuitEvent, self._on_quit)

    def _on_quit(self, event: QuitEvent) -> None:
        self.running = False

    def poll(self) -> bool:
        """Publish pending input events and redraw. False once quit."""
        for raw in pygame.event.get():
            for event in self.translator.translate(raw):
                self.bus.publish(event)

        self._draw()
        self.clock.tick(FPS)
        return self.running

    def _draw(self) -> None:
        self.screen.fill(COLOR_BG)
        y = 10
        for line in self.hint.splitlines():
            surface = self.font.render(line, True, COLOR_TEXT)
            self.screen.blit(surface, (10, y))
            y += 20
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up pygame resources.

        Same interface as ConsoleEventSource - Duck Typing!
        """
        self.bus.unsubscribe(QuitEvent, self._on_quit)
        pygame.quit()
