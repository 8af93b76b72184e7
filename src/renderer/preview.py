# renderer/preview.py
import numpy as np
import pygame
from PIL import Image

from renderer.canvas import Canvas


def to_surface(canvas: Canvas, scale: int = 1) -> pygame.Surface:
    """Pygame surface of the canvas, enlarged `scale` times with nearest-neighbour filtering."""
    image = canvas.to_image()
    if scale != 1:
        image = image.resize((canvas.width * scale, canvas.height * scale), Image.Resampling.NEAREST)
    # surfarray expects (width, height, 3)
    pixels = np.asarray(image).swapaxes(0, 1)
    return pygame.surfarray.make_surface(pixels)


def show(canvas: Canvas, scale: int = 1, title: str = "Ray Tracer"):
    """Open a window with the rendered image until it is closed or ESC is pressed."""
    pygame.init()
    try:
        surface = to_surface(canvas, scale)
        screen = pygame.display.set_mode(surface.get_size())
        pygame.display.set_caption(title)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
