# renderer/raytracer.py
import time

from camera.camera import Camera
from geometry.world import MAX_BOUNCES, World
from renderer.canvas import Canvas


class Renderer:
    """
    Whitted-style renderer: one primary ray through the center of every
    camera pixel, shaded by World.color_at with a fixed bounce limit.
    """
    def __init__(self, camera: Camera, max_depth: int = MAX_BOUNCES, verbose: bool = False):
        self.camera = camera
        self.max_depth = max_depth
        self.verbose = verbose

    def render(self, world: World) -> Canvas:
        camera = self.camera
        image = Canvas(camera.hsize, camera.vsize)

        if self.verbose:
            print("\n=== Rendering ===")
            print(f"Resolution: {camera.hsize}x{camera.vsize}")
            print(f"Objects: {len(world.objects)}, lights: {len(world.lights)}")
            print(f"Max bounces: {self.max_depth}")
        start = time.perf_counter()

        for y in range(camera.vsize):
            for x in range(camera.hsize):
                ray = camera.ray_for_pixel(x, y)
                image.write(x, y, world.color_at(ray, self.max_depth))
            if self.verbose and (y + 1) % max(1, camera.vsize // 10) == 0:
                print(f"  row {y + 1}/{camera.vsize}")

        if self.verbose:
            print(f"Render finished in {time.perf_counter() - start:.2f}s")
        return image


def render(camera: Camera, world: World, max_depth: int = MAX_BOUNCES) -> Canvas:
    return Renderer(camera, max_depth).render(world)
