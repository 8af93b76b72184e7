# main.py
import argparse
import math
import sys

from camera.camera import Camera
from core.color import Color
from core.matrix import IDENTITY
from core.transformations import scaling, translation, view_transform
from core.vector import Point, Vector
from geometry.cone import Cone
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import World
from materials.lighting import PointLight
from materials.material import Material
from materials.patterns import GradientPattern, RingPattern, StripePattern
from materials.presets import ColorPresets, DielectricPresets, MetalPresets, PatternPresets
from renderer.raytracer import Renderer

# Resolution scale and recursion limit for each render quality
QUALITY_LEVELS = {
    "draft": {"scale": 0.25, "bounces": 2},
    "balanced": {"scale": 0.5, "bounces": 4},
    "high_quality": {"scale": 1.0, "bounces": 6},
}


def create_default_scene():
    """Two nested spheres, seen from straight ahead."""
    world = World.default()
    view = view_transform(Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0))
    return world, view


def create_table_scene():
    """A patterned table with a glass cube and a glass ball inside a teal room."""
    print("\n=== Creating World ===")
    world = World()

    floor = Plane(material=Material(
        reflective=0.07,
        pattern=PatternPresets.checkerboard(ColorPresets.WHITE, ColorPresets.BLACK),
    ))
    world.add(floor)

    room = Cube(transform=IDENTITY.scaling(10, 10, 10).translation(0, 9, 0),
                material=Material(color=ColorPresets.TEAL))
    world.add(room)

    tabletop = Cylinder(-1.0, 1.0, closed=True,
                        transform=IDENTITY.scaling(3, 0.2, 3).translation(0, 3, 0),
                        material=Material(
                            color=ColorPresets.BROWN,
                            reflective=0.01,
                            pattern=PatternPresets.pinstripe(Color(0, 1, 0), ColorPresets.BROWN),
                        ))
    world.add(tabletop)
    print("Added tabletop at y=3 with radius 3.0")

    for x, z in ((-2.85, -2.85), (2.85, -2.85), (-2.85, 2.85), (2.85, 2.85)):
        leg = Cylinder(-1.0, 1.0, closed=True,
                       transform=IDENTITY.scaling(0.15, 1.5, 0.15).translation(x, 1.3, z),
                       material=Material(color=ColorPresets.BROWN))
        world.add(leg)
    print("Added 4 table legs")

    ball_material = DielectricPresets.glass()
    ball_material.diffuse = 0.001
    ball_material.reflective = 1.0
    ball = Sphere(transform=IDENTITY.scaling(0.5, 0.5, 0.5).translation(-3, 4, 0.6),
                  material=ball_material)
    world.add(ball)
    print("Added glass ball at (-3, 4, 0.6) with radius 0.5")

    glass_cube = Cube(transform=IDENTITY.scaling(0.5, 0.5, 0.5).translation(-2, 4, 1.9),
                      material=Material(diffuse=0.01, reflective=1.0, transparency=1.0,
                                        refractive_index=1.9))
    world.add(glass_cube)
    print("Added glass cube at (-2, 4, 1.9), IOR: 1.9")

    world.add(Cube(transform=IDENTITY.scaling(0.12, 1, 0.25).translation(0, 4, 0.8),
                   material=Material(color=Color(1, 0, 0))))
    world.add(Cube(transform=IDENTITY.scaling(0.2, 0.2, 2).translation(-0.3, 3.4, -0.3),
                   material=Material(color=Color(0, 0, 1))))

    world.add_light(PointLight(Point(-4, 9, 3), Color(1, 1, 1)))
    print(f"Added light source at (-4, 9, 3)")

    view = view_transform(Point(-6, 5, 3), Point(0, 1, 0), Vector(0, 1, 0))
    return world, view


def create_patterns_scene():
    """One object per pattern and primitive on a checkered floor, with a mirror behind."""
    print("\n=== Creating World ===")
    world = World()

    world.add(Plane(material=Material(pattern=PatternPresets.checkerboard(scale=1.0),
                                      specular=0.0)))
    world.add(Plane(transform=IDENTITY.rotation_x(math.pi / 2).translation(0, 0, 6),
                    material=MetalPresets.mirror()))

    stripes = StripePattern(ColorPresets.RED, ColorPresets.WHITE,
                            IDENTITY.scaling(0.25, 0.25, 0.25).rotation_z(math.pi / 4))
    world.add(Sphere(transform=translation(-2.5, 1, 0), material=Material(pattern=stripes)))

    gradient = GradientPattern(ColorPresets.BLUE, ColorPresets.YELLOW,
                               IDENTITY.scaling(2, 1, 1).translation(-1, 0, 0))
    world.add(Cube(transform=IDENTITY.scaling(0.8, 0.8, 0.8).rotation_y(math.pi / 6).translation(0, 0.8, 0),
                   material=Material(pattern=gradient)))

    rings = RingPattern(ColorPresets.GREEN, ColorPresets.WHITE, scaling(0.15, 0.15, 0.15))
    world.add(Cylinder(0.0, 1.5, closed=True, transform=translation(2.5, 0, 0),
                       material=Material(pattern=rings)))

    world.add(Cone(-1.0, 0.0, closed=True,
                   transform=IDENTITY.scaling(0.6, 1.2, 0.6).translation(1.2, 1.2, -2),
                   material=Material(color=ColorPresets.ORANGE, reflective=0.2)))

    world.add(Sphere(transform=IDENTITY.scaling(0.6, 0.6, 0.6).translation(-1, 0.6, -2.2),
                     material=DielectricPresets.water()))

    world.add_light(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
    world.add_light(PointLight(Point(5, 8, -6), Color(0.3, 0.3, 0.3)))
    print(f"Scene has {len(world.objects)} objects and {len(world.lights)} lights")

    view = view_transform(Point(0, 3, -8), Point(0, 1, 0), Vector(0, 1, 0))
    return world, view


SCENES = {
    "default": create_default_scene,
    "table": create_table_scene,
    "patterns": create_patterns_scene,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a scene with a recursive ray tracer and write a PPM image.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="table",
                        help="Scene to render")
    parser.add_argument("--width", type=int, default=400,
                        help="Image width in pixels before the quality scale is applied")
    parser.add_argument("--height", type=int, default=300,
                        help="Image height in pixels before the quality scale is applied")
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Field of view in degrees across the wider image side")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="balanced",
                        help="Render quality preset")
    parser.add_argument("--output", default="render.ppm",
                        help="Path of the PPM file to write")
    parser.add_argument("--preview", action="store_true",
                        help="Show the finished image in a window")
    parser.add_argument("--verbose", action="store_true",
                        help="Print render progress")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    quality = QUALITY_LEVELS[args.quality]
    width = max(1, int(args.width * quality["scale"]))
    height = max(1, int(args.height * quality["scale"]))

    world, view = SCENES[args.scene]()
    camera = Camera(width, height, math.radians(args.fov), view)

    print("\n=== Initializing Renderer ===")
    print(f"Scene: {args.scene}")
    print(f"Render resolution: {width}x{height}")
    print(f"Quality settings: {args.quality}")
    print(f"Max bounces: {quality['bounces']}")

    canvas = Renderer(camera, max_depth=quality["bounces"], verbose=args.verbose).render(world)

    try:
        canvas.save_ppm(args.output)
    except OSError as e:
        print(f"Error writing {args.output}: {e}", file=sys.stderr)
        return 1
    print(f"Saved image to {args.output}")

    if args.preview:
        from renderer.preview import show
        show(canvas, scale=max(1, round(1 / quality["scale"])))
    return 0


if __name__ == "__main__":
    sys.exit(main())
