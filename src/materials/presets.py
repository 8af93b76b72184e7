# materials/presets.py
from core.color import Color
from core.transformations import scaling
from materials.material import Material
from materials.patterns import CheckerPattern, StripePattern


class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)
    BROWN = Color(0.4, 0.2, 0.0)

    # Cool colors
    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    TEAL = Color(0.0, 0.3, 0.3)

    # Neutral colors
    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Color) -> Material:
        """Create a matte material with the given color."""
        return Material(color=color, specular=0.0)


class DielectricPresets:
    """Transparent materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Material:
        return Material(transparency=1.0, refractive_index=1.5)

    @staticmethod
    def water() -> Material:
        return Material(transparency=1.0, refractive_index=1.333)

    @staticmethod
    def diamond() -> Material:
        return Material(transparency=1.0, refractive_index=2.417)

    @staticmethod
    def air() -> Material:
        return Material(transparency=1.0, refractive_index=1.00029)


class MetalPresets:
    """Mirror-like materials."""

    @staticmethod
    def mirror() -> Material:
        return Material(color=Color(0.1, 0.1, 0.1), diffuse=0.1, reflective=1.0, shininess=300.0)

    @staticmethod
    def chrome() -> Material:
        return Material(color=Color(0.9, 0.9, 0.9), diffuse=0.3, reflective=0.7, shininess=300.0)


class PatternPresets:
    """Predefined pattern presets."""

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None, scale: float = 1.0) -> CheckerPattern:
        """Create a checkerboard with default or custom colors, `scale` units per square."""
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        return CheckerPattern(color1, color2, scaling(scale, scale, scale))

    @staticmethod
    def pinstripe(color1: Color, color2: Color, width: float = 0.2) -> StripePattern:
        return StripePattern(color1, color2, scaling(width, width, width))
