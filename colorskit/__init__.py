from .color import ColorUtils, DegenerateLuminanceCorrection, UnconvertibleColor, \
        to_color, to_hsba, to_rgba
from .colorlib import Color, HSBA, RGBA
from .palette import AnalogousPalette, HueDirection, PaletteConfig, PaletteKind, \
        SplitComplementaryPalette, TetradicPalette, all_palettes, palette_array, \
        palette_colors
from .version import __version__
