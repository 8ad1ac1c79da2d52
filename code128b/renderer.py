"""Raster rendering of Code128 module sequences.

The symbol is centred horizontally on the canvas and stretched to the
canvas height minus a fixed margin. An optional caption is composed on its
own bitmap and scaled into the space under the data characters.
"""
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from code128b.errors import RenderBackendError
from code128b.symbols import MODULE_LEN

logger = logging.getLogger(__name__)

Color = Union[str, Tuple[int, ...]]

BORDER_LEFT = 0   # left border on the image before the barcode sequence starts
BORDER_RIGHT = 0
BAR_MARGIN = 5    # top and bottom margin of the bars
CAPTION_PADDING = 5

# Bold faces tried in order before falling back to Pillow's bundled font.
CAPTION_FONTS = [
    "arialbd.ttf",
    "Arial Bold.ttf",
    "DejaVuSans-Bold.ttf",
    "LiberationSans-Bold.ttf",
    "FreeSansBold.ttf",
]


@dataclass(frozen=True)
class RenderGeometry:
    module_width: int
    image_width: int
    image_height: int
    first_module_pos: int
    last_module_pos: int


def resolve_geometry(sequence: Sequence[str], image_width: int, image_height: int, module_width: int) -> RenderGeometry:
    """Work out module width, canvas size and the horizontal extent of the symbol.

    A ``module_width`` of zero or less means "auto": the widest module that
    fits ``image_width``. An explicit width overrides ``image_width`` so the
    canvas fits the symbol exactly. Either way the canvas grows when the
    symbol would not fit.
    """
    count = len(sequence)
    borders = BORDER_LEFT + BORDER_RIGHT

    if module_width <= 0:
        module_width = max(1, (image_width - borders) // max(1, count))
    else:
        module_width = max(1, module_width)
        image_width = module_width * count

    symbol_width = module_width * count
    if borders + symbol_width > image_width:
        image_width = borders + symbol_width

    first = BORDER_LEFT + (image_width - borders - symbol_width) // 2
    return RenderGeometry(
        module_width=module_width,
        image_width=image_width,
        image_height=max(1, image_height),
        first_module_pos=first,
        last_module_pos=first + symbol_width,
    )


def load_caption_font(font_size: float) -> Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]:
    size = max(1.0, float(font_size))
    for name in CAPTION_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug("no bold TrueType face found, using Pillow default font")
    try:
        return ImageFont.load_default(size)
    except OSError as e:
        raise RenderBackendError(f"Could not load a caption font: {e}") from e


def _image_mode(*colors: Color) -> str:
    if any(isinstance(c, tuple) and len(c) == 4 for c in colors):
        return "RGBA"
    return "RGB"


def _new_image(mode: str, size: Tuple[int, int], color: Color) -> Image.Image:
    try:
        return Image.new(mode, size, color)
    except (OSError, MemoryError) as e:
        raise RenderBackendError(f"Could not allocate a {size[0]}x{size[1]} image: {e}") from e


def _draw_caption(image: Image.Image, geometry: RenderGeometry, text: str, font_size: float,
                  foreground: Color, background: Color) -> None:
    font = load_caption_font(font_size)
    _, _, text_w, text_h = font.getbbox(text)
    label_w = max(1, int(text_w))
    label_h = max(1, int(text_h)) + 2 * CAPTION_PADDING

    # The label gets its own background so it reads cleanly over the bars.
    label = _new_image(image.mode, (label_w, label_h), background)
    ImageDraw.Draw(label).text((0, CAPTION_PADDING), text, fill=foreground, font=font)

    inset = geometry.module_width * MODULE_LEN
    x = geometry.first_module_pos + inset
    width = max(0, geometry.last_module_pos - inset - x)
    y = geometry.image_height - label_h
    if width == 0:
        return
    image.paste(label.resize((width, label_h), Image.BICUBIC), (x, y))


def render(
    sequence: Sequence[str],
    image_width: int,
    image_height: int,
    module_width: int,
    font_size: float,
    foreground: Color,
    background: Color,
    caption_text: str,
    suppress_caption: bool = False,
    quiet_zone_applied: bool = False,
) -> Image.Image:
    """Draw a module sequence onto a new image and return it.

    The caption is inset by one symbol width on each side whether or not
    ``sequence`` already carries a quiet zone.
    """
    geometry = resolve_geometry(sequence, image_width, image_height, module_width)
    logger.debug("render geometry: %s (quiet zone: %s)", geometry, quiet_zone_applied)

    image = _new_image(_image_mode(foreground, background), (geometry.image_width, geometry.image_height), background)
    draw = ImageDraw.Draw(image)

    bar_height = max(0, geometry.image_height - 2 * BAR_MARGIN)
    x = geometry.first_module_pos
    for module in sequence:
        if module == "1" and bar_height > 0:
            draw.rectangle(
                (x, BAR_MARGIN, x + geometry.module_width - 1, BAR_MARGIN + bar_height - 1),
                fill=foreground,
            )
        x += geometry.module_width

    if not suppress_caption and caption_text:
        _draw_caption(image, geometry, caption_text, font_size, foreground, background)

    return image
