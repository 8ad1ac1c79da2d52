from pathlib import Path
from typing import Union

from PIL import Image

from code128b.encoder import encode
from code128b.errors import RenderBackendError
from code128b.renderer import Color, render


def generate_barcode_image(
    image_width: int,
    image_height: int,
    font_size: float,
    foreground: Color,
    background: Color,
    text: str,
    module_width: int = 0,
    suppress_caption: bool = False,
    add_quiet_zone: bool = False,
) -> Image.Image:
    """Create an image holding the Code128 B barcode of ``text``.

    The barcode is centred and fills as much of ``image_width`` as whole
    modules allow. ``module_width`` <= 0 picks the module width
    automatically; a positive value fixes it and sizes the image to fit.
    """
    sequence = encode(text, add_quiet_zone=add_quiet_zone)
    return render(
        sequence,
        image_width,
        image_height,
        module_width,
        font_size,
        foreground,
        background,
        text,
        suppress_caption=suppress_caption,
        quiet_zone_applied=add_quiet_zone,
    )


def save_barcode(image: Image.Image, path: Union[str, Path], image_format: str = "PNG") -> Path:
    # Saved in the given format whatever the file suffix says.
    out = Path(path)
    try:
        image.save(out, format=image_format)
    except KeyError as e:
        raise RenderBackendError(f"Unsupported image format: {image_format}") from e
    return out
