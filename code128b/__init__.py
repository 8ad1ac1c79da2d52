"""Code128 Subset B barcode images."""

__version__ = "1.0.0"

from code128b.barcode import generate_barcode_image, save_barcode
from code128b.encoder import checksum_index, encode
from code128b.errors import Code128Error, ColorError, RenderBackendError
from code128b.renderer import RenderGeometry, render, resolve_geometry
from code128b.symbols import SYMBOL_TABLE, lookup_index_by_character, resolve_index

__all__ = [
    "Code128Error",
    "ColorError",
    "RenderBackendError",
    "RenderGeometry",
    "SYMBOL_TABLE",
    "checksum_index",
    "encode",
    "generate_barcode_image",
    "lookup_index_by_character",
    "render",
    "resolve_geometry",
    "resolve_index",
    "save_barcode",
]
