"""Rendering subpackage.

Turns immutable ``Grid`` generations into raster diagnostics:

* :func:`grid_to_array` samples the tracked region (plus an optional margin
    of background cells) into a NumPy boolean array.
* :func:`render_grid_image` scales that array into a Pillow image.

See :mod:`grid_enhance.renderer.image` for details. Text rendering lives in
:mod:`grid_enhance.utils.render`.
"""

from .image import GridRenderer, grid_to_array, render_grid_image

__all__ = ["GridRenderer", "grid_to_array", "render_grid_image"]
