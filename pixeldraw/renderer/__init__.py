from .pillow_renderer import export_as_png, to_image
