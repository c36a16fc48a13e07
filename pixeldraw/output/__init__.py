from .png_writer import write_png
