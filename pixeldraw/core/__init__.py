# Bitmap data model, pixel access, compositing and rasterization
