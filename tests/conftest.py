import numpy as np
import pytest

from pixeldraw import create_bitmap, fill, rgba


@pytest.fixture
def bitmap():
    """Fresh 8x6 transparent bitmap."""
    return create_bitmap(8, 6)


@pytest.fixture
def filled():
    """4x4 bitmap filled with opaque grey."""
    im = create_bitmap(4, 4)
    fill(im, rgba(100, 100, 100, 255))
    return im


@pytest.fixture
def plotted():
    """Set of (x, y) for every pixel with non-zero alpha."""
    def _plotted(im):
        alpha = im.to_ndarray()[:, :, 3]
        return {(int(x), int(y)) for y, x in np.argwhere(alpha > 0)}
    return _plotted
