import pytest
from PIL import Image

from lutro.image_loader import ImageLoadError, load_image


def _argb(r, g, b, a):
    return (a << 24) | (r << 16) | (g << 8) | b


def test_png_round_trip(tmp_path):
    colors = [(10, 20, 30, 40), (200, 100, 50, 255), (0, 0, 0, 0)]
    img = Image.new("RGBA", (3, 1))
    for x, c in enumerate(colors):
        img.putpixel((x, 0), c)
    path = tmp_path / "strip.png"
    img.save(path)

    bmp = load_image(path)
    assert (bmp.width, bmp.height) == (3, 1)
    assert [bmp.get(x, 0) for x in range(3)] == [_argb(*c) for c in colors]


def test_rgb_png_is_opaque(tmp_path):
    img = Image.new("RGB", (2, 2), (1, 2, 3))
    path = tmp_path / "rgb.png"
    img.save(path)
    bmp = load_image(path)
    assert bmp.get(1, 1) == _argb(1, 2, 3, 255)


def test_rows_in_order(tmp_path):
    img = Image.new("RGBA", (1, 2))
    img.putpixel((0, 0), (1, 1, 1, 255))
    img.putpixel((0, 1), (2, 2, 2, 255))
    path = tmp_path / "col.png"
    img.save(path)
    bmp = load_image(path)
    assert bmp.get(0, 0) == _argb(1, 1, 1, 255)
    assert bmp.get(0, 1) == _argb(2, 2, 2, 255)


def test_non_png_rejected(tmp_path):
    path = tmp_path / "image.bmp"
    Image.new("RGB", (2, 2)).save(path, format="BMP")
    with pytest.raises(ImageLoadError):
        load_image(path)


def test_missing_file(tmp_path):
    with pytest.raises(ImageLoadError):
        load_image(tmp_path / "absent.png")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.png"
    path.write_bytes(b"")
    with pytest.raises(ImageLoadError):
        load_image(path)


def test_garbage_bytes(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(ImageLoadError):
        load_image(path)