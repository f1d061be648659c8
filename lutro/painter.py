"""Software rasteriser: lines, shapes, blits and bitmap fonts."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, replace
from typing import Iterator, Sequence

from .bitmap import Bitmap, Rect
from .image_loader import load_image

logger = logging.getLogger(__name__)

MAX_FONT_CHAR = 256
STACK_DEPTH = 64
ALPHA_MASK = 0xFF000000
DEFAULT_BACKGROUND = 0xFF000000
DEFAULT_FOREGROUND = 0xFFFFFFFF


class FontFlag(enum.IntFlag):
    NONE = 0
    FREETYPE = 1 << 1
    BOLD = 1 << 2
    ITALICS = 1 << 3
    STRIKE = 1 << 4


@dataclass
class Transform:
    """Translation, rotation and scale of the current drawing state."""

    tx: int = 0
    ty: int = 0
    r: float = 0.0
    sx: float = 1.0
    sy: float = 1.0


@dataclass
class Font:
    """A bitmap font: an atlas strip whose glyphs are split by separator columns."""

    atlas: Bitmap
    characters: str
    separators: list[int]
    flags: FontFlag = FontFlag.NONE
    pxsize: int = 0
    extraspacing: int = 0

    def _separator(self, pos: int) -> int:
        return self.separators[pos] if 0 <= pos < len(self.separators) else 0

    def _glyph(self, char: str) -> tuple[int, int] | None:
        pos = self.characters.find(char)
        if pos < 0:
            return None
        x = self._separator(pos) + 1
        return x, self._separator(pos + 1) - x


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _compose(s: int, d: int, a: int) -> int:
    return ((s * a) + (d * (256 - a))) >> 8


def _blend(src: int, dst: int) -> int:
    sa = src >> 24
    da = dst >> 24
    sr, sg, sb = (src >> 16) & 0xFF, (src >> 8) & 0xFF, src & 0xFF
    dr, dg, db = (dst >> 16) & 0xFF, (dst >> 8) & 0xFF, dst & 0xFF
    return (
        ((sa + da * (255 - sa)) << 24)
        | (_compose(sr, dr, sa) << 16)
        | (_compose(sg, dg, sa) << 8)
        | _compose(sb, db, sa)
    ) & 0xFFFFFFFF


def _closed_edges(
    points: Sequence[tuple[int, int]],
) -> Iterator[tuple[tuple[int, int], tuple[int, int]]]:
    pts = list(points)
    return zip(pts, pts[1:] + pts[:1])


class Painter:
    """Draws into a target bitmap with a foreground/background colour and clip."""

    def __init__(self, target: Bitmap, font: Font | None = None, *, compose: bool = True):
        self.target = target
        self.font = font
        self.compose = compose
        self.foreground = DEFAULT_FOREGROUND
        self.background = DEFAULT_BACKGROUND
        self.clip = Rect()
        self._stack: list[Transform] = [Transform()]
        self.reset()

    @property
    def trans(self) -> Transform:
        """The current transform."""
        return self._stack[-1]

    @property
    def stack_pos(self) -> int:
        """Depth of the transform stack, 0 when nothing has been pushed."""
        return len(self._stack) - 1

    def reset(self) -> None:
        self.background = DEFAULT_BACKGROUND
        self.foreground = DEFAULT_FOREGROUND
        self.clip = Rect(0, 0, self.target.width, self.target.height)
        self.origin(True)

    def clear(self) -> None:
        """Fill the whole target with the background colour."""
        data = self.target.data
        if not data:
            return
        size = self.target.height * self.target.pitch
        data[:size] = [self.background] * size

    def sanitize_clip(self) -> None:
        """Restrict the clip rectangle to the target's bounds."""
        self.clip = self.clip.intersect(Rect(0, 0, self.target.width, self.target.height))

    def _plot(self, x: int, y: int, color: int) -> None:
        t = self.target
        if 0 <= y < t.height and 0 <= x < t.width:
            t.data[y * t.pitch + x] = color

    def strike_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        if not self.target.data:
            return
        color = self.foreground
        if not color & ALPHA_MASK:
            return

        dx, sx = abs(x2 - x1), (1 if x1 < x2 else -1)
        dy, sy = abs(y2 - y1), (1 if y1 < y2 else -1)
        err = _cdiv(dx if dx > dy else -dy, 2)

        while True:
            self._plot(x1, y1, color)
            if x1 == x2 and y1 == y2:
                break
            e2 = err
            if e2 > -dx:
                err -= dy
                x1 += sx
            if e2 < dy:
                err += dx
                y1 += sy

    def strike_rect(self, rect: Rect) -> None:
        x1, y1 = rect.x, rect.y
        x2, y2 = x1 + rect.width, y1 + rect.height
        self.strike_line(x1, y1, x1, y2)
        self.strike_line(x1, y2, x2, y2)
        self.strike_line(x2, y2, x2, y1)
        self.strike_line(x2, y1, x1, y1)

    def fill_rect(self, rect: Rect) -> None:
        data = self.target.data
        if not data:
            return
        color = self.foreground
        drect = Rect(
            rect.x + self.trans.tx, rect.y + self.trans.ty, rect.width, rect.height
        ).intersect(self.clip)
        if drect.is_null() or not color & ALPHA_MASK:
            return

        pitch = self.target.pitch
        for y in range(drect.y, drect.y + drect.height):
            row = y * pitch
            for i in range(row + drect.x, row + drect.x + drect.width):
                data[i] = _blend(color, data[i]) if self.compose else color

    @staticmethod
    def _pairs(points: Sequence[int]) -> list[tuple[int, int]]:
        return list(zip(points[0::2], points[1::2]))

    def strike_poly(self, points: Sequence[int]) -> None:
        """Outline a closed polygon given as a flat x, y, x, y, ... sequence."""
        if len(points) % 2:
            return
        if not self.foreground & ALPHA_MASK:
            return
        for (x1, y1), (x2, y2) in _closed_edges(self._pairs(points)):
            self.strike_line(x1, y1, x2, y2)

    def _fill_span(self, yy: int, edges: list, color: int) -> None:
        xmin = self.target.width + 1
        xmax = -1
        for (x1, y1), (x2, y2) in edges:
            if (y1 > yy) != (y2 > yy):
                testx = x1 + _cdiv((x2 - x1) * (yy - y1), y2 - y1)
                xmin = min(xmin, testx)
                xmax = max(xmax, testx)
        for xx in range(xmin, xmax + 1):
            self._plot(xx, yy, color)

    def fill_poly(self, points: Sequence[int]) -> None:
        """Fill a convex polygon given as a flat x, y, x, y, ... sequence."""
        if not self.target.data:
            return
        if len(points) % 2:
            return
        color = self.foreground
        if not color & ALPHA_MASK:
            return

        ys = list(points[1::2])
        ymin = min([self.target.height + 1, *ys])
        ymax = max([-1, *ys])
        edges = list(_closed_edges(self._pairs(points)))
        for yy in range(ymin, ymax + 1):
            self._fill_span(yy, edges, color)

    @staticmethod
    def _ellipse_edges(x: int, y: int, radius_x: int, radius_y: int, segments: int) -> list:
        if segments <= 0:
            return []
        pts = [
            (
                x + int(radius_x * math.cos(2 * i * math.pi / segments)),
                y + int(radius_y * math.sin(2 * i * math.pi / segments)),
            )
            for i in range(segments + 1)
        ]
        return list(zip(pts, pts[1:]))

    def strike_ellipse(self, x: int, y: int, radius_x: int, radius_y: int, segments: int) -> None:
        for (x1, y1), (x2, y2) in self._ellipse_edges(x, y, radius_x, radius_y, segments):
            self.strike_line(x1, y1, x2, y2)

    def fill_ellipse(self, x: int, y: int, radius_x: int, radius_y: int, segments: int) -> None:
        if not self.target.data:
            return
        color = self.foreground
        if not color & ALPHA_MASK:
            return
        edges = self._ellipse_edges(x, y, radius_x, radius_y, segments)
        for yy in range(y - radius_y, y + radius_y + 1):
            self._fill_span(yy, edges, color)

    def draw(self, bmp: Bitmap, src_rect: Rect, dst_rect: Rect) -> None:
        """Blit part of a bitmap; scaling is not supported."""
        data = self.target.data
        if not data:
            return

        srect = replace(src_rect)
        drect = Rect(
            dst_rect.x + self.trans.tx,
            dst_rect.y + self.trans.ty,
            srect.width,
            srect.height,
        )

        if drect.x < 0:
            srect.x -= drect.x
            srect.width += drect.x
        if drect.y < 0:
            srect.y -= drect.y
            srect.height += drect.y

        drect = drect.intersect(self.clip)
        drect.width = min(drect.width, srect.width)
        drect.height = min(drect.height, srect.height)

        if drect.is_null() or srect.is_null():
            return

        dst_pitch = self.target.pitch
        src_pitch = bmp.pitch
        src = bmp.data
        for row in range(drect.height):
            d0 = (drect.y + row) * dst_pitch + drect.x
            s0 = (srect.y + row) * src_pitch + srect.x
            for col in range(drect.width):
                c = src[s0 + col]
                if self.compose:
                    data[d0 + col] = _blend(c, data[d0 + col])
                elif c & ALPHA_MASK:
                    data[d0 + col] = c

    def _require_font(self) -> Font:
        if self.font is None:
            raise ValueError("painter has no font")
        return self.font

    def print(self, x: int, y: int, text: str, limit: int = 0) -> None:
        """Render text with the bitmap font, wrapping past ``limit`` pixels when positive."""
        font = self._require_font()
        if font.flags & FontFlag.FREETYPE:
            return

        atlas = font.atlas
        drect = Rect(x, y, self.target.width, atlas.height)
        srect = Rect(0, 0, 0, atlas.height)

        for c in text:
            glyph = font._glyph(c)
            if glyph is None:
                continue
            srect.x, srect.width = glyph
            drect.width = srect.width

            self.draw(atlas, srect, drect)

            drect.x += srect.width + font.extraspacing

            if limit > 0 and drect.x - x > limit:
                drect.x = x
                drect.y += atlas.height

            if c == "\n":
                drect.x = x
                drect.y += atlas.height

    def text_width(self, text: str) -> int:
        """Width in pixels of text rendered on a single line."""
        font = self._require_font()
        if font.flags & FontFlag.FREETYPE:
            return 0
        width = 0
        for c in text:
            glyph = font._glyph(c)
            if glyph is not None:
                width += glyph[1] + font.extraspacing
        return width

    def push(self) -> bool:
        """Save a copy of the current transform; False when the stack is full."""
        if len(self._stack) >= STACK_DEPTH:
            return False
        self._stack.append(replace(self.trans))
        return True

    def pop(self) -> bool:
        """Restore the previous transform; False when nothing was pushed."""
        if len(self._stack) == 1:
            return False
        self._stack.pop()
        return True

    def origin(self, reset_stack: bool) -> None:
        if reset_stack:
            del self._stack[1:]
        self.scale(1, 1)
        self.rotate(0)
        self.translate(0, 0)

    def scale(self, x: float, y: float) -> None:
        self.trans.sx = x
        self.trans.sy = y

    def rotate(self, rad: float) -> None:
        self.trans.r = rad

    def translate(self, x: int, y: int) -> None:
        self.trans.tx += x
        self.trans.ty += y


def _prepare_characters(characters: str) -> str:
    characters = characters.split("\0", 1)[0]
    if len(characters) > MAX_FONT_CHAR:
        logger.warning("Font atlas is too big. It will be truncated !")
    return characters[:MAX_FONT_CHAR]


def _make_font(atlas: Bitmap, characters: str, flags: int) -> Font:
    if not atlas.data or atlas.width == 0:
        raise ValueError("font atlas has no pixels")
    separator = atlas.data[0]
    separators = [
        i for i, px in enumerate(atlas.data[: atlas.width]) if px == separator
    ][:MAX_FONT_CHAR]
    return Font(
        atlas=atlas,
        characters=_prepare_characters(characters),
        separators=separators,
        flags=FontFlag(flags) & ~FontFlag.FREETYPE,
        pxsize=0,
    )


def font_load_filename(filename, characters: str, flags: int = FontFlag.NONE) -> Font:
    """Load a bitmap font from a PNG atlas file."""
    return _make_font(load_image(filename), characters, flags)


def font_load_bitmap(atlas: Bitmap, characters: str, flags: int = FontFlag.NONE) -> Font:
    """Build a bitmap font from a copy of an atlas bitmap."""
    return _make_font(atlas.copy(), characters, flags)