# svg.py
# simple SVG writer for traced contours + corner marks

from typing import Iterable, Sequence

from .contours import Contour
from .grid import Color, Coordinate


def _hex(c: Color) -> str:
    return "#%02x%02x%02x" % tuple(c)


def path_d(points, closed=True):
    if not points: return ""
    # pixel centres
    d=f"M {points[0][0]+0.5} {points[0][1]+0.5}"
    for x,y in points[1:]: d+=f" L {x+0.5} {y+0.5}"
    return d+" Z" if closed else d


def svg_text(contours: Iterable[Contour], corners: Iterable[Coordinate], size,
             palette: Sequence[Color], corner_color: Color = (255, 0, 0)) -> str:
    w,h=size
    parts=[f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">','<g fill="none" stroke-width="1">']
    for i, c in enumerate(contours):
        dash = '' if c.closed else ' stroke-dasharray="2,1"'
        parts.append(f'<path d="{path_d(c.points, c.closed)}" stroke="{_hex(palette[i % len(palette)])}"{dash} />')
    parts.append('</g>')
    parts.append(f'<g fill="none" stroke="{_hex(corner_color)}" stroke-width="1">')
    for x,y in corners:
        parts.append(f'<circle cx="{x+0.5}" cy="{y+0.5}" r="2" />')
    parts.append('</g></svg>')
    return "\n".join(parts)


def write_svg(contours, corners, size, out_path, palette, corner_color=(255, 0, 0)):
    with open(out_path,'w') as f: f.write(svg_text(contours, corners, size, palette, corner_color))
