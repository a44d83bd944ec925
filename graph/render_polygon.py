#!/usr/bin/env python3
"""정다각형을 캔버스에 그리고 이미지 파일로 저장합니다.

캔버스는 OpenCV 관례대로 BGR 순서의 (height, width, 3) uint8 배열입니다.
색 이름은 RGB로 정의하고 그릴 때 BGR로 변환합니다.
"""

import logging
import math
import os

import cv2
import numpy as np

from regular_polygon import (
    DEFAULT_OFFSET_DEG,
    InvalidInputError,
    generate_polygon_points,
    validate_offset,
    validate_sides,
    validate_size,
    vertex_angles,
)

logger = logging.getLogger(__name__)

MIN_CANVAS_SIZE = 1000
CANVAS_MARGIN = 200  # 외접원 바깥 여백 (양쪽 합)
DEFAULT_BACKGROUND = (220, 220, 220)
DEFAULT_THICKNESS = 2
MAX_THICKNESS = 32767  # cv2 MAX_THICKNESS
MAX_CANVAS_SIZE = 10000

CIRCLE_COLOR = 'blue'
MARKER_COLOR = 'red'
LABEL_COLOR = 'black'

COLORS = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'blue': (0, 0, 255),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'orange': (255, 165, 0),
    'purple': (128, 0, 128),
    'brown': (150, 75, 0),
    'pink': (255, 192, 203),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
}

IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.bmp')


def resolve_color(name):
    """색 이름(또는 #rrggbb, #rgb)을 RGB 튜플로 변환합니다."""
    if not isinstance(name, str):
        raise InvalidInputError(f'color must be a name, got {name!r}')
    key = name.lower().strip()

    if key.startswith('#'):
        hex_color = key[1:]
        try:
            if len(hex_color) == 6:
                return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))
            if len(hex_color) == 3:
                return tuple(int(c * 2, 16) for c in hex_color)
        except ValueError:
            pass
        raise InvalidInputError(f'invalid hex color: {name!r}')

    if key not in COLORS:
        known = ', '.join(sorted(COLORS))
        raise InvalidInputError(f'unknown color {name!r} (choose from: {known})')
    return COLORS[key]


def check_rgb(rgb):
    if len(rgb) != 3 or not all(isinstance(c, (int, np.integer)) and 0 <= c <= 255 for c in rgb):
        raise InvalidInputError(f'RGB color must be three integers in [0, 255], got {rgb!r}')
    return tuple(int(c) for c in rgb)


def to_color(color):
    """색 이름 또는 RGB 튜플을 검증된 RGB 튜플로 변환합니다."""
    if isinstance(color, tuple):
        return check_rgb(color)
    return resolve_color(color)


def to_bgr(rgb):
    r, g, b = rgb
    return (int(b), int(g), int(r))


def validate_thickness(thickness):
    if not 1 <= thickness <= MAX_THICKNESS:
        raise InvalidInputError(
            f'thickness must be between 1 and {MAX_THICKNESS}, got {thickness}')
    return thickness


def default_canvas_size(size):
    return max(MIN_CANVAS_SIZE, math.ceil(2 * size) + CANVAS_MARGIN)


def resolve_canvas_size(size, canvas_size=None):
    """캔버스 크기를 정하고 상한(MAX_CANVAS_SIZE)을 넘으면 거부합니다."""
    if canvas_size is None:
        canvas_size = default_canvas_size(size)
        if canvas_size > MAX_CANVAS_SIZE:
            max_size = (MAX_CANVAS_SIZE - CANVAS_MARGIN) // 2
            raise InvalidInputError(
                f'size {size:g} is too large for a {MAX_CANVAS_SIZE}px canvas (at most {max_size})')
        return canvas_size
    if not 0 < canvas_size <= MAX_CANVAS_SIZE:
        raise InvalidInputError(
            f'canvas size must be between 1 and {MAX_CANVAS_SIZE}, got {canvas_size}')
    return canvas_size


def new_canvas(width, height, background=DEFAULT_BACKGROUND):
    if width <= 0 or height <= 0:
        raise InvalidInputError(f'canvas size must be positive, got {width}x{height}')
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:] = to_bgr(background)
    return canvas


def to_pixels(vertices):
    """꼭짓점을 가장 가까운 정수 픽셀 좌표로 반올림합니다."""
    return np.array([[round(x), round(y)] for x, y in vertices], dtype=np.int32)


def draw_polygon(canvas, vertices, color, thickness=1, fill=False):
    """꼭짓점을 순서대로 잇고 마지막 점을 첫 점에 연결합니다.

    선은 8-연결 Bresenham (cv2.LINE_8) 으로 그리므로 끊김이 없습니다.

    Args:
        canvas: BGR 캔버스 (제자리에서 수정됨)
        vertices: Vertex 리스트
        color: RGB 튜플
        thickness: 선 두께 (1 이상)
        fill: True면 내부를 채움
    """
    validate_thickness(thickness)
    pts = to_pixels(vertices)
    bgr = to_bgr(color)
    if fill:
        cv2.fillPoly(canvas, [pts], bgr, cv2.LINE_8)
    cv2.polylines(canvas, [pts], True, bgr, thickness, cv2.LINE_8)
    return canvas


def draw_circumcircle(canvas, center, radius, color, thickness=1):
    cx, cy = center
    cv2.circle(canvas, (round(cx), round(cy)), round(radius), to_bgr(color), thickness, cv2.LINE_8)
    return canvas


def draw_vertex_markers(canvas, vertices, color, radius=3):
    bgr = to_bgr(color)
    for x, y in to_pixels(vertices):
        cv2.circle(canvas, (int(x), int(y)), radius, bgr, -1)
    return canvas


def draw_vertex_labels(canvas, vertices, center, angles, color):
    """각 꼭짓점 옆에 '(x, y) / 각도°' 를 씁니다. 좌표는 중심 기준, y는 위쪽이 양수.

    angles 는 이미지 좌표계(y 아래쪽) 각도이며, 라벨에는 좌표와 같은
    y 위쪽 기준으로 뒤집어 씁니다.
    """
    cx, cy = center
    bgr = to_bgr(color)
    for (x, y), (px, py), angle in zip(vertices, to_pixels(vertices), angles):
        label_angle = (-angle) % 360.0
        # Hershey 폰트는 ASCII만 지원하므로 도 기호는 'deg'로 씀
        text = f'({round(x - cx)}, {round(cy - y)}) / {label_angle:.1f}deg'
        cv2.putText(canvas, text, (int(px) + 6, int(py) - 6),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, bgr, 1, cv2.LINE_AA)
    return canvas


def render_polygon(n, size, color, thickness=DEFAULT_THICKNESS, fill=False,
                   offset_deg=DEFAULT_OFFSET_DEG, canvas_size=None,
                   background=DEFAULT_BACKGROUND, circle=False, markers=False,
                   labels=False):
    """정n각형이 그려진 BGR 이미지 배열을 반환합니다.

    입력 검증은 그리기 전에 모두 끝납니다.

    Args:
        n: 변의 개수
        size: 외접원의 반지름 (픽셀)
        color: 선 색 (이름 또는 RGB 튜플)
        thickness: 선 두께
        fill: 내부 채우기 여부
        offset_deg: 회전 각도 (도)
        canvas_size: 정사각형 캔버스 한 변 (None이면 size에 맞춰 자동)
        background: 배경 색 (이름 또는 RGB 튜플)
        circle: 외접원 표시
        markers: 꼭짓점에 점 표시
        labels: 꼭짓점 좌표/각도 표시
    """
    n = validate_sides(n)
    size = validate_size(size)
    rgb = to_color(color)
    bg = to_color(background)
    validate_thickness(thickness)
    validate_offset(offset_deg)
    canvas_size = resolve_canvas_size(size, canvas_size)

    canvas = new_canvas(canvas_size, canvas_size, bg)
    center = (canvas_size / 2, canvas_size / 2)
    vertices = generate_polygon_points(n, size, center=center, offset_deg=offset_deg)

    if circle:
        draw_circumcircle(canvas, center, size, resolve_color(CIRCLE_COLOR))
    draw_polygon(canvas, vertices, rgb, thickness=thickness, fill=fill)
    if markers:
        draw_vertex_markers(canvas, vertices, resolve_color(MARKER_COLOR))
    if labels:
        draw_vertex_labels(canvas, vertices, center, vertex_angles(n, offset_deg),
                           resolve_color(LABEL_COLOR))

    logger.debug('rendered %d-gon on %dx%d canvas', n, canvas_size, canvas_size)
    return canvas


def check_output_path(path):
    ext = os.path.splitext(path)[1].lower()
    if ext not in IMAGE_EXTENSIONS:
        raise InvalidInputError(
            f'unsupported image format {ext or path!r} (use {", ".join(IMAGE_EXTENSIONS)})')
    return ext


def save_image(path, image):
    """이미지를 인코딩하여 파일로 저장합니다. 쓰기 실패 시 OSError가 그대로 올라갑니다."""
    ext = check_output_path(path)
    ok, buf = cv2.imencode(ext, image)
    if not ok:
        raise OSError(f'could not encode image as {ext}')
    with open(path, 'wb') as f:
        f.write(buf.tobytes())
    logger.debug('wrote %d bytes to %s', buf.size, path)
    return path
