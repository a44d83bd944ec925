#!/usr/bin/env python3
"""정다각형의 꼭짓점 좌표를 계산합니다."""

import logging
import math
from typing import List, NamedTuple, Tuple

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_OFFSET_DEG = -90.0  # 첫 꼭짓점이 위쪽을 향함 (이미지 좌표계는 y가 아래로 증가)


class InvalidInputError(ValueError):
    """잘못된 입력 (변의 개수, 크기, 색 이름 등)."""


class Vertex(NamedTuple):
    x: float
    y: float


def validate_sides(n):
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidInputError(f'number of sides must be an integer, got {n!r}')
    if n < 3:
        raise InvalidInputError(f'a polygon needs at least 3 sides, got {n}')
    return int(n)


def validate_size(size):
    try:
        size = float(size)
    except (TypeError, ValueError):
        raise InvalidInputError(f'size must be a number, got {size!r}')
    if not math.isfinite(size) or size <= 0:
        raise InvalidInputError(f'size must be a positive number, got {size}')
    return size


def validate_offset(offset_deg):
    try:
        offset_deg = float(offset_deg)
    except (TypeError, ValueError):
        raise InvalidInputError(f'offset must be a number, got {offset_deg!r}')
    if not math.isfinite(offset_deg):
        raise InvalidInputError(f'offset must be a finite number, got {offset_deg}')
    return offset_deg


def polygon_angles(n, offset_deg=DEFAULT_OFFSET_DEG):
    """각 꼭짓점의 각도(라디안)를 반환합니다. θ_i = 2π·i/n + offset"""
    n = validate_sides(n)
    offset_deg = validate_offset(offset_deg)
    return np.linspace(0, 2 * np.pi, n, endpoint=False) + np.deg2rad(offset_deg)


def generate_polygon_points(
    n: int,
    size: float,
    center: Tuple[float, float] = (0.0, 0.0),
    offset_deg: float = DEFAULT_OFFSET_DEG,
) -> List[Vertex]:
    """정n각형의 꼭짓점을 순서대로 생성합니다.

    Args:
        n: 변의 개수 (3 이상)
        size: 외접원의 반지름 (양수)
        center: 중심 좌표
        offset_deg: 회전 각도 (도 단위)

    Returns:
        Vertex 리스트. 인덱스가 이웃한 꼭짓점은 각도상으로도 이웃합니다.

    Raises:
        InvalidInputError: n < 3 이거나 size <= 0 인 경우
    """
    n = validate_sides(n)
    radius = validate_size(size)
    cx, cy = center

    vertices = [
        Vertex(cx + radius * math.cos(theta), cy + radius * math.sin(theta))
        for theta in polygon_angles(n, offset_deg)
    ]
    logger.debug('generated %d vertices (radius=%s, offset=%s)', n, radius, offset_deg)
    return vertices


def vertex_angles(n, offset_deg=DEFAULT_OFFSET_DEG):
    """각 꼭짓점의 각도를 [0, 360) 범위의 도 단위로 반환합니다."""
    n = validate_sides(n)
    offset_deg = validate_offset(offset_deg)
    return [(360.0 * i / n + offset_deg) % 360.0 for i in range(n)]
