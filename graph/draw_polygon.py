#!/usr/bin/env python3
"""정다각형 이미지를 생성합니다.

사용 예:
  python draw_polygon.py 5 100 red
  python draw_polygon.py 8 350 blue --offset 22.5 --circle --markers --labels -o octagon.png
"""

import argparse
import logging
import sys

from regular_polygon import (
    DEFAULT_OFFSET_DEG,
    InvalidInputError,
    validate_offset,
    validate_sides,
    validate_size,
)
from render_polygon import (
    DEFAULT_BACKGROUND,
    DEFAULT_THICKNESS,
    check_output_path,
    render_polygon,
    resolve_canvas_size,
    resolve_color,
    save_image,
    validate_thickness,
)


def generate_regular_polygon(n, size, color, output_path=None, **options):
    """정n각형을 그려 이미지 파일로 저장합니다.

    Args:
        n: 변의 개수 (3 이상)
        size: 외접원의 반지름 (픽셀)
        color: 선 색 이름
        output_path: 저장 경로 (None이면 polygon_<n>.png)
        **options: render_polygon 에 전달할 옵션

    Returns:
        (이미지 numpy 배열, 저장된 파일 경로)
    """
    if output_path is None:
        output_path = f'polygon_{n}.png'
    # 파일을 쓰기 전에 형식부터 확인
    check_output_path(output_path)

    img = render_polygon(n, size, color, **options)
    save_image(output_path, img)
    print(f'생성: {output_path}')
    return img, output_path


def build_parser():
    p = argparse.ArgumentParser(description='정다각형 생성')
    p.add_argument('sides', help='변의 개수 (3 이상)')
    p.add_argument('size', help='외접원의 반지름 (픽셀)')
    p.add_argument('color', help='선 색 (red, green, blue, black, ... 또는 #rrggbb)')
    p.add_argument('-o', '--output', default=None, help='출력 경로 (기본: polygon_<n>.png)')
    p.add_argument('--thickness', type=int, default=DEFAULT_THICKNESS, help='선 두께')
    p.add_argument('--fill', action='store_true', help='내부 채우기')
    p.add_argument('--offset', type=float, default=DEFAULT_OFFSET_DEG,
                   help='회전 각도 (도, 기본 -90: 꼭짓점이 위쪽)')
    p.add_argument('--canvas', type=int, default=None,
                   help='캔버스 크기 (기본: max(1000, 2*size+200))')
    p.add_argument('--background', default=None, help='배경 색 (기본: 밝은 회색)')
    p.add_argument('--circle', action='store_true', help='외접원 표시')
    p.add_argument('--markers', action='store_true', help='꼭짓점에 점 표시')
    p.add_argument('--labels', action='store_true', help='꼭짓점 좌표와 각도 표시')
    p.add_argument('-v', '--verbose', action='store_true', help='디버그 로그 출력')
    return p


def parse_sides(value):
    try:
        n = int(value)
    except ValueError:
        raise InvalidInputError(f'number_of_sides: expected an integer, got {value!r}')
    try:
        return validate_sides(n)
    except InvalidInputError as e:
        raise InvalidInputError(f'number_of_sides: {e}')


def parse_size(value):
    try:
        return validate_size(value)
    except InvalidInputError as e:
        raise InvalidInputError(f'size: {e}')


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # 그리기 전에 모든 입력을 검증
    try:
        n = parse_sides(args.sides)
        size = parse_size(args.size)
        color = resolve_color(args.color)
        background = DEFAULT_BACKGROUND if args.background is None else resolve_color(args.background)
        validate_thickness(args.thickness)
        offset = validate_offset(args.offset)
        canvas_size = resolve_canvas_size(size, args.canvas)
        output_path = args.output if args.output is not None else f'polygon_{n}.png'
        check_output_path(output_path)
    except InvalidInputError as e:
        p.error(str(e))

    try:
        generate_regular_polygon(
            n, size, color,
            output_path=output_path,
            thickness=args.thickness,
            fill=args.fill,
            offset_deg=offset,
            canvas_size=canvas_size,
            background=background,
            circle=args.circle,
            markers=args.markers,
            labels=args.labels,
        )
    except OSError as e:
        print(f'{p.prog}: error: could not write {output_path}: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
