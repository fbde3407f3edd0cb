"""Example: measure the angle between two lines and drag the dimension arc."""

import logging
import math

from dimkit import Angular2LineDimension, InvalidGeometryError, Line

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    first = Line.from_points((0.0, 0.0, 0.0), (4.0, 0.0, 0.0))
    second = Line.from_points((0.0, 0.0, 0.0), (2.0, 3.0, 0.0))
    dim = Angular2LineDimension.from_lines(first, second, offset=1.0)
    logger.info("Measured %.3f degrees around %s", dim.measurement, dim.center_point)

    dim.set_dimension_line_position((-1.0, -2.0))
    logger.info("Arc point %s at offset %.3f", dim.arc_definition_point, dim.offset)

    t = math.radians(45.0)
    rotation = [[math.cos(t), -math.sin(t), 0.0], [math.sin(t), math.cos(t), 0.0], [0.0, 0.0, 1.0]]
    dim.transform_by(rotation, (10.0, 0.0, 0.0))
    for name, point in dim.world_points().items():
        print(f"{name}: ({point[0]:.6f}, {point[1]:.6f}, {point[2]:.6f})")

    flatten = [[1.0, 1.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 1.0]]
    try:
        dim.transform_by(flatten, (0.0, 0.0, 0.0))
    except InvalidGeometryError as exc:
        logger.warning("Transformation refused: %s", exc)


if __name__ == "__main__":
    main()
