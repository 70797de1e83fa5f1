import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from polyrecon import (
    InvalidDescriptor,
    PolygonDescriptor,
    Unsolvable,
    ValidationError,
    build,
    fit_scale,
    interior_angles,
    self_crossings,
    side_lengths,
    signed_area,
    to_viewport,
    validate,
)

logger = logging.getLogger(__name__)

EXIT_INVALID = 2
EXIT_UNSOLVABLE = 3


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_fields(value: Optional[str]) -> List[Optional[float]]:
    """Split a comma separated list; blank entries stay ``None``."""

    if not value:
        return []
    fields: List[Optional[float]] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            fields.append(None)
            continue
        try:
            fields.append(float(part))
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a number: {part!r}") from None
    return fields


def _parse_viewport(value: str) -> Tuple[float, float]:
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"viewport must look like WIDTHxHEIGHT, got {value!r}")
    try:
        width, height = float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"viewport must look like WIDTHxHEIGHT, got {value!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("viewport dimensions must be positive")
    return width, height


def _descriptor_from_args(args: argparse.Namespace) -> PolygonDescriptor:
    if args.regular is not None:
        return PolygonDescriptor.regular(args.regular, args.side_length)
    return PolygonDescriptor.from_fields(args.sides, args.angles)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="polyrecon",
        description="Reconstruct polygon vertices from side lengths and n-3 interior angles",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--sides",
        type=_parse_fields,
        help="Comma separated side lengths; blank entries count as zero",
    )
    source.add_argument(
        "--regular",
        type=int,
        metavar="N",
        help="Reconstruct a regular N-gon instead of explicit sides/angles",
    )
    parser.add_argument(
        "--angles",
        type=_parse_fields,
        default=[],
        help="Comma separated interior angles in degrees (n-3 of them)",
    )
    parser.add_argument(
        "--side-length",
        type=float,
        default=1.0,
        help="Side length used with --regular (default: 1)",
    )
    parser.add_argument(
        "--fit",
        type=_parse_viewport,
        metavar="WxH",
        help="Also print the fit-in scaling and viewport coordinates for a WxH viewport",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        descriptor = _descriptor_from_args(args)
        validate(descriptor)
    except (ValidationError, ValueError) as exc:
        logger.error("Invalid polygon descriptor: %s", exc)
        print(f"Invalid descriptor: {exc}")
        return EXIT_INVALID

    logger.info("Descriptor: sides=%s angles=%s", descriptor.sides, descriptor.angles)
    result = build(descriptor)
    if isinstance(result, InvalidDescriptor):
        print(f"Invalid descriptor: {'; '.join(result.problems)}")
        return EXIT_INVALID
    if isinstance(result, Unsolvable):
        print(f"Unsolvable: {result.reason}")
        return EXIT_UNSOLVABLE

    vertices = result.vertices
    print(f"Closure: {result.closure}")
    if result.unchecked:
        print("  (closing vertex was not checked for self-crossing)")
    print("Vertices:")
    for idx, (x, y) in enumerate(vertices):
        print(f"  {idx}: ({x:.6f}, {y:.6f})")
    print("Interior angles:")
    for idx, angle in enumerate(interior_angles(vertices)):
        print(f"  {idx}: {angle:.6f}")
    print("Side lengths:")
    for idx, length in enumerate(side_lengths(vertices)):
        print(f"  {idx}: {length:.6f}")
    print(f"Signed area: {signed_area(vertices):.6f}")

    crossings = self_crossings(vertices)
    if crossings:
        print("Self-crossings:")
        for i, j in crossings:
            print(f"  edge {i} x edge {j}")

    if args.fit:
        width, height = args.fit
        scaling = fit_scale(vertices, width, height)
        print("Scaling:")
        print(f"  center: ({scaling.center_x:.6f}, {scaling.center_y:.6f})")
        print(f"  factor: {scaling.scale_factor:.6f}")
        print("Viewport coordinates:")
        for idx, (x, y) in enumerate(to_viewport(vertices, scaling, width, height)):
            print(f"  {idx}: ({x:.6f}, {y:.6f})")

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
