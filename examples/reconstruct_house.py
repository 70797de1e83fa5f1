"""Example pipeline: reconstruct a house-shaped pentagon and fit it for display."""

from polyrecon import (
    PolygonDescriptor,
    Success,
    build,
    fit_scale,
    interior_angles,
    signed_area,
)

# square body 4 x 4 with a roof whose closing ridge is found by the builder
DESCRIPTOR = PolygonDescriptor(
    sides=(4.0, 4.0, 4.0, 2.8284271247461903, 2.8284271247461903),
    angles=(90.0, 90.0),
)


def main() -> None:
    result = build(DESCRIPTOR)
    if not isinstance(result, Success):
        print("Failed:", result)
        return
    print("Closure:", result.closure)
    for idx, ((x, y), angle) in enumerate(zip(result.vertices, interior_angles(result.vertices))):
        print(f"{idx}: ({x:.6f}, {y:.6f}) angle={angle:.3f}")
    print("Area:", signed_area(result.vertices))
    scaling = fit_scale(result.vertices, 640, 480)
    print(f"Fit: center=({scaling.center_x:.3f}, {scaling.center_y:.3f}) factor={scaling.scale_factor:.3f}")


if __name__ == "__main__":
    main()
