"""
Quickstart for motionpath.
- Parses an inline program
- Discretizes each accepted motion and prints waypoint counts

Run from the repository root:
    python examples/discretize_quickstart.py
"""

from motionpath import run_program
from motionpath.program import run_lines

PROGRAM = [
    "LIN X3.0 Y4.0 Z0.0",
    "CW X0 Y0 R5.0 A90.0",
    "LIN X1",  # too short, reported and skipped
    "LIN X3.0 Y4.0 Z2.0",
]


def main() -> None:
    result = run_lines(PROGRAM)
    for segment in result.segments:
        first, last = segment.waypoints[0], segment.waypoints[-1]
        print(f"{type(segment.motion).__name__}: {len(segment.waypoints)} waypoints {first} -> {last}")
    for diagnostic in result.diagnostics:
        print("diagnostic:", diagnostic)

    square = run_program("examples/square_with_arcs.cmmd")
    print(f"square_with_arcs.cmmd: {square.waypoint_count} waypoints")


if __name__ == "__main__":
    main()
