"""
Expanding Substitution Axes
===========================

This example shows the two-stage pipeline on its own and then applied to a
suite file.

Features demonstrated:
- Normalizing explicit and numeric range axes
- Generating tuples in odometer order
- Planning a suite file and inspecting rendered requests
"""

from pathlib import Path

from reqsweep import build_plan, generate, load_suite, normalize


def main():
    """Expand a small axis set, then plan the example suite."""

    # 1. Normalize: ranges become strings, explicit lists pass through
    axes = normalize([["x", "y"], (0, 1, 2)])
    print(f"Normalized axes: {axes}")

    # 2. Generate: first axis changes slowest
    for values in generate(axes):
        print("  ", values)

    # 3. Plan a suite file
    suite = load_suite(Path(__file__).parent / "suites" / "sdbus_units.yaml")
    plan = build_plan(suite)
    print(plan.summary)
    for planned in plan.cases:
        print(f"#{planned.index + 1} {planned.case.message}: {planned.case.request_count} requests")


if __name__ == "__main__":
    main()
