#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import PatternLibrary, Universe


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    universe = Universe(12, 12)

    # Load a pattern
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        glider.apply_to(universe, row_offset=1, column_offset=1)

        print("Initial state:")
        print(universe.grid)
        print(f"Population: {universe.population}")
        print()

        # Run simulation for 10 generations
        for _ in range(10):
            universe.create_next_generation()
            print(f"Generation {universe.generation}:")
            print(universe.grid)
            print(f"Population: {universe.population}")
            print()

    # Boards round-trip through the text format
    reloaded = Universe.load_from_text(universe.grid)
    assert reloaded.grid == universe.grid
    print(f"Reloaded a {reloaded.height}x{reloaded.width} universe from text")


if __name__ == "__main__":
    main()
