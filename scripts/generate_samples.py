"""
Write every preset pattern to .gol and .bgol sample files
"""
import argparse
from pathlib import Path

from tqdm import tqdm

from lifegrid.utils.formats import ASCII_SUFFIX, BINARY_SUFFIX, save_ascii, save_binary
from lifegrid.utils.patterns import get_all_patterns, place_pattern

PADDING = 4


def main():
    """Generate one ascii and one binary file per pattern."""
    parser = argparse.ArgumentParser(description="Export preset patterns as grid files.")
    parser.add_argument('-o', '--output-dir', type=str, default=None,
                        help='Directory for the files (default: data/samples).')
    parser.add_argument('--padding', type=int, default=PADDING,
                        help='Dead cells added around each pattern.')
    args = parser.parse_args()

    # Use absolute path to project root
    project_root = Path(__file__).parent.parent
    output_dir = Path(args.output_dir) if args.output_dir else project_root / "data" / "samples"
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Generating samples for each pattern...")
    print("=" * 60)

    written = 0
    for category_name, patterns in get_all_patterns().items():
        print(f"\nCategory: {category_name}")
        print("-" * 60)

        for pattern_name, pattern in tqdm(patterns.items(), desc=category_name):
            grid_size = (pattern.width + 2 * args.padding, pattern.height + 2 * args.padding)
            grid = place_pattern(grid_size, pattern)

            save_ascii(output_dir / f"{pattern_name}{ASCII_SUFFIX}", grid)
            save_binary(output_dir / f"{pattern_name}{BINARY_SUFFIX}", grid)
            written += 2

    print("\n" + "=" * 60)
    print(f"Wrote {written} files to {output_dir.absolute()}")
    print("=" * 60)


if __name__ == "__main__":
    main()
