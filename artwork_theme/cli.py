import argparse
import logging
import os

from .export import export_json, generate_readability_report, print_theme
from .theme import (
    FromImage,
    create_theme,
    default_presets,
    load_themes_from_json,
    merge_themes,
)
from .theme.synthesizer import DARKNESS_THRESHOLD, MINIMUM_CONTRAST_RATIO


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a light/dark UI color theme from cover artwork"
    )
    parser.add_argument(
        "image_path",
        nargs="?",
        default=None,
        help="Path to the cover artwork",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file)",
    )
    parser.add_argument(
        "--presets",
        metavar="JSON",
        help="Load a theme bundle and list it alongside the built-in presets",
    )
    parser.add_argument(
        "--title",
        help="Theme title (default: derived from filename)",
    )
    parser.add_argument(
        "--darkness-threshold",
        type=float,
        default=DARKNESS_THRESHOLD,
        help=f"Average luminance below which artwork displays on dark (default: {DARKNESS_THRESHOLD})",
    )
    parser.add_argument(
        "--min-contrast",
        type=float,
        default=MINIMUM_CONTRAST_RATIO,
        help=f"Minimum contrast of candidates against the background (default: {MINIMUM_CONTRAST_RATIO})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log why synthesis fell back to defaults",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Validate arguments
    if args.presets:
        if args.image_path:
            parser.error("Cannot use both image_path and --presets")
        _run_presets(args)
    elif args.image_path:
        if not 0.0 <= args.darkness_threshold <= 1.0:
            parser.error("--darkness-threshold must be between 0.0 and 1.0")
        if not 1.0 <= args.min_contrast <= 21.0:
            parser.error("--min-contrast must be between 1.0 and 21.0")
        _run_from_image(args)
    else:
        parser.error("Either image_path or --presets is required")


def _run_presets(args):
    """List the built-in presets merged with a theme bundle."""
    print(f"Loading themes: {args.presets}")

    themes = merge_themes(default_presets(), load_themes_from_json(args.presets))

    for theme in themes:
        try:
            print_theme(theme)
        except ValueError as e:
            print(f"\nSkipping incomplete theme: {e}")

    print(f"\n{len(themes)} themes available")


def _run_from_image(args):
    """Synthesize a theme from an image and export it."""
    image_path = args.image_path
    output_dir = args.output or os.path.dirname(image_path) or "."
    title = args.title or os.path.splitext(os.path.basename(image_path))[0]

    os.makedirs(output_dir, exist_ok=True)

    print(f"Analyzing: {image_path}")

    theme = create_theme(
        FromImage(
            image_path,
            title=title,
            darkness_threshold=args.darkness_threshold,
            minimum_contrast_ratio=args.min_contrast,
        )
    )

    print_theme(theme)
    report, _ = generate_readability_report(theme)
    print("\n" + report)

    theme_path = os.path.join(output_dir, f"{title}.json")
    export_json([theme], theme_path)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {theme_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
