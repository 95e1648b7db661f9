from ..color import contrast_ratio
from ..theme.model import VARIANTS, resolve_colors
from ..theme.selectors import MIN_PRIMARY_CONTRAST
from ..theme.synthesizer import MINIMUM_CONTRAST_RATIO


def generate_readability_report(theme):
    """Generate a readability report of each role against its background"""
    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {theme.title or '(untitled)'}")

    checks = [
        ("primary", MIN_PRIMARY_CONTRAST),
        ("secondary", MINIMUM_CONTRAST_RATIO),
        ("accent", MINIMUM_CONTRAST_RATIO),
    ]

    issues = []

    for variant in VARIANTS:
        colors = resolve_colors(theme, variant)
        bg = colors.background
        report.append(f"\n{variant.upper()} (background {bg.hex}, L: {bg.hsl[2]:.1f}%)")
        report.append("-" * 50)
        for role, min_contrast in checks:
            c = getattr(colors, role)
            cr = contrast_ratio(c, bg)

            status = "✓" if cr >= min_contrast else "✗ FAIL"
            if cr < min_contrast:
                issues.append((variant, role, c.hex, cr, min_contrast))

            report.append(
                f"  {role:10} {c.hex}  vs bg: {cr:4.1f}:1  (min {min_contrast}:1)  {status}"
            )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for variant, role, hex_val, achieved, required in issues:
            report.append(
                f"  - {variant} {role}: {hex_val} has {achieved:.1f}:1, needs {required}:1"
            )
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_theme(theme):
    """Print theme info"""
    print("\n" + "=" * 60)
    print(f"THEME: {theme.title or '(untitled)'}")
    print("=" * 60)

    for variant in VARIANTS:
        colors = resolve_colors(theme, variant)
        print(f"\n{variant.upper()}:")
        for role in ("background", "primary", "secondary", "accent"):
            c = getattr(colors, role)
            contrast = contrast_ratio(c, colors.background)
            print(f"  {role:12} {c.hex}  (contrast: {contrast:.1f}:1)")
