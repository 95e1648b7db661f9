from .json_export import export_json, theme_to_params
from .report import generate_readability_report, print_theme

__all__ = ["export_json", "theme_to_params", "generate_readability_report", "print_theme"]
