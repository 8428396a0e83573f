"""fitjourney: workout shorthand logging and calorie dashboards."""

__version__ = "0.1.0"
