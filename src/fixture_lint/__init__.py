"""fixture-lint: run ESLint over categorized fixture files and check thresholds."""

__version__ = "0.1.0"
