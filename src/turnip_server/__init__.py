"""HTTP surface of the turnip pattern analysis engine."""
