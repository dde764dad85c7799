"""Command-line interface for classpath-infer."""
