"""classpath-infer - compile-time classpath inference for Java workspaces."""

__version__ = "0.1.0"
