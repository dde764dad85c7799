"""Tests for the classpath-infer CLI."""
