"""Tests for zoomphone."""
