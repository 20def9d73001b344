"""Tests for hson."""
