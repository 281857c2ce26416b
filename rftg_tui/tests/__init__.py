"""Tests for rftg-tui."""
