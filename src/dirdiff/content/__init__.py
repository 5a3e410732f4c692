"""Leaf extraction, text reading and content comparison."""
