"""Configuration package for vidcat."""
