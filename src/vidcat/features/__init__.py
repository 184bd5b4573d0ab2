"""Feature packages for vidcat."""
