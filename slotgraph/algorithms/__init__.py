"""Graph algorithms mixed into Graph."""
