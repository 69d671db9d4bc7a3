"""Framework adapters for linkbuilder."""
