"""conduitpy command line interface."""
