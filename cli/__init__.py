"""Command-line front-end for the simulator."""
