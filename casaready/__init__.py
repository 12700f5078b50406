# This project was developed with assistance from AI tools.
"""CasaReady home-buying lead engine."""
