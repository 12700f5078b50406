# This project was developed with assistance from AI tools.
"""Outbound CRM integrations (lead API and webhook)."""
