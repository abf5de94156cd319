"""Rentals - rental property management and utility billing service."""
