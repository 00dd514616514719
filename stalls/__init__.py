"""Stall registration UI and exporters."""
