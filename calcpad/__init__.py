"""Embeddable numeric-entry calculator widget."""
