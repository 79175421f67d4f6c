"""Declarative configuration discovery and resolution."""
