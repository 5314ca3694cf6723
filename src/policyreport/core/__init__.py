"""Derivation functions over policy report models."""
