"""Core interfaces/abstractions.

Structural contracts (Protocol) for optional capabilities of the animal
variants.
"""
