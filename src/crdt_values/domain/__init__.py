"""Domain layer: tagged scalar values and the typed values converted to them.

Everything here is immutable. Conversions in both directions are pure and
hold no shared state.
"""
