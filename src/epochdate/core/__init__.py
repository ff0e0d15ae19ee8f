"""
Core value types, civil calendar helpers and error hierarchy.

Everything here is pure arithmetic over small immutable values and is
independent of any serialization format.
"""
