"""
Transforms over run items: reasoning sanitizer, text helpers, serialization.

Submodules are imported directly; ``models.items`` depends on
``core.reasoning``, so nothing is re-exported here.
"""
