"""Test suite for alchemist.

Test Structure:
- unit/: Unit tests mirroring packages/alchemist (core/<area>, cli)
- conftest.py: Shared fixtures (seeded generators, sample grammars)
"""
