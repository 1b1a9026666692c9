"""
Test suite for pallet-runtime

Contains:
- tests/unit/          : Unit tests for pallets, domain models, contracts and the block executor
"""
