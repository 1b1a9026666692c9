"""
Core domain models, checked arithmetic, configuration and contracts.

This module contains the foundational building blocks shared by every
pallet and by the runtime; it does not depend on either of them.
"""
