"""Core reconciliation logic.

Module Structure:
    - beeswax/              : Low-level Beeswax REST client, entities and gateways
    - state.py              : Desired/observed state records
    - state_transformer.py  : State ↔ entity transformations
    - resources.py          : Resource and data-source adapters

Usage Pattern:
    Import explicitly when needed:
        from beeswax_provider.core.beeswax import BeeswaxClient, RoleService
        from beeswax_provider.core.resources import RoleResource
        from beeswax_provider.core.state import RoleState
"""
