"""Domain layer for CardWizz identity.

Business rules for user identity, decoupled from the GraphQL surface and
from the persistence adapters.
"""
