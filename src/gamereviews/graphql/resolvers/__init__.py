"""Resolver functions referenced by the GraphQL types, queries and mutations.

Resolvers translate between GraphQL types and stored records and delegate the
actual lookups and changes to ``gamereviews.store``.
"""
