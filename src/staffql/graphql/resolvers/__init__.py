"""GraphQL resolvers, one per schema operation."""
