"""Application services: resolvers, routes, jobs and authentication."""
