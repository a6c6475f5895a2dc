"""Backing services: transcript storage, conference registry, Discourse client."""
