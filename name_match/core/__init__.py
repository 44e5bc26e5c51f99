"""Similarity algorithms, matchers and ensembles."""
