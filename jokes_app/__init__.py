"""Jokes Web App - store, search and edit jokes."""
