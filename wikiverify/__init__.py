"""Verify wikilinks across a tree of markdown documents."""
