"""Bundled data files for whichpm."""
