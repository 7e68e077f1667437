"""Namespace for random number generators; it contains no generators at present."""