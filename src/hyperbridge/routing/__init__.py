"""Routing: segment matcher, hash navigation and links.

Routes are registered in order; the first pattern that consumes the whole
path wins and a catch-all sends everything else to the default path.
"""
