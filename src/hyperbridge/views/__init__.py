"""Views: hyperscript, selector parsing and the component lifecycle bridge."""
