"""Document writers backing the rendering surface."""
