"""seashell - a minimal line-oriented Unix shell."""
