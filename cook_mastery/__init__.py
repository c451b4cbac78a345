"""Cook Mastery API."""
