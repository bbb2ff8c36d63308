"""Domain core: exceptions, identifier handling, password hashing."""
