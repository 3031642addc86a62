"""neo-upload application layer: validation constraints."""
