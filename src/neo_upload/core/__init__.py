"""Core domain of neo-upload: exceptions, value objects, protocols and entities."""
