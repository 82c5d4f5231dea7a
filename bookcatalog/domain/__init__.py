"""Domain layer - book entity, business rules and exceptions."""
