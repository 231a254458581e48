"""Domain layer: DTOs, value objects, ports and exceptions."""
