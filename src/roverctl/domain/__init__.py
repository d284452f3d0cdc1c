"""Pure domain logic: geometry, instruction interpretation, descriptor parsing."""
