"""Pure domain logic: build-number encoding and the menu command table."""
