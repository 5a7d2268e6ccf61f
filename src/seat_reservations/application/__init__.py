"""Application layer – event sourcing, CQRS and the reservation use cases."""
