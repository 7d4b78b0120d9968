"""Domain packages of the contract engine."""
