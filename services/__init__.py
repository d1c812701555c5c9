"""Domain services: order-intent parsing, catalog contract, order preview."""
