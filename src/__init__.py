"""VM Inventory Browser core packages."""
