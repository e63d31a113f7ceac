"""Services of the tour: the demonstrations themselves."""
