"""Feature transforms feeding the regression trainers."""
