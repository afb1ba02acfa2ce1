"""TripFlow bulk trip import engine."""
