"""Version 1 of the User CRUD API."""
