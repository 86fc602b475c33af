"""Database plumbing for the SQL-backed person store."""
