"""Database package — declarative Base shared by every ORM model."""
