from .database import DB, Base, db, filter_by, get_database, select


__all__ = ["Base", "DB", "db", "filter_by", "get_database", "select"]
