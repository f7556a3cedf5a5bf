from .json_store import JsonBookRepository

__all__ = ["JsonBookRepository"]
