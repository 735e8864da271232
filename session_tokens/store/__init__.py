from .backend import SessionStore, InMemoryStore
from .dynamodb import DynamoDBStore

__all__ = ["SessionStore", "InMemoryStore", "DynamoDBStore"]
