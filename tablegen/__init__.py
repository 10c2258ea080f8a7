"""tablegen — generate C# entity classes from a database table's schema."""

__version__ = "1.0.0"
