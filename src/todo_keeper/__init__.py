"""todo-keeper: a persistent task list with search and filters."""

__version__ = "0.1.0"
