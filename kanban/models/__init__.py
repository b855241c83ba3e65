from .task import DEFAULT_COLUMNS, Task

# Export all models for easy importing
__all__ = ["Task", "DEFAULT_COLUMNS"]
