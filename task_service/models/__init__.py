from .task import Priority, Task

# Export all models for easy importing
__all__ = ["Priority", "Task"]
